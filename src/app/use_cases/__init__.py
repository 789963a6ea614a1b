"""
Use Cases

Organized into domain folders:
- auth/: Login and password recovery
- users/: Registration, profile and favorites
- ratings/: Film ratings and their aggregate
"""
