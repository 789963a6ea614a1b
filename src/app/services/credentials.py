"""
Credential Store

Password hashing, verification and complexity policy.
"""

from functools import lru_cache

import bcrypt

from config import ApplicationConfig
from src.libs.result import Error, Result, Return

# bcrypt only looks at the first 72 bytes of the input
BCRYPT_MAX_BYTES = 72
MIN_PASSWORD_LENGTH = 8


def hash_password(password: str) -> str:
    """
    Hash a password with bcrypt and a fresh random salt.

    Args:
        password: Plain text password (already validated)

    Returns:
        60-char bcrypt hash string
    """
    rounds = int(ApplicationConfig.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Constant-time check of a password against a stored bcrypt hash.

    Returns False on mismatch. Raises ValueError if password_hash is not a
    bcrypt hash.
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        # The policy never lets such a password be stored
        return False
    return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))


def validate_password(password: str) -> Result[None]:
    """
    Validate password complexity.

    Rules: at least 8 characters, at most 72 bytes, and at least one
    upper-case letter, lower-case letter, digit and symbol.

    Returns:
        Result with None if valid, or INVALID_PASSWORD listing unmet rules
    """
    problems = []
    if len(password) < MIN_PASSWORD_LENGTH:
        problems.append(f"must be at least {MIN_PASSWORD_LENGTH} characters long")
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        problems.append(f"must be at most {BCRYPT_MAX_BYTES} bytes long")
    if not any(c.isupper() for c in password):
        problems.append("must contain an uppercase letter")
    if not any(c.islower() for c in password):
        problems.append("must contain a lowercase letter")
    if not any(c.isdigit() for c in password):
        problems.append("must contain a number")
    if not any(not c.isalnum() and not c.isspace() for c in password):
        problems.append("must contain a special character")

    if problems:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                "Password does not meet requirements",
                details=problems,
            )
        )

    return Return.ok(None)


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))


def dummy_verify(password: str) -> bool:
    """
    Run one bcrypt check against a throwaway hash.

    Used when the email is unknown so login timing does not reveal whether
    an account exists. Always returns False.
    """
    password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    bcrypt.checkpw(password_bytes, _dummy_hash(int(ApplicationConfig.BCRYPT_ROUNDS)))
    return False
