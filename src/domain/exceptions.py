"""
Infrastructure-level failures.

Expected business failures travel as Result errors. These exceptions cover
conditions a request cannot recover from.
"""


class ConfigurationError(Exception):
    """Deployment defect, e.g. the JWT signing key is not configured"""


class NotificationError(Exception):
    """The notification sender could not be reached"""
