"""
Exceptions raised by the user lookup service
"""


class UserLookupError(Exception):
    """Base error rendered to REST clients as ``{"error": message}``."""

    status_code: int = 500
    message: str = "internal error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidUserIdError(UserLookupError):
    """Raised when a user id path segment is not an integer."""

    status_code = 400
    message = "invalid id"


class UserNotFoundError(UserLookupError):
    """Raised when no stored user has the requested id."""

    status_code = 404
    message = "not found"


class DatabaseConnectionError(Exception):
    """Raised when the storage connection cannot be established."""

    pass
