# app/exceptions/auth_exceptions.py
class AuthException(Exception):
    """Base exception for authentication errors."""
    pass


class InvalidCredentialsError(AuthException):
    """Raised when credentials are invalid."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class SessionExpiredError(AuthException):
    """Raised when session is expired."""

    def __init__(self, message: str = "Session has expired"):
        super().__init__(message)


class InvalidSessionError(AuthException):
    """Raised when session is invalid."""

    def __init__(self, message: str = "Invalid session"):
        super().__init__(message)


class UserNotActiveError(AuthException):
    """Raised when user account is not active."""

    def __init__(self, message: str = "User account is not active"):
        super().__init__(message)
