"""Authentication exceptions.

These exceptions are raised by the staybook_auth package and by the
customer login workflow. The API layer maps them to 401 responses.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when username or password is incorrect during login.

    Unknown usernames and wrong passwords share this error and its
    message so callers cannot tell which accounts exist.
    """

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class SigningKeyError(AuthError):
    """Raised when the token signing key cannot be loaded."""

    def __init__(self, message: str = "Signing key is not available"):
        super().__init__(message)
