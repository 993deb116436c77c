"""Authentication exceptions.

Credential failures are returned as AuthResult values; the exceptions
here signal misuse of the engine by calling code.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidUserError(AuthError):
    """Raised when a login is requested for a user id that does not exist."""

    def __init__(self, user_id: object = None):
        self.user_id = user_id
        message = "Unable to locate the specified user"
        if user_id is not None:
            message = f"{message}: {user_id}"
        super().__init__(message)
