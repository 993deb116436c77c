"""Exceptions raised by the user domain."""


class InvalidEmailError(ValueError):
    """Raised when an email address is empty or malformed."""


class EmailAlreadyExistsError(Exception):
    """Raised when saving a user whose email or username is taken."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")

