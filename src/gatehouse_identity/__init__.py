"""Gatehouse Identity - user records and password hashing.

This package provides the user side of authentication:
- User aggregate and Email value object
- UserRepository, the persistence provider used for credential lookups
- Password hashing with bcrypt, including rehash detection

The session authentication engine itself lives in gatehouse_auth and
depends on this package only through its ports.
"""

from gatehouse_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserRepository,
)
from gatehouse_identity.services import PasswordHashingService

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserRepository",
    # Services
    "PasswordHashingService",
]
