"""Identity ports: what the engine needs from the user side."""

from typing import Any, Mapping, Protocol
from uuid import UUID


class Authenticatable(Protocol):
    """A user record the engine can authenticate."""

    @property
    def id(self) -> UUID: ...

    @property
    def email(self) -> str: ...

    @property
    def password_hash(self) -> str: ...

    def change_password_hash(self, password_hash: str) -> None: ...


class UserProvider(Protocol):
    """Persistence provider for user records."""

    async def find_by_credentials(
        self,
        criteria: Mapping[str, Any],
    ) -> Authenticatable | None:
        """Find the single user matching every identifying field."""
        ...

    async def find_by_id(self, user_id: UUID) -> Authenticatable | None:
        """Find a user by their ID."""
        ...

    async def save(self, user: Any) -> None:
        """Persist changes made to a user."""
        ...


class PasswordHasher(Protocol):
    """Password hashing primitive."""

    def hash(self, password: str) -> str: ...

    def verify(self, password: str, password_hash: str) -> bool: ...

    def needs_rehash(self, password_hash: str) -> bool: ...
