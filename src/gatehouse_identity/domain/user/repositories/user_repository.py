"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Union
from uuid import UUID

from gatehouse_identity.domain.user.aggregates.user import User
from gatehouse_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    This is the persistence provider the session authenticator looks
    users up through.
    """

    # Fields a credential lookup may filter on
    CREDENTIAL_FIELDS: frozenset[str] = frozenset({"email", "username"})

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def find_by_credentials(
        self,
        criteria: Mapping[str, Any],
    ) -> Optional[User]:
        """Find the single user matching every identifying field.

        Returns None when no user or more than one user matches, or when
        a field outside CREDENTIAL_FIELDS is given.
        """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""
