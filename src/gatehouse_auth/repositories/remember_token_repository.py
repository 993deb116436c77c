"""Abstract repository interface for remember-me tokens."""

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from gatehouse_auth.schemas import RememberTokenData


class RememberTokenRepository(ABC):
    """Store of selector/validator remember-me tokens.

    A user may hold many tokens at once (one per device).
    """

    @abstractmethod
    async def create(
        self,
        user_id: UUID,
        selector: str,
        hashed_validator: str,
        expires_at: datetime,
    ) -> UUID:
        """Store a new token.

        Parameters
        ----------
        user_id
            The user the token logs in
        selector
            Public lookup key of the token
        hashed_validator
            SHA-256 hex digest of the secret validator
        expires_at
            When the token stops being accepted

        Returns
        -------
        The token's unique identifier
        """

    @abstractmethod
    async def find_by_selector(self, selector: str) -> RememberTokenData | None:
        """Find a token by its selector, expired or not."""

    @abstractmethod
    async def update_validator(
        self,
        selector: str,
        current_hashed_validator: str,
        new_hashed_validator: str,
    ) -> bool:
        """Replace the validator hash of a token, compare-and-swap style.

        The update only applies while the stored hash still equals
        `current_hashed_validator`, so of two concurrent rotations of the
        same token exactly one succeeds.

        Returns
        -------
        True if the token was updated
        """

    @abstractmethod
    async def delete_by_selector(self, selector: str) -> bool:
        """Delete one token. Returns True if it existed."""

    @abstractmethod
    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every token of a user. Returns the number deleted."""

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete tokens that expired at or before `now`.

        Returns
        -------
        Number of tokens deleted
        """
