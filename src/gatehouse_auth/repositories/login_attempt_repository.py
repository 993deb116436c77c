"""Abstract repository interface for the login attempt audit log."""

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID


class LoginAttemptRepository(ABC):
    """Append-only store of authentication attempts."""

    @abstractmethod
    async def add(  # noqa: PLR0913
        self,
        identifier: str,
        success: bool,
        ip_address: str | None,
        user_id: UUID | None,
        created_at: datetime,
    ) -> int:
        """Append an attempt.

        Parameters
        ----------
        identifier
            The email or username the attempt was made with
        success
            Whether the attempt authenticated
        ip_address
            Origin address of the request, if known
        user_id
            The resolved user, if any
        created_at
            When the attempt happened

        Returns
        -------
        The id of the new record
        """

    @abstractmethod
    async def count_failures_since(self, identifier: str, since: datetime) -> int:
        """Count failed attempts for an identifier made after `since`."""
