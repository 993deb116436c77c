"""Login attempt auditing."""

import logging
from datetime import datetime, timedelta
from typing import Callable
from uuid import UUID

from gatehouse_auth.repositories import LoginAttemptRepository
from gatehouse_identity.domain.shared.time import utc_now

logger = logging.getLogger(__name__)


class AttemptRecorder:
    """Appends one audit row per authentication attempt.

    A failing audit store never changes the outcome of a login, so
    write errors are logged and reported as a missing record id.
    """

    def __init__(
        self,
        repository: LoginAttemptRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._repository = repository
        self._clock = clock

    async def record(
        self,
        identifier: str,
        success: bool,
        ip_address: str | None = None,
        user_id: UUID | None = None,
    ) -> int | None:
        """Record an attempt.

        Returns
        -------
        The id of the audit row, or None if it could not be written
        """
        try:
            return await self._repository.add(
                identifier=identifier,
                success=success,
                ip_address=ip_address,
                user_id=user_id,
                created_at=self._clock(),
            )
        except Exception:
            logger.exception(
                "Failed to record login attempt (identifier=%s, success=%s)",
                identifier,
                success,
            )
            return None

    async def recent_failures(self, identifier: str, window: timedelta) -> int:
        """Count failed attempts for an identifier within a trailing window."""
        since = self._clock() - window
        return await self._repository.count_failures_since(identifier, since)
