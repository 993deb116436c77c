"""Credential verification.

Checks submitted credentials against the persistence provider and the
password hashing primitive, upgrading outdated hashes in place.
"""

import logging
from typing import Any, Mapping

from gatehouse_auth.ports import PasswordHasher, UserProvider
from gatehouse_auth.schemas import AuthFailureReason, AuthResult

logger = logging.getLogger(__name__)

PASSWORD_FIELD = "password"


class CredentialVerifier:
    """Service for checking credentials without touching session state.

    Examples
    --------
    >>> verifier = CredentialVerifier(user_repository, password_service)
    >>> result = await verifier.check({"email": "a@x.com", "password": "..."})
    >>> result.success
    True
    """

    def __init__(self, provider: UserProvider, hasher: PasswordHasher):
        self._provider = provider
        self._hasher = hasher

    async def check(self, credentials: Mapping[str, Any]) -> AuthResult:
        """Check credentials against the stored user record.

        Parameters
        ----------
        credentials
            Field name to value, must hold the password plus at least one
            identifying field such as email or username

        Returns
        -------
        AuthResult.ok(user) on success, otherwise a failure with
        BAD_ATTEMPT (malformed input or no matching user) or
        INVALID_PASSWORD (user found, password wrong)
        """
        password = credentials.get(PASSWORD_FIELD)
        if not isinstance(password, str) or not password or len(credentials) < 2:
            return AuthResult.fail(AuthFailureReason.BAD_ATTEMPT)

        criteria = {
            field: value
            for field, value in credentials.items()
            if field != PASSWORD_FIELD
        }

        user = await self._provider.find_by_credentials(criteria)
        if user is None:
            return AuthResult.fail(AuthFailureReason.BAD_ATTEMPT)

        if not self._hasher.verify(password, user.password_hash):
            return AuthResult.fail(AuthFailureReason.INVALID_PASSWORD)

        if self._hasher.needs_rehash(user.password_hash):
            await self._rehash(user, password)

        return AuthResult.ok(user)

    async def _rehash(self, user: Any, password: str) -> None:
        """Upgrade the stored hash. Failures leave the old hash in place."""
        try:
            user.change_password_hash(self._hasher.hash(password))
            await self._provider.save(user)
        except Exception:
            logger.exception("Failed to upgrade password hash for user: %s", user.id)
        else:
            logger.info("Upgraded password hash for user: %s", user.id)
