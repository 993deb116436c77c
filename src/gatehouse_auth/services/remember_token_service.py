"""Remember-me token service.

Implements split selector/validator tokens: the selector is a public
lookup key, the validator a secret whose SHA-256 hash is the only thing
stored. A stolen database therefore yields no usable token, and the hash
comparison runs in constant time.

See https://paragonie.com/blog/2015/04/secure-authentication-php-with-long-term-persistence
"""

import hashlib
import hmac
import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable
from uuid import UUID

from gatehouse_auth.repositories import RememberTokenRepository
from gatehouse_auth.schemas import RememberTokenData
from gatehouse_identity.domain.shared.time import utc_now

logger = logging.getLogger(__name__)

SELECTOR_BYTES = 12  # 24 hex characters
VALIDATOR_BYTES = 20  # 40 hex characters
TOKEN_SEPARATOR = ":"


def hash_validator(validator: str) -> str:
    return hashlib.sha256(validator.encode("utf-8")).hexdigest()


def split_token(token: str) -> tuple[str, str] | None:
    """Split a token into (selector, validator), None if malformed."""
    selector, separator, validator = token.partition(TOKEN_SEPARATOR)
    if not separator or not selector or not validator:
        return None
    return selector, validator


class RememberTokenService:
    """Service for issuing, redeeming and revoking remember-me tokens.

    Examples
    --------
    >>> service = RememberTokenService(repository, remember_length=86400)
    >>> token = await service.issue(user_id)
    >>> await service.redeem(token) == user_id
    True
    """

    def __init__(
        self,
        repository: RememberTokenRepository,
        remember_length: int,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the remember token service.

        Parameters
        ----------
        repository
            Store for the token rows
        remember_length
            Seconds a freshly issued token stays valid
        clock
            Source of the current time (timezone-aware)
        """
        if remember_length <= 0:
            msg = "remember_length must be positive"
            raise ValueError(msg)

        self._repository = repository
        self._remember_length = timedelta(seconds=remember_length)
        self._clock = clock

    async def issue(self, user_id: UUID) -> str:
        """Create and store a token for a user.

        Returns
        -------
        The opaque "selector:validator" token string to hand to the client
        """
        selector = secrets.token_hex(SELECTOR_BYTES)
        validator = secrets.token_hex(VALIDATOR_BYTES)
        expires_at = self._clock() + self._remember_length

        await self._repository.create(
            user_id=user_id,
            selector=selector,
            hashed_validator=hash_validator(validator),
            expires_at=expires_at,
        )
        logger.debug("Issued remember token for user: %s", user_id)

        return f"{selector}{TOKEN_SEPARATOR}{validator}"

    async def redeem(self, token: str) -> UUID | None:
        """Validate a token.

        Unknown, tampered and expired tokens are all reported the same way.

        Returns
        -------
        The user id the token belongs to, None if it is not valid
        """
        record = await self._find_valid(token)
        return record.user_id if record else None

    async def rotate(self, token: str) -> str | None:
        """Replace the validator of a valid token, keeping its expiry.

        Returns
        -------
        The new token string, None if the given token is not valid
        """
        record = await self._find_valid(token)
        if record is None:
            return None

        validator = secrets.token_hex(VALIDATOR_BYTES)
        updated = await self._repository.update_validator(
            record.selector,
            record.hashed_validator,
            hash_validator(validator),
        )
        if not updated:
            # Another request rotated the same token first
            logger.warning(
                "Remember token rotated concurrently for user: %s",
                record.user_id,
            )
            return None

        return f"{record.selector}{TOKEN_SEPARATOR}{validator}"

    async def revoke_all(self, user_id: UUID) -> int:
        """Remove every token of a user (all devices)."""
        deleted = await self._repository.delete_all_for_user(user_id)
        logger.debug("Revoked %d remember tokens for user: %s", deleted, user_id)
        return deleted

    async def purge_expired(self) -> int:
        """Remove tokens past their expiry. Safe to run repeatedly."""
        return await self._repository.delete_expired(self._clock())

    async def _find_valid(self, token: str) -> RememberTokenData | None:
        parts = split_token(token)
        if parts is None:
            return None
        selector, validator = parts

        record = await self._repository.find_by_selector(selector)
        if record is None:
            return None

        if not hmac.compare_digest(record.hashed_validator, hash_validator(validator)):
            logger.warning(
                "Remember token validator mismatch for user: %s",
                record.user_id,
            )
            return None

        if record.is_expired(self._clock()):
            await self._repository.delete_by_selector(selector)
            return None

        return record
