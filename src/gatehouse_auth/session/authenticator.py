"""Session authenticator.

Moves one request's identity between anonymous and authenticated,
persists it in the session store and handles the remember-me cookie.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Mapping
from uuid import UUID

from gatehouse_auth.events import AuthEvent
from gatehouse_auth.exceptions import InvalidUserError
from gatehouse_auth.ports import (
    Authenticatable,
    NotificationSink,
    ResponsePort,
    SessionStore,
    UserProvider,
)
from gatehouse_auth.schemas import AuthResult
from gatehouse_auth.services import (
    AttemptRecorder,
    CredentialVerifier,
    RememberTokenService,
)
from gatehouse_auth.services.credential_verifier import PASSWORD_FIELD
from gatehouse_auth.session.config import SessionAuthConfig

logger = logging.getLogger(__name__)

IDENTIFIER_FIELDS = ("email", "username")


def _identifier(credentials: Mapping[str, Any]) -> str:
    """The identifying value of an attempt, email preferred over username."""
    for field in IDENTIFIER_FIELDS:
        value = credentials.get(field)
        if value:
            return str(value)
    return ""


class SessionAuthenticator:
    """
    Session-based authentication for a single request.

    One instance serves one request and is never shared, so the cached
    user needs no locking. Shared state lives in the injected stores.

    States:
        Anonymous -> Authenticated via login, login_by_id, attempt or
        login_by_remember_token; back to Anonymous via logout.

    Audit, notification, hash upgrade and purge failures are logged and
    never change the outcome of a login. Session store failures propagate.
    """

    def __init__(  # noqa: PLR0913
        self,
        config: SessionAuthConfig,
        provider: UserProvider,
        verifier: CredentialVerifier,
        recorder: AttemptRecorder,
        remember_tokens: RememberTokenService,
        session: SessionStore,
        response: ResponsePort,
        notifier: NotificationSink,
        origin_address: str | None = None,
        random_source: Callable[[], float] = random.random,
    ):
        self._config = config
        self._provider = provider
        self._verifier = verifier
        self._recorder = recorder
        self._remember_tokens = remember_tokens
        self._session = session
        self._response = response
        self._notifier = notifier
        self._origin_address = origin_address
        self._random = random_source
        self._user: Authenticatable | None = None

    async def attempt(
        self,
        credentials: Mapping[str, Any],
        remember: bool = False,
    ) -> AuthResult:
        """Check credentials and log the user in when they match.

        Every call is audited. Failures are returned unchanged and
        announced with a failed_login_attempt event.
        """
        identifier = _identifier(credentials)
        result = await self._verifier.check(credentials)

        if not result.success or result.user is None:
            await self._recorder.record(identifier, False, self._origin_address)
            self._user = None
            self._emit(AuthEvent.FAILED_LOGIN_ATTEMPT, self._redact(credentials))
            return result

        user = result.user
        await self._establish(user, remember)
        await self._recorder.record(identifier, True, self._origin_address, user.id)
        self._emit(AuthEvent.LOGIN, user)

        return result

    async def check(self, credentials: Mapping[str, Any]) -> AuthResult:
        """Check credentials without changing the session."""
        return await self._verifier.check(credentials)

    async def login(self, user: Authenticatable, remember: bool = False) -> bool:
        """Log the given user in."""
        await self._establish(user, remember)
        self._emit(AuthEvent.LOGIN, user)
        return True

    async def login_by_id(self, user_id: UUID, remember: bool = False) -> bool:
        """Log a user in by id.

        Raises
        ------
        InvalidUserError
            If no user exists with the given id
        """
        user = await self._provider.find_by_id(user_id)

        if user is None:
            await self._recorder.record(str(user_id), False, self._origin_address)
            raise InvalidUserError(user_id)

        return await self.login(user, remember)

    async def login_by_remember_token(self, token: str) -> bool:
        """Re-establish a session from a remember-me cookie value.

        The token is rotated on use when rotation is enabled, so a copied
        cookie stops working once the legitimate client uses it.
        """
        user_id = await self._remember_tokens.redeem(token)
        user = await self._provider.find_by_id(user_id) if user_id else None

        if user is None:
            self._delete_remember_cookie()
            return False

        if self._config.rotate_remember_tokens:
            rotated = await self._remember_tokens.rotate(token)
            if rotated is None:
                self._delete_remember_cookie()
                return False
            self._set_remember_cookie(rotated)

        await self._establish(user, remember=False)
        self._emit(AuthEvent.LOGIN, user)
        return True

    async def logout(self) -> None:
        """Log the current user out.

        Clears all session data but keeps the session usable for later
        one-shot data such as flash messages.
        """
        await self.logged_in()
        user = self._user

        self._session.clear()
        self._session.regenerate_id(destroy_old=True)

        if user is not None:
            await self._remember_tokens.revoke_all(user.id)
        self._delete_remember_cookie()

        self._emit(AuthEvent.LOGOUT, user)
        self._user = None

    async def logged_in(self) -> bool:
        """Whether a user is logged in, restoring them from the session."""
        if self._user is not None:
            return True

        stored_id = self._session.get(self._config.identity_field)
        if not stored_id:
            return False

        try:
            user_id = stored_id if isinstance(stored_id, UUID) else UUID(str(stored_id))
        except ValueError:
            logger.warning("Ignoring malformed user id in session")
            return False

        self._user = await self._provider.find_by_id(user_id)
        return self._user is not None

    async def forget(self, user_id: UUID | None = None) -> None:
        """Remove remember-me tokens of a user, the current one by default."""
        if user_id is None:
            if not await self.logged_in() or self._user is None:
                return
            user_id = self._user.id

        await self._remember_tokens.revoke_all(user_id)

    def get_user(self) -> Authenticatable | None:
        """Return the cached user without reading the session."""
        return self._user

    async def _establish(self, user: Authenticatable, remember: bool) -> None:
        self._user = user

        await self._recorder.record(user.email, True, self._origin_address, user.id)

        # New session id on privilege change defeats session fixation
        if self._config.regenerate_session:
            self._session.regenerate_id(destroy_old=True)

        self._session.set(self._config.identity_field, str(user.id))

        self._response.no_cache()

        if remember and self._config.allow_remembering:
            token = await self._remember_tokens.issue(user.id)
            self._set_remember_cookie(token)

        await self._maybe_purge()

        logger.info("User logged in: %s", user.id)

    async def _maybe_purge(self) -> None:
        if self._random() >= self._config.purge_probability:
            return
        try:
            purged = await self._remember_tokens.purge_expired()
        except Exception:
            logger.exception("Failed to purge expired remember tokens")
        else:
            logger.debug("Purged %d expired remember tokens", purged)

    def _set_remember_cookie(self, token: str) -> None:
        self._response.set_cookie(
            key=self._config.remember_cookie,
            value=token,
            max_age=self._config.remember_length,
            path=self._config.cookie_path,
            domain=self._config.cookie_domain,
            secure=self._config.cookie_secure,
            httponly=True,
            samesite=self._config.cookie_samesite,
        )

    def _delete_remember_cookie(self) -> None:
        self._response.delete_cookie(
            key=self._config.remember_cookie,
            path=self._config.cookie_path,
            domain=self._config.cookie_domain,
        )

    def _emit(self, event: AuthEvent, payload: Any) -> None:
        try:
            self._notifier.emit(event.value, payload)
        except Exception:
            logger.exception("Failed to emit %s event", event.value)

    @staticmethod
    def _redact(credentials: Mapping[str, Any]) -> dict[str, Any]:
        return {
            field: value
            for field, value in credentials.items()
            if field != PASSWORD_FIELD
        }
