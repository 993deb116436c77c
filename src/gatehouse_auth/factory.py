"""Composition of a request-scoped SessionAuthenticator."""

from fastapi import Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse_auth.adapters import (
    StarletteResponseAdapter,
    StarletteSessionStore,
    client_address,
)
from gatehouse_auth.events import EventBus
from gatehouse_auth.persistence.sqlalchemy import (
    LoginAttemptRepositorySQLAlchemy,
    RememberTokenRepositorySQLAlchemy,
)
from gatehouse_auth.ports import NotificationSink
from gatehouse_auth.services import (
    AttemptRecorder,
    CredentialVerifier,
    RememberTokenService,
)
from gatehouse_auth.session import SessionAuthConfig, SessionAuthenticator
from gatehouse_config import Settings, get_settings
from gatehouse_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)
from gatehouse_identity.services import PasswordHashingService


def create_session_authenticator(
    db_session: AsyncSession,
    request: Request,
    response: Response,
    settings: Settings | None = None,
    notifier: NotificationSink | None = None,
) -> SessionAuthenticator:
    """Wire a SessionAuthenticator for one request.

    Parameters
    ----------
    db_session
        Database session of the request; the caller commits it
    request
        The incoming request, with SessionMiddleware installed
    response
        The response that receives cookies and cache headers
    settings
        Application settings (defaults to get_settings())
    notifier
        Receiver of lifecycle events (defaults to a fresh EventBus)
    """
    settings = settings or get_settings()

    users = UserRepositorySQLAlchemy(db_session)
    password_service = PasswordHashingService(rounds=settings.password_hash_rounds)

    return SessionAuthenticator(
        config=SessionAuthConfig.from_settings(settings),
        provider=users,
        verifier=CredentialVerifier(users, password_service),
        recorder=AttemptRecorder(LoginAttemptRepositorySQLAlchemy(db_session)),
        remember_tokens=RememberTokenService(
            RememberTokenRepositorySQLAlchemy(db_session),
            remember_length=settings.remember_length,
        ),
        session=StarletteSessionStore(request),
        response=StarletteResponseAdapter(response),
        notifier=notifier if notifier is not None else EventBus(),
        origin_address=client_address(request, settings.trust_proxy_headers),
    )
