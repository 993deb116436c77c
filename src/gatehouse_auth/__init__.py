"""Gatehouse Auth - session-based authentication engine.

This package verifies credentials, moves a request between anonymous and
authenticated, persists that state in a session store and supports a
remember-me path that never stores the password. Every attempt is audited
and lifecycle events are emitted to an injected notification sink.

Architecture:
    gatehouse_auth/
    ├── services/           # Credential check, attempt audit, remember tokens
    ├── session/            # SessionAuthenticator and session stores
    ├── ports/              # Protocols for external collaborators
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/
    ├── adapters/           # Starlette/FastAPI bindings
    ├── events.py           # Event names and in-process bus
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from gatehouse_auth import create_session_authenticator

    auth = create_session_authenticator(db_session, request, response)
    result = await auth.attempt({"email": email, "password": password})
"""

from gatehouse_auth.events import AuthEvent, EventBus
from gatehouse_auth.exceptions import AuthError, InvalidUserError
from gatehouse_auth.factory import create_session_authenticator
from gatehouse_auth.schemas import AuthFailureReason, AuthResult, RememberTokenData
from gatehouse_auth.services import (
    AttemptRecorder,
    CredentialVerifier,
    RememberTokenService,
)
from gatehouse_auth.session import (
    InMemorySessionStore,
    SessionAuthConfig,
    SessionAuthenticator,
)

__all__ = [
    # Session
    "SessionAuthenticator",
    "SessionAuthConfig",
    "InMemorySessionStore",
    "create_session_authenticator",
    # Services
    "AttemptRecorder",
    "CredentialVerifier",
    "RememberTokenService",
    # Events
    "AuthEvent",
    "EventBus",
    # Schemas
    "AuthFailureReason",
    "AuthResult",
    "RememberTokenData",
    # Exceptions
    "AuthError",
    "InvalidUserError",
]
