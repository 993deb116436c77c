"""Session authentication: the authenticator, its config and session stores."""

from gatehouse_auth.session.authenticator import SessionAuthenticator
from gatehouse_auth.session.config import SessionAuthConfig
from gatehouse_auth.session.memory_store import InMemorySessionStore

__all__ = ["InMemorySessionStore", "SessionAuthConfig", "SessionAuthenticator"]
