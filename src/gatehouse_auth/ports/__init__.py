"""Ports (aka interfaces) for the collaborators of the engine."""

from gatehouse_auth.ports.identity import (
    Authenticatable,
    PasswordHasher,
    UserProvider,
)
from gatehouse_auth.ports.notifications import NotificationSink
from gatehouse_auth.ports.response import ResponsePort
from gatehouse_auth.ports.session import SessionStore

__all__ = [
    "Authenticatable",
    "NotificationSink",
    "PasswordHasher",
    "ResponsePort",
    "SessionStore",
    "UserProvider",
]
