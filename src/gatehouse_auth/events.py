"""Authentication lifecycle events and an in-process event bus."""

import logging
from collections import defaultdict
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]


class AuthEvent(str, Enum):
    """Events emitted by the session authenticator."""

    LOGIN = "login"
    LOGOUT = "logout"
    FAILED_LOGIN_ATTEMPT = "failed_login_attempt"


class EventBus:
    """Synchronous fan-out of events to subscribed handlers.

    Emission is fire-and-forget: a failing handler is logged and the
    remaining handlers still run.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event: str, handler: EventHandler) -> None:
        self._handlers[event].append(handler)

    def unsubscribe(self, event: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, payload: Any = None) -> None:
        for handler in list(self._handlers.get(event, [])):
            try:
                handler(payload)
            except Exception:
                logger.exception("Handler %r failed for event %s", handler, event)
