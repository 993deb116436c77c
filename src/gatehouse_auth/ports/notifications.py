"""Notification port for authentication lifecycle events."""

from typing import Any, Protocol


class NotificationSink(Protocol):
    """Fire-and-forget receiver of lifecycle events."""

    def emit(self, event: str, payload: Any = None) -> None: ...
