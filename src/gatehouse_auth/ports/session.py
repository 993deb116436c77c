"""Session store port."""

from typing import Any, Protocol


class SessionStore(Protocol):
    """Request-scoped key/value session storage.

    Implementations must keep the store usable after clear() and
    regenerate_id() so later one-shot data (flash messages) still works.
    """

    @property
    def session_id(self) -> str: ...

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def clear(self) -> None:
        """Remove every key from the current session."""
        ...

    def regenerate_id(self, destroy_old: bool = False) -> str:
        """Move the session to a fresh identifier and return it."""
        ...
