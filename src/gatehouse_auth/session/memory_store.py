"""Server-side session store kept in process memory."""

import secrets
from typing import Any

SESSION_ID_BYTES = 32


class InMemorySessionStore:
    """Session store view over a shared dict of sessions.

    `sessions` maps session ids to their data and is shared between
    requests; each store instance is bound to one session id for the
    lifetime of a request. Suitable for single-process deployments and
    tests.
    """

    def __init__(
        self,
        sessions: dict[str, dict[str, Any]] | None = None,
        session_id: str | None = None,
    ):
        self._sessions = sessions if sessions is not None else {}
        if session_id is None or session_id not in self._sessions:
            session_id = session_id or self._new_id()
            self._sessions[session_id] = {}
        self._session_id = session_id

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def data(self) -> dict[str, Any]:
        return self._sessions[self._session_id]

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def clear(self) -> None:
        self.data.clear()

    def regenerate_id(self, destroy_old: bool = False) -> str:
        old_id = self._session_id
        new_id = self._new_id()
        self._sessions[new_id] = dict(self._sessions[old_id])
        if destroy_old:
            del self._sessions[old_id]
        self._session_id = new_id
        return new_id

    def _new_id(self) -> str:
        while True:
            session_id = secrets.token_urlsafe(SESSION_ID_BYTES)
            if session_id not in self._sessions:
                return session_id
