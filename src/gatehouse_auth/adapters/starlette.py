"""Adapters binding the engine ports to Starlette/FastAPI requests.

- StarletteSessionStore: SessionStore over ``request.session``
  (requires SessionMiddleware)
- StarletteResponseAdapter: ResponsePort over a Response
- client_address: origin address of a request
"""

import secrets
from typing import Any, Literal

from fastapi import Request, Response

SESSION_ID_KEY = "_session_id"
SESSION_ID_BYTES = 32

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
}


class StarletteSessionStore:
    """SessionStore over Starlette's cookie-backed ``request.session``.

    The session payload travels in a signed cookie, so there is no server
    side file to destroy. The session id is a random value kept inside the
    payload; regenerating it changes the signed cookie the client holds.
    """

    def __init__(self, request: Request):
        self._session = request.session
        if SESSION_ID_KEY not in self._session:
            self._session[SESSION_ID_KEY] = secrets.token_urlsafe(SESSION_ID_BYTES)

    @property
    def session_id(self) -> str:
        return self._session[SESSION_ID_KEY]

    def get(self, key: str, default: Any = None) -> Any:
        return self._session.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._session[key] = value

    def clear(self) -> None:
        session_id = self._session.get(SESSION_ID_KEY)
        self._session.clear()
        if session_id is not None:
            self._session[SESSION_ID_KEY] = session_id

    def regenerate_id(self, destroy_old: bool = False) -> str:
        # destroy_old has nothing to remove for cookie-backed sessions
        session_id = secrets.token_urlsafe(SESSION_ID_BYTES)
        self._session[SESSION_ID_KEY] = session_id
        return session_id


class StarletteResponseAdapter:
    """ResponsePort over a Starlette/FastAPI Response."""

    def __init__(self, response: Response):
        self._response = response

    def set_cookie(  # noqa: PLR0913
        self,
        key: str,
        value: str = "",
        max_age: int | None = None,
        path: str = "/",
        domain: str | None = None,
        secure: bool = False,
        httponly: bool = False,
        samesite: Literal["lax", "strict", "none"] | None = "lax",
    ) -> None:
        self._response.set_cookie(
            key=key,
            value=value,
            max_age=max_age,
            path=path,
            domain=domain,
            secure=secure,
            httponly=httponly,
            samesite=samesite,
        )

    def delete_cookie(
        self,
        key: str,
        path: str = "/",
        domain: str | None = None,
    ) -> None:
        self._response.delete_cookie(key=key, path=path, domain=domain)

    def no_cache(self) -> None:
        self._response.headers.update(NO_CACHE_HEADERS)


def client_address(request: Request, trust_proxy_headers: bool = False) -> str | None:
    """Return the origin address of a request.

    The first X-Forwarded-For entry is only honoured when the app runs
    behind a trusted proxy.
    """
    if trust_proxy_headers:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip() or None
    return request.client.host if request.client else None
