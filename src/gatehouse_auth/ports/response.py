"""Response port: the parts of an HTTP response the engine writes to."""

from typing import Literal, Protocol


class ResponsePort(Protocol):
    """Cookie and caching controls of the outgoing response."""

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
    ) -> None: ...

    def delete_cookie(
        self,
        key: str,
        path: str = "/",
        domain: str | None = None,
    ) -> None: ...

    def no_cache(self) -> None:
        """Mark the response as not cacheable by browsers or proxies."""
        ...
