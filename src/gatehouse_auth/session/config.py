"""Configuration consumed by the session authenticator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from gatehouse_config import Settings


@dataclass(frozen=True)
class SessionAuthConfig:
    """The subset of settings the session authenticator reads."""

    identity_field: str = "user_id"
    allow_remembering: bool = True
    remember_length: int = 30 * 24 * 60 * 60
    remember_cookie_name: str = "remember"
    rotate_remember_tokens: bool = True
    purge_probability: float = 0.2
    regenerate_session: bool = True
    cookie_domain: str | None = None
    cookie_path: str = "/"
    cookie_prefix: str = ""
    cookie_secure: bool = True
    cookie_samesite: Literal["lax", "strict", "none"] = "lax"

    @property
    def remember_cookie(self) -> str:
        """Full cookie name, including the configured prefix."""
        return f"{self.cookie_prefix}{self.remember_cookie_name}"

    @classmethod
    def from_settings(cls, settings: Settings) -> SessionAuthConfig:
        return cls(
            identity_field=settings.session_identity_field,
            allow_remembering=settings.allow_remembering,
            remember_length=settings.remember_length,
            remember_cookie_name=settings.remember_cookie_name,
            rotate_remember_tokens=settings.rotate_remember_tokens,
            purge_probability=settings.remember_purge_probability,
            regenerate_session=not settings.testing,
            cookie_domain=settings.cookie_domain,
            cookie_path=settings.cookie_path,
            cookie_prefix=settings.cookie_prefix,
            cookie_secure=settings.cookie_secure,
            cookie_samesite=settings.cookie_samesite,
        )
