"""Shared domain helpers."""

from gatehouse_identity.domain.shared.time import ensure_tz_aware, utc_now

__all__ = ["ensure_tz_aware", "utc_now"]
