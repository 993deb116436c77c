"""Adapters from web framework objects to the engine ports."""

from gatehouse_auth.adapters.starlette import (
    StarletteResponseAdapter,
    StarletteSessionStore,
    client_address,
)

__all__ = ["StarletteResponseAdapter", "StarletteSessionStore", "client_address"]
