"""Persistence implementations for gatehouse_auth.

This package contains database-specific implementations of the
repository interfaces defined in gatehouse_auth.repositories.
"""
