"""Error taxonomy shared by services and routes.

ValidationError -> 400, NotFoundError -> 404, StoreError -> 500.
"""
from __future__ import annotations


class ValidationError(ValueError):
    """A required field is missing or empty."""


class NotFoundError(LookupError):
    """The targeted row does not exist."""


class StoreError(RuntimeError):
    """Any failure raised by the underlying SQLite store."""
