from __future__ import annotations

from fastapi import Request

from .db import Store


def get_store(request: Request) -> Store:
    """FastAPI dependency: the Store the app was built with."""
    return request.app.state.store
