from __future__ import annotations

# eventhub/services/event_svc.py
from typing import Any

from .utils import parse_id, missing_fields, as_text
from ..db import Store
from ..errors import NotFoundError, ValidationError
from ..repository import event_repo

EVENT_FIELDS = ("name", "date", "location")


def list_events(store: Store) -> list[dict[str, Any]]:
    with store.connect() as conn:
        return [dict(r) for r in event_repo.list_all(conn)]


def get_event(store: Store, event_id) -> dict[str, Any]:
    eid = parse_id(event_id)
    if eid is None:
        raise NotFoundError("Event not found.")
    with store.connect() as conn:
        row = event_repo.get_one(conn, eid)
    if row is None:
        raise NotFoundError("Event not found.")
    return dict(row)


def create_event(store: Store, payload: dict) -> int:
    if missing_fields(payload, EVENT_FIELDS):
        raise ValidationError("Please provide name, date, and location.")
    name, date, location = (as_text(payload[k]) for k in EVENT_FIELDS)
    with store.connect() as conn:
        return event_repo.insert(conn, name, date, location)


def delete_event(store: Store, event_id) -> None:
    """Delete one event; its participants are removed by the ON DELETE CASCADE constraint."""
    eid = parse_id(event_id)
    if eid is None:
        raise NotFoundError("Event not found.")
    with store.connect() as conn:
        removed = event_repo.delete(conn, eid)
    if removed == 0:
        raise NotFoundError("Event not found.")
