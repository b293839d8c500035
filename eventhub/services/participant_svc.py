from __future__ import annotations

# eventhub/services/participant_svc.py
from typing import Any

from .utils import parse_id, missing_fields, as_text
from ..db import Store
from ..errors import NotFoundError, ValidationError
from ..repository import event_repo, participant_repo

PARTICIPANT_FIELDS = ("name", "email")


def list_participants(store: Store, event_id) -> list[dict[str, Any]]:
    # an unknown event simply has no participants
    eid = parse_id(event_id)
    if eid is None:
        return []
    with store.connect() as conn:
        return [dict(r) for r in participant_repo.list_by_event(conn, eid)]


def create_participant(store: Store, event_id, payload: dict) -> int:
    if missing_fields(payload, PARTICIPANT_FIELDS):
        raise ValidationError("Please provide participant name and email.")
    eid = parse_id(event_id)
    if eid is None:
        raise NotFoundError("Event not found.")
    # existence check and insert share one write transaction so a concurrent
    # event delete cannot slip in between them
    with store.transaction() as conn:
        if not event_repo.exists(conn, eid):
            raise NotFoundError("Event not found.")
        return participant_repo.insert(conn, eid, as_text(payload["name"]), as_text(payload["email"]))


def delete_participant(store: Store, participant_id) -> None:
    pid = parse_id(participant_id)
    if pid is None:
        raise NotFoundError("Participant not found.")
    with store.connect() as conn:
        removed = participant_repo.delete(conn, pid)
    if removed == 0:
        raise NotFoundError("Participant not found.")
