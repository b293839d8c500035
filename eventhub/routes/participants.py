from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..db import Store
from ..deps import get_store
from ..errors import NotFoundError, StoreError, ValidationError
from ..services.participant_svc import list_participants, create_participant, delete_participant
from .events import Scalar

router = APIRouter()


class ParticipantCreate(BaseModel):
    name: Scalar = None
    email: Scalar = None  # format not checked


@router.get("/events/{event_id}/participants")
def api_participants_list(event_id: str, store: Store = Depends(get_store)):
    try:
        return list_participants(store, event_id)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/events/{event_id}/participants")
def api_participant_create(event_id: str, body: ParticipantCreate, store: Store = Depends(get_store)):
    try:
        new_id = create_participant(store, event_id, body.model_dump())
        return {"id": new_id, "message": "Participant added successfully."}
    except ValidationError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except NotFoundError as ne:
        raise HTTPException(status_code=404, detail=str(ne))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/participants/{participant_id}")
def api_participant_delete(participant_id: str, store: Store = Depends(get_store)):
    try:
        delete_participant(store, participant_id)
        return {"message": "Participant deleted successfully."}
    except NotFoundError as ne:
        raise HTTPException(status_code=404, detail=str(ne))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
