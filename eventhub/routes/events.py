from __future__ import annotations

from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr

from ..db import Store
from ..deps import get_store
from ..errors import NotFoundError, StoreError, ValidationError
from ..services.event_svc import list_events, get_event, create_event, delete_event

router = APIRouter()

# any JSON scalar is taken as text; only presence is checked
Scalar = Optional[Union[StrictStr, StrictInt, StrictFloat, StrictBool]]


class EventCreate(BaseModel):
    name: Scalar = None
    date: Scalar = None  # free text, not parsed
    location: Scalar = None


@router.get("/events")
def api_events_list(store: Store = Depends(get_store)):
    try:
        return list_events(store)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/events")
def api_event_create(body: EventCreate, store: Store = Depends(get_store)):
    try:
        new_id = create_event(store, body.model_dump())
        return {"id": new_id, "message": "Event added successfully."}
    except ValidationError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/events/{event_id}")
def api_event_get(event_id: str, store: Store = Depends(get_store)):
    try:
        return get_event(store, event_id)
    except NotFoundError as ne:
        raise HTTPException(status_code=404, detail=str(ne))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/events/{event_id}")
def api_event_delete(event_id: str, store: Store = Depends(get_store)):
    try:
        delete_event(store, event_id)
        return {"message": "Event deleted successfully."}
    except NotFoundError as ne:
        raise HTTPException(status_code=404, detail=str(ne))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
