from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from reflections_api.api.deps import require_api_key
from reflections_api.db.session import get_db
from reflections_api.schemas.common import CreatedResponse, MessageResponse
from reflections_api.schemas.events import EventCreateRequest, EventOut, EventUpdateRequest
from reflections_api.services.resources import events

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=list[EventOut])
def list_events(db: Session = Depends(get_db)):
    return events.list_records(db)


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: int, db: Session = Depends(get_db)):
    event = events.get(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key)],
)
def create_event(payload: EventCreateRequest, db: Session = Depends(get_db)):
    return CreatedResponse(id=events.create(db, payload))


@router.put("/{event_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
def update_event(event_id: int, payload: EventUpdateRequest, db: Session = Depends(get_db)):
    if not events.update(db, event_id, payload):
        raise HTTPException(status_code=404, detail="Event not found")
    return MessageResponse(message="Event updated successfully")


@router.delete("/{event_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
def delete_event(event_id: int, db: Session = Depends(get_db)):
    if not events.delete(db, event_id):
        raise HTTPException(status_code=404, detail="Event not found")
    return MessageResponse(message="Event deleted successfully")
