#checkout/api/routers/event_sessions.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from checkout.data.database import get_db
from checkout.domain.schemas import EventSessionCreatedOut, EventSessionIn, EventSessionOut
from checkout.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/event-sessions", tags=["event-sessions"])


def get_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


@router.get("/v1", response_model=List[EventSessionOut])
def get_sessions(
    event_id: Optional[int] = Query(None, alias="eventId"),
    svc: CatalogService = Depends(get_service),
):
    """Sessions of an event, cheapest first."""
    return svc.get_sessions_for_event(event_id)


@router.post("/v1/add/event/session", response_model=EventSessionCreatedOut)
def create_event_session(payload: EventSessionIn, svc: CatalogService = Depends(get_service)):
    return EventSessionCreatedOut(event_session_id=svc.create_event_session(payload))
