#checkout/api/routers/events.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from checkout.data.database import get_db
from checkout.domain.schemas import EventCreatedOut, EventIn, EventOut, EventUpdateIn, SuccessOut
from checkout.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/events", tags=["events"])


def get_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


@router.get("/v1", response_model=List[EventOut])
def get_event(
    event_id: Optional[int] = Query(None, alias="eventId"),
    svc: CatalogService = Depends(get_service),
):
    return svc.get_event(event_id)


@router.get("/v1/all", response_model=List[EventOut])
def list_events(svc: CatalogService = Depends(get_service)):
    return svc.list_events()


@router.post("/v1/add/event", response_model=EventCreatedOut)
def create_event(payload: EventIn, svc: CatalogService = Depends(get_service)):
    return EventCreatedOut(event_id=svc.create_event(payload))


@router.post("/v1/update/event", response_model=SuccessOut)
def update_event(payload: EventUpdateIn, svc: CatalogService = Depends(get_service)):
    return SuccessOut(success=svc.update_event(payload))
