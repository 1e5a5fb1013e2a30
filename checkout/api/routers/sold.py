#checkout/api/routers/sold.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from checkout.data.database import get_db
from checkout.domain.schemas import (
    EventSessionSoldOut,
    EventSoldOut,
    SaleOut,
    TicketsSoldIn,
)
from checkout.services.lock_service import LockService, get_lock_service
from checkout.services.sale_service import SaleService

router = APIRouter(prefix="/api/sold", tags=["tickets-sold"])


def get_service(
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
) -> SaleService:
    return SaleService(db=db, lock_service=lock_service)


@router.get("/v1/tickets/event", response_model=EventSoldOut)
def tickets_sold_for_event(
    event_id: Optional[int] = Query(None, alias="eventId"),
    svc: SaleService = Depends(get_service),
):
    return svc.tickets_sold_for_event(event_id)


@router.get("/v1/tickets/event/session", response_model=EventSessionSoldOut)
def tickets_sold_for_session(
    event_session_id: Optional[int] = Query(None, alias="eventSessionId"),
    svc: SaleService = Depends(get_service),
):
    return svc.tickets_sold_for_session(event_session_id)


@router.post("/v1/add/tickets/sold", response_model=SaleOut)
def add_tickets_sold(payload: TicketsSoldIn, svc: SaleService = Depends(get_service)):
    """
    Record the tickets of a cart and delete the cart, all or nothing.
    """
    return SaleOut(tickets_sold=svc.finalize_sale(payload.tickets))
