#checkout/api/routers/cart.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from checkout.data.database import get_db
from checkout.domain.errors import AmbiguousStateError
from checkout.domain.schemas import (
    CartCreatedOut,
    CartDeletedOut,
    CartItemDeletedOut,
    CartItemIn,
    CartItemUpsertOut,
    CartLookupOut,
    CartRowOut,
    CreateCartIn,
    DeleteCartIn,
    DeleteCartItemIn,
    SubtotalOut,
)
from checkout.services.cart_service import CartService
from checkout.services.lock_service import LockService, get_lock_service

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
) -> CartService:
    return CartService(db=db, lock_service=lock_service)


@router.get("/v1", response_model=CartLookupOut)
def get_cart_id(
    session_id: Optional[str] = Query(None, alias="sessionId"),
    svc: CartService = Depends(get_service),
):
    """Cart id for a session: 0 when there is none, ambiguous when there are several."""
    try:
        cart_id = svc.get_cart_id_by_session(session_id)
    except AmbiguousStateError:
        return CartLookupOut(cart_id=None, ambiguous=True)
    return CartLookupOut(cart_id=cart_id or 0)


@router.get("/v1/contents/by/id", response_model=List[CartRowOut])
def get_contents_by_id(
    cart_id: Optional[int] = Query(None, alias="cartId"),
    svc: CartService = Depends(get_service),
):
    return svc.get_cart_contents(cart_id)


@router.get("/v1/contents/by/session", response_model=List[CartRowOut])
def get_contents_by_session(
    session_id: Optional[str] = Query(None, alias="sessionId"),
    svc: CartService = Depends(get_service),
):
    return svc.get_cart_contents_by_session(session_id)


@router.get("/v1/contents/total", response_model=SubtotalOut)
def get_subtotal(
    session_id: Optional[str] = Query(None, alias="sessionId"),
    svc: CartService = Depends(get_service),
):
    return SubtotalOut(subtotal=svc.get_cart_subtotal(session_id))


@router.post("/v1/add/cart", response_model=CartCreatedOut)
def create_cart(payload: CreateCartIn, svc: CartService = Depends(get_service)):
    """Create a cart, used when a client begins checkout."""
    return CartCreatedOut(cart_id=svc.create_cart(payload.session_id))


@router.post("/v1/add/cart/item", response_model=CartItemUpsertOut)
def upsert_cart_item(payload: CartItemIn, svc: CartService = Depends(get_service)):
    """Set the quantity of an item; an existing item is overwritten, quantity 0 removes it."""
    result = svc.upsert_cart_item(
        cart_id=payload.cart_id,
        event_session_id=payload.event_session_id,
        quantity=payload.quantity,
    )
    return CartItemUpsertOut(cart_item_id=result.cart_item_id, removed=result.removed)


@router.delete("/v1/delete/cart/item", response_model=CartItemDeletedOut)
def delete_cart_item(payload: DeleteCartItemIn, svc: CartService = Depends(get_service)):
    return CartItemDeletedOut(cart_item_id=svc.delete_cart_item(payload.cart_item_id))


@router.delete("/v1/delete/cart", response_model=CartDeletedOut)
def delete_cart(payload: DeleteCartIn, svc: CartService = Depends(get_service)):
    return CartDeletedOut(cart_id=svc.delete_cart(payload.cart_id))
