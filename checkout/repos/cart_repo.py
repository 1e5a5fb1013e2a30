# checkout/repos/cart_repo.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy import delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from checkout.data.models.cart import CartModel
from checkout.data.models.cart_item import CartItemModel
from checkout.data.models.event import EventModel
from checkout.data.models.event_session import EventSessionModel
from checkout.domain.errors import StoreFailureError

#INSERT ... ON CONFLICT DO UPDATE per dialect
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CartRepo:
    """Cart and cart item statements. Never commits; the service owns the transaction."""

    def __init__(self, db: Session):
        self.db = db

    def _contents_query(self):
        return (
            select(
                CartItemModel.cart_item_id,
                CartItemModel.cart_id,
                CartItemModel.event_session_id,
                CartItemModel.quantity,
                EventSessionModel.event_id,
                EventSessionModel.title.label("session_title"),
                EventSessionModel.price,
                EventModel.title.label("event_title"),
            )
            .join(EventSessionModel, CartItemModel.event_session_id == EventSessionModel.event_session_id)
            .join(EventModel, EventSessionModel.event_id == EventModel.event_id)
            .order_by(EventSessionModel.event_id.asc(), CartItemModel.cart_item_id.asc())
        )

    # =====================================================
    # CART
    # =====================================================
    def get_cart_ids_by_session(self, session_id: str) -> List[int]:
        return list(
            self.db.execute(
                select(CartModel.cart_id).where(CartModel.session_id == session_id)
            ).scalars()
        )

    def get_cart(self, cart_id: int) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.cart_id == cart_id).with_for_update()
        ).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.flush()
        return cart

    def delete_cart(self, cart_id: int) -> int:
        #items first, a cart item never outlives its cart
        self.db.execute(delete(CartItemModel).where(CartItemModel.cart_id == cart_id))
        result = self.db.execute(delete(CartModel).where(CartModel.cart_id == cart_id))
        return result.rowcount

    # =====================================================
    # CART ITEMS
    # =====================================================
    def upsert_cart_item(self, cart_id: int, event_session_id: int, quantity: int) -> int:
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)

        if insert is None:
            raise StoreFailureError(f"Cart item upsert is not supported on {dialect}")

        stmt = insert(CartItemModel).values(
            cart_id=cart_id,
            event_session_id=event_session_id,
            quantity=quantity,
        )
        #overwrite the quantity, never add to it
        stmt = stmt.on_conflict_do_update(
            index_elements=[CartItemModel.cart_id, CartItemModel.event_session_id],
            set_={"quantity": stmt.excluded.quantity},
        ).returning(CartItemModel.cart_item_id)

        return self.db.execute(stmt).scalar_one()

    def delete_cart_item_for_session(self, cart_id: int, event_session_id: int) -> int | None:
        stmt = (
            delete(CartItemModel)
            .where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.event_session_id == event_session_id,
            )
            .returning(CartItemModel.cart_item_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def delete_cart_item(self, cart_item_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.cart_item_id == cart_item_id)
        )
        return result.rowcount

    # =====================================================
    # READS
    # =====================================================
    def get_cart_contents(self, cart_id: int) -> List[Dict[str, Any]]:
        rows = self.db.execute(
            self._contents_query().where(CartItemModel.cart_id == cart_id)
        )
        return [dict(r._mapping) for r in rows]

    def get_subtotal(self, cart_id: int) -> Decimal:
        value = self.db.execute(
            select(func.sum(CartItemModel.quantity * EventSessionModel.price))
            .select_from(CartItemModel)
            .join(EventSessionModel, CartItemModel.event_session_id == EventSessionModel.event_session_id)
            .where(CartItemModel.cart_id == cart_id)
        ).scalar_one()

        #SUM over no rows is NULL
        if value is None:
            return Decimal("0")
        return Decimal(str(value))

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
