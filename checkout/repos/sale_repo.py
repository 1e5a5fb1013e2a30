# checkout/repos/sale_repo.py
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from checkout.data.models.cart_item import CartItemModel
from checkout.data.models.event_session import EventSessionModel
from checkout.data.models.ticket_sold import TicketSoldModel


class SaleRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_ticket_sold(self, ticket: TicketSoldModel) -> TicketSoldModel:
        self.db.add(ticket)
        self.db.flush()
        return ticket

    def get_cart_item(self, cart_item_id: int, cart_id: int) -> CartItemModel | None:
        #row lock on postgres, a no-op on sqlite
        return self.db.execute(
            select(CartItemModel)
            .where(
                CartItemModel.cart_item_id == cart_item_id,
                CartItemModel.cart_id == cart_id,
            )
            .with_for_update()
        ).scalar_one_or_none()

    def delete_cart_item(self, cart_item_id: int, cart_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.cart_item_id == cart_item_id,
                CartItemModel.cart_id == cart_id,
            )
        )
        return result.rowcount

    def total_sold_for_event(self, event_id: int) -> int:
        value = self.db.execute(
            select(func.sum(TicketSoldModel.quantity))
            .select_from(TicketSoldModel)
            .join(EventSessionModel, TicketSoldModel.event_session_id == EventSessionModel.event_session_id)
            .where(EventSessionModel.event_id == event_id)
        ).scalar_one()
        return int(value or 0)

    def total_sold_for_session(self, event_session_id: int) -> int:
        value = self.db.execute(
            select(func.sum(TicketSoldModel.quantity))
            .where(TicketSoldModel.event_session_id == event_session_id)
        ).scalar_one()
        return int(value or 0)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
