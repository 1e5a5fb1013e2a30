# checkout/services/sale_service.py
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from checkout.data.models.ticket_sold import TicketSoldModel
from checkout.domain.errors import InvalidInputError, NotFoundError
from checkout.domain.schemas import TicketIn
from checkout.repos.cart_repo import CartRepo
from checkout.repos.sale_repo import SaleRepo
from checkout.services.lock_service import LockService
from checkout.services.notification_service import NotificationService
from checkout.utils.logging import get_logger
from checkout.utils.store import require, store_failure

logger = get_logger(__name__)


class SaleService:
    """
    Ticket sales: turning a cart into TICKETS_SOLD rows, and the sold totals.
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        notification_service: NotificationService | None = None,
    ):
        self.repo = SaleRepo(db)
        self.cart_repo = CartRepo(db)
        self.lock_service = lock_service
        self.notification_service = notification_service or NotificationService()

    def finalize_sale(self, tickets: Optional[List[TicketIn]]) -> int:
        """
        Use case: finalize a cart.

        1. insert one TICKETS_SOLD row per ticket, using the stored cart item
        2. delete the cart item each ticket came from
        3. delete the cart (leftover items first, then the cart row)

        All three steps run in one transaction under the cart lock, so either
        every ticket is recorded and the cart is gone, or nothing changes.

        Raises:
            InvalidInputError: tickets absent or empty, tickets from more than one cart,
                or a ticket whose cart item is not in that cart.
            NotFoundError: the cart does not exist, e.g. it was already finalized.
            CartLockedError: another request holds the cart lock.
            StoreFailureError: any store error; the transaction is rolled back.
        """
        if not tickets:
            raise InvalidInputError("Tickets cannot be null or empty.")

        cart_ids = {t.cart_item.cart_id for t in tickets}
        if len(cart_ids) > 1:
            raise InvalidInputError(
                f"All tickets must come from the same cart, got carts {sorted(cart_ids)}."
            )

        cart_id = tickets[0].cart_item.cart_id
        logger.info(f"Finalizing sale of {len(tickets)} ticket line(s) from cart {cart_id}")

        with self.lock_service.cart_lock(cart_id):
            with store_failure(self.repo, "finalize sale"):
                #a cart finalized by an earlier request is gone by now
                if self.cart_repo.get_cart(cart_id) is None:
                    self.repo.rollback()
                    raise NotFoundError(f"Cart {cart_id} does not exist.")

                for ticket in tickets:
                    item_id = ticket.cart_item.cart_item_id
                    item = self.repo.get_cart_item(item_id, cart_id)

                    if item is None:
                        self.repo.rollback()
                        raise InvalidInputError(f"Cart item {item_id} is not in cart {cart_id}.")

                    #event session and quantity come from the stored item, not the request
                    if (item.event_session_id, item.quantity) != (
                        ticket.cart_item.event_session_id,
                        ticket.cart_item.quantity,
                    ):
                        logger.warning(
                            f"Ticket for cart item {item_id} sent event session "
                            f"{ticket.cart_item.event_session_id} x{ticket.cart_item.quantity}, "
                            f"cart holds {item.event_session_id} x{item.quantity}"
                        )

                    self.repo.add_ticket_sold(
                        TicketSoldModel(
                            event_session_id=item.event_session_id,
                            quantity=item.quantity,
                            first_name=ticket.first_name,
                            last_name=ticket.last_name,
                            email=ticket.email,
                            phone=ticket.phone,
                            company=ticket.company,
                        )
                    )

                for ticket in tickets:
                    item_id = ticket.cart_item.cart_item_id

                    #a cart item listed twice is only deleted once
                    if self.repo.delete_cart_item(item_id, cart_id) != 1:
                        self.repo.rollback()
                        raise InvalidInputError(f"Cart item {item_id} is listed more than once.")

                self.cart_repo.delete_cart(cart_id)
                self.repo.commit()

        logger.info(f"Sale from cart {cart_id} recorded, cart deleted")

        #the sale is committed, a failed enqueue must not undo it
        try:
            self.notification_service.send_sale_confirmation(
                [t.email for t in tickets], len(tickets)
            )
        except Exception as e:
            logger.warning(f"Failed to enqueue sale confirmation for cart {cart_id}: {e}")

        return len(tickets)

    # =====================================================
    # QUERY
    # =====================================================
    def tickets_sold_for_event(self, event_id: int) -> Dict[str, Any]:
        require(event_id, "Event ID")

        with store_failure(self.repo, "tickets sold for event"):
            total = self.repo.total_sold_for_event(event_id)

        return {"event_id": event_id, "total_sold": total}

    def tickets_sold_for_session(self, event_session_id: int) -> Dict[str, Any]:
        require(event_session_id, "Event Session ID")

        with store_failure(self.repo, "tickets sold for event session"):
            total = self.repo.total_sold_for_session(event_session_id)

        return {"event_session_id": event_session_id, "total_sold": total}
