# checkout/services/cart_service.py
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from checkout.data.models.cart import CartModel
from checkout.domain.errors import AmbiguousStateError, InvalidInputError
from checkout.repos.cart_repo import CartRepo
from checkout.services.lock_service import LockService
from checkout.utils.logging import get_logger
from checkout.utils.store import require, store_failure

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpsertResult:
    cart_item_id: Optional[int]
    removed: bool = False


class CartService:
    """
    Cart use cases for a session-scoped cart.
    commands (create, upsert item, delete item, delete cart) change state and commit,
    queries (lookup, contents, subtotal) only read
    """

    def __init__(self, db: Session, lock_service: LockService):
        self.repo = CartRepo(db)
        self.lock_service = lock_service

    # =====================================================
    # QUERY
    # =====================================================
    def get_cart_id_by_session(self, session_id: str) -> Optional[int]:
        """
        Returns the single cart id of a session or None when there is none.

        Raises:
            InvalidInputError: session_id is absent.
            AmbiguousStateError: more than one cart row for the session.
        """
        require(session_id, "Session ID")

        with store_failure(self.repo, "get cart by session"):
            cart_ids = self.repo.get_cart_ids_by_session(session_id)

        if len(cart_ids) > 1:
            logger.warning(f"Session {session_id} has {len(cart_ids)} carts: {cart_ids}")
            raise AmbiguousStateError(session_id, len(cart_ids))

        return cart_ids[0] if cart_ids else None

    def get_cart_contents(self, cart_id: int) -> List[Dict[str, Any]]:
        require(cart_id, "Cart ID")

        with store_failure(self.repo, "get cart contents"):
            return self.repo.get_cart_contents(cart_id)

    def get_cart_contents_by_session(self, session_id: str) -> List[Dict[str, Any]]:
        """Contents of the session's cart; empty when the session has none."""
        cart_id = self.get_cart_id_by_session(session_id)
        if cart_id is None:
            return []

        with store_failure(self.repo, "get cart contents by session"):
            return self.repo.get_cart_contents(cart_id)

    def get_cart_subtotal(self, session_id: str) -> Decimal:
        """
        Sum of quantity * price over the session's cart, 0 when there is no cart.

        Raises:
            AmbiguousStateError: more than one cart row for the session.
        """
        cart_id = self.get_cart_id_by_session(session_id)
        if cart_id is None:
            return Decimal("0")

        with store_failure(self.repo, "get cart subtotal"):
            return self.repo.get_subtotal(cart_id)

    # =====================================================
    # COMMANDS
    # =====================================================
    def create_cart(self, session_id: str) -> int:
        #no uniqueness check, a second cart for the same session is reported by the lookup
        require(session_id, "Session ID")

        with store_failure(self.repo, "create cart"):
            cart_id = self.repo.create_cart(CartModel(session_id=session_id)).cart_id
            self.repo.commit()

        logger.info(f"Created cart {cart_id} for session {session_id}")
        return cart_id

    def upsert_cart_item(self, cart_id: int, event_session_id: int, quantity: int) -> UpsertResult:
        """
        Sets the quantity of an event session in a cart with a single statement:
        quantity > 0 inserts or overwrites, quantity == 0 deletes.
        """
        require(cart_id, "Cart ID")
        require(event_session_id, "Event Session ID")
        require(quantity, "Quantity")

        if quantity < 0:
            raise InvalidInputError("Quantity cannot be negative.")

        with store_failure(self.repo, "upsert cart item"):
            if quantity == 0:
                removed_id = self.repo.delete_cart_item_for_session(cart_id, event_session_id)
                self.repo.commit()

                if removed_id is None:
                    logger.info(f"Quantity 0 for event session {event_session_id} not in cart {cart_id}, nothing to do")
                    return UpsertResult(cart_item_id=None, removed=False)

                logger.info(f"Quantity 0, removed item {removed_id} from cart {cart_id}")
                return UpsertResult(cart_item_id=removed_id, removed=True)

            cart_item_id = self.repo.upsert_cart_item(cart_id, event_session_id, quantity)
            self.repo.commit()

        logger.info(
            f"Cart {cart_id}: event session {event_session_id} set to quantity {quantity} "
            f"(item {cart_item_id})"
        )
        return UpsertResult(cart_item_id=cart_item_id)

    def delete_cart_item(self, cart_item_id: int) -> int:
        require(cart_item_id, "Cart Item ID")

        with store_failure(self.repo, "delete cart item"):
            deleted = self.repo.delete_cart_item(cart_item_id)
            self.repo.commit()

        logger.info(f"Deleted cart item {cart_item_id} ({deleted} row(s))")
        return cart_item_id

    def delete_cart(self, cart_id: int) -> int:
        require(cart_id, "Cart ID")

        with self.lock_service.cart_lock(cart_id):
            with store_failure(self.repo, "delete cart"):
                deleted = self.repo.delete_cart(cart_id)
                self.repo.commit()

        logger.info(f"Deleted cart {cart_id} ({deleted} row(s))")
        return cart_id
