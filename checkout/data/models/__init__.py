#import all models so SQLAlchemy registers them in Base.metadata

from checkout.data.models.event import EventModel
from checkout.data.models.event_session import EventSessionModel
from checkout.data.models.cart import CartModel
from checkout.data.models.cart_item import CartItemModel
from checkout.data.models.ticket_sold import TicketSoldModel

__all__ = ["EventModel", "EventSessionModel", "CartModel", "CartItemModel", "TicketSoldModel"]
