# checkout/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from decimal import Decimal
from datetime import datetime


# =====================================================
# CATALOG
# =====================================================
class EventIn(BaseModel):
    """Schema for creating an event."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str
    status: str = Field(..., min_length=1, max_length=50)
    start_date_time: datetime
    end_date_time: datetime
    banner_image: Optional[str] = None


class EventUpdateIn(EventIn):
    event_id: int = Field(..., gt=0)


class EventOut(BaseModel):
    event_id: int
    title: str
    description: str
    status: str
    start_date_time: datetime
    end_date_time: datetime
    banner_image: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class EventCreatedOut(BaseModel):
    event_id: int


class EventSessionIn(BaseModel):
    """Schema for creating an event session (ticket tier)."""

    event_id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1, max_length=255)
    description: str
    type: str = Field(..., min_length=1, max_length=50)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    sale: bool
    sale_end_date_time: datetime
    total_quantity: int = Field(..., ge=0)


class EventSessionOut(BaseModel):
    event_session_id: int
    event_id: int
    title: str
    description: str
    type: str
    price: Decimal
    sale: bool
    sale_end_date_time: datetime
    total_quantity: int
    remaining_quantity: int

    model_config = ConfigDict(from_attributes=True)


class EventSessionCreatedOut(BaseModel):
    event_session_id: int


class SuccessOut(BaseModel):
    success: bool = True


# =====================================================
# CART
# =====================================================
class CreateCartIn(BaseModel):
    session_id: str = Field(..., min_length=1, max_length=255)


class CartItemIn(BaseModel):
    """Set the quantity of an event session in a cart; 0 removes the item."""

    cart_id: int = Field(..., gt=0)
    event_session_id: int = Field(..., gt=0)
    quantity: int = Field(..., ge=0)


class DeleteCartItemIn(BaseModel):
    cart_item_id: int = Field(..., gt=0)


class DeleteCartIn(BaseModel):
    cart_id: int = Field(..., gt=0)


class CartLookupOut(BaseModel):
    """cart_id is 0 when the session has no cart and null when it is ambiguous."""

    cart_id: Optional[int] = None
    ambiguous: bool = False


class CartCreatedOut(BaseModel):
    cart_id: int


class CartItemUpsertOut(BaseModel):
    cart_item_id: Optional[int] = None
    removed: bool = False


class CartItemDeletedOut(BaseModel):
    cart_item_id: int


class CartDeletedOut(BaseModel):
    cart_id: int


class CartRowOut(BaseModel):
    """One line of cart contents joined with its session and event."""

    cart_item_id: int
    cart_id: int
    event_session_id: int
    quantity: int
    event_id: int
    session_title: str
    price: Decimal
    event_title: str

    model_config = ConfigDict(from_attributes=True)


class SubtotalOut(BaseModel):
    subtotal: Decimal


# =====================================================
# TICKETS SOLD
# =====================================================
class TicketCartItemIn(BaseModel):
    cart_item_id: int = Field(..., gt=0)
    cart_id: int = Field(..., gt=0)
    event_session_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0)


class TicketIn(BaseModel):
    """Purchaser contact details for one cart item."""

    cart_item: TicketCartItemIn = Field(..., alias="cartItem")
    first_name: str = Field(..., min_length=1, max_length=100, alias="firstName")
    last_name: str = Field(..., min_length=1, max_length=100, alias="lastName")
    email: str = Field(..., min_length=3, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    company: Optional[str] = Field(None, max_length=255)

    model_config = ConfigDict(populate_by_name=True)


class TicketsSoldIn(BaseModel):
    #not required here so that an absent list reaches the service as invalid input
    tickets: Optional[List[TicketIn]] = None


class SaleOut(BaseModel):
    success: str = "Added successfully"
    tickets_sold: int


class EventSoldOut(BaseModel):
    event_id: int
    total_sold: int


class EventSessionSoldOut(BaseModel):
    event_session_id: int
    total_sold: int
