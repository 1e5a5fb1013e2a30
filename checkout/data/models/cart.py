#checkout/data/models/cart.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from checkout.data.database import Base


class CartModel(Base):
    __tablename__ = "CART"

    cart_id = Column(Integer, primary_key=True)
    #client cookie token, not unique on purpose (see CartService.get_cart_id_by_session)
    session_id = Column(String(255), nullable=False, index=True)

    items = relationship("CartItemModel", back_populates="cart")
