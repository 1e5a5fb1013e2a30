from sqlalchemy import Column, Integer, ForeignKey, String

from checkout.data.database import Base


class TicketSoldModel(Base):
    __tablename__ = "TICKETS_SOLD"

    tickets_sold_id = Column(Integer, primary_key=True)
    event_session_id = Column(Integer, ForeignKey("EVENT_SESSION.event_session_id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    company = Column(String(255), nullable=True)
