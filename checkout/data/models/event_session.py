from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, Text, Numeric, Boolean
from sqlalchemy.orm import relationship

from checkout.data.database import Base


class EventSessionModel(Base):
    __tablename__ = "EVENT_SESSION"

    event_session_id = Column(Integer, primary_key=True)
    event_id = Column(Integer, ForeignKey("EVENT.event_id"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String(50), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    sale = Column(Boolean, nullable=False, default=False)
    sale_end_date_time = Column(DateTime, nullable=False)
    total_quantity = Column(Integer, nullable=False)
    remaining_quantity = Column(Integer, nullable=False)

    event = relationship("EventModel", back_populates="sessions")
