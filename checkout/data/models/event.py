#checkout/data/models/event.py
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship

from checkout.data.database import Base


class EventModel(Base):
    __tablename__ = "EVENT"

    event_id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(String(50), nullable=False)

    start_date_time = Column(DateTime, nullable=False)
    end_date_time = Column(DateTime, nullable=False)
    banner_image = Column(String(512), nullable=True)

    sessions = relationship("EventSessionModel", back_populates="event")
