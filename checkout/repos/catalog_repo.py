# checkout/repos/catalog_repo.py
from typing import Any, Dict, List

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from checkout.data.models.event import EventModel
from checkout.data.models.event_session import EventSessionModel


class CatalogRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_event(self, event_id: int) -> EventModel | None:
        return self.db.get(EventModel, event_id)

    def list_events(self) -> List[EventModel]:
        return list(
            self.db.execute(
                select(EventModel).order_by(EventModel.start_date_time.asc(), EventModel.event_id.asc())
            ).scalars()
        )

    def create_event(self, event: EventModel) -> EventModel:
        self.db.add(event)
        self.db.flush()
        return event

    def update_event(self, event_id: int, new_data: Dict[str, Any]) -> int:
        result = self.db.execute(
            update(EventModel)
            .where(EventModel.event_id == event_id)
            .values(**new_data)
        )
        return result.rowcount

    def get_sessions_for_event(self, event_id: int) -> List[EventSessionModel]:
        return list(
            self.db.execute(
                select(EventSessionModel)
                .where(EventSessionModel.event_id == event_id)
                .order_by(EventSessionModel.price.asc(), EventSessionModel.event_session_id.asc())
            ).scalars()
        )

    def create_event_session(self, event_session: EventSessionModel) -> EventSessionModel:
        self.db.add(event_session)
        self.db.flush()
        return event_session

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
