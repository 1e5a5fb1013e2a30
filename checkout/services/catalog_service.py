# checkout/services/catalog_service.py
from typing import List

from sqlalchemy.orm import Session

from checkout.data.models.event import EventModel
from checkout.data.models.event_session import EventSessionModel
from checkout.domain.schemas import EventIn, EventSessionIn, EventUpdateIn
from checkout.repos.catalog_repo import CatalogRepo
from checkout.utils.logging import get_logger
from checkout.utils.store import require, store_failure

logger = get_logger(__name__)


class CatalogService:
    """Events and their sessions. Reads return empty lists, never not-found errors."""

    def __init__(self, db: Session):
        self.repo = CatalogRepo(db)

    def get_event(self, event_id: int) -> List[EventModel]:
        require(event_id, "Event ID")

        with store_failure(self.repo, "get event"):
            event = self.repo.get_event(event_id)

        return [event] if event else []

    def list_events(self) -> List[EventModel]:
        with store_failure(self.repo, "list events"):
            return self.repo.list_events()

    def get_sessions_for_event(self, event_id: int) -> List[EventSessionModel]:
        require(event_id, "Event ID")

        with store_failure(self.repo, "get event sessions"):
            return self.repo.get_sessions_for_event(event_id)

    def create_event(self, payload: EventIn) -> int:
        with store_failure(self.repo, "create event"):
            event_id = self.repo.create_event(EventModel(**payload.model_dump())).event_id
            self.repo.commit()

        logger.info(f"Created event {event_id} '{payload.title}'")
        return event_id

    def update_event(self, payload: EventUpdateIn) -> bool:
        data = payload.model_dump(exclude={"event_id"})

        with store_failure(self.repo, "update event"):
            rowcount = self.repo.update_event(payload.event_id, data)
            self.repo.commit()

        logger.info(f"Updated event {payload.event_id} ({rowcount} row(s))")
        return True

    def create_event_session(self, payload: EventSessionIn) -> int:
        session = EventSessionModel(
            **payload.model_dump(),
            remaining_quantity=payload.total_quantity,
        )

        with store_failure(self.repo, "create event session"):
            event_session_id = self.repo.create_event_session(session).event_session_id
            self.repo.commit()

        logger.info(f"Created event session {event_session_id} for event {payload.event_id}")
        return event_session_id
