"""Pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database, a fake cart lock
instead of redis, and Celery in eager mode.
"""

import os

#must be set before checkout.utils.settings is imported
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from contextlib import contextmanager  # noqa: E402
from datetime import datetime, timedelta  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import func, select  # noqa: E402

from checkout.data.database import Database  # noqa: E402
from checkout.data.models import CartItemModel, CartModel, EventModel, EventSessionModel  # noqa: E402
from checkout.domain.errors import CartLockedError  # noqa: E402
from checkout.main import create_app  # noqa: E402


class FakeLockService:
    """In-memory stand-in for the redis cart lock."""

    def __init__(self):
        self.held = set()
        self.acquired = []

    @contextmanager
    def cart_lock(self, cart_id):
        if cart_id in self.held:
            raise CartLockedError(cart_id)
        self.held.add(cart_id)
        self.acquired.append(cart_id)
        try:
            yield
        finally:
            self.held.discard(cart_id)

    def close(self):
        pass


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def lock_service():
    return FakeLockService()


@pytest.fixture
def client(database, lock_service):
    app = create_app(database=database, lock_service=lock_service)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session(database):
    s = database.session()
    yield s
    s.close()


# =====================================================
# SEED / INSPECTION HELPERS
# =====================================================
@pytest.fixture
def seed(database):
    class Seeder:
        def event(self, title="Concert", start=None):
            start = start or datetime(2026, 11, 1, 19, 0)
            with database.session() as s:
                event = EventModel(
                    title=title,
                    description=f"{title} description",
                    status="ACTIVE",
                    start_date_time=start,
                    end_date_time=start + timedelta(hours=3),
                    banner_image=None,
                )
                s.add(event)
                s.commit()
                return event.event_id

        def event_session(self, event_id, price="10.00", title="General", total=100):
            with database.session() as s:
                es = EventSessionModel(
                    event_id=event_id,
                    title=title,
                    description=f"{title} admission",
                    type="STANDARD",
                    price=Decimal(price),
                    sale=False,
                    sale_end_date_time=datetime(2026, 10, 31, 23, 59),
                    total_quantity=total,
                    remaining_quantity=total,
                )
                s.add(es)
                s.commit()
                return es.event_session_id

        def cart(self, session_id="S1"):
            with database.session() as s:
                cart = CartModel(session_id=session_id)
                s.add(cart)
                s.commit()
                return cart.cart_id

        def cart_item(self, cart_id, event_session_id, quantity):
            with database.session() as s:
                item = CartItemModel(cart_id=cart_id, event_session_id=event_session_id, quantity=quantity)
                s.add(item)
                s.commit()
                return item.cart_item_id

    return Seeder()


@pytest.fixture
def count_rows(database):
    def _count(model, *where):
        with database.session() as s:
            return s.execute(select(func.count()).select_from(model).where(*where)).scalar_one()

    return _count
