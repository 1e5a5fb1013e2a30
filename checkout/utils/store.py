# checkout/utils/store.py
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from checkout.domain.errors import InvalidInputError, StoreFailureError
from checkout.utils.logging import get_logger

logger = get_logger(__name__)


def require(value: Any, name: str) -> Any:
    """Raise InvalidInputError when a required identifier is absent or blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInputError(f"{name} cannot be null.")
    return value


@contextmanager
def store_failure(repo, operation: str) -> Iterator[None]:
    """
    Roll back and re-raise any SQLAlchemy error as StoreFailureError,
    keeping the driver message. Nothing is retried.
    """
    try:
        yield
    except SQLAlchemyError as e:
        repo.rollback()
        message = str(e.orig) if isinstance(e, DBAPIError) and e.orig is not None else str(e)
        logger.error(f"{operation} failed: {message}")
        raise StoreFailureError(message) from e
