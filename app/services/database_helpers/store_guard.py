# /app/services/database_helpers/store_guard.py

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_guard(db: Session, action: str) -> Iterator[None]:
    """
    Rolls back and re-raises any SQLAlchemy failure inside the block as a
    StoreError carrying the driver's message. Errors that are not SQLAlchemy
    errors pass through untouched.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database failure while trying to %s", action)
        raise StoreError(f"Failed to {action}: {e}") from e
