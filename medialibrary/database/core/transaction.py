# medialibrary/database/core/transaction.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session


class DuplicateRowError(Exception):
    """A flush hit a unique constraint (typically a concurrent find-or-create)."""


@contextmanager
def flushing(db: Session) -> Iterator[Session]:
    """Flush pending changes on exit and surface unique violations as DuplicateRowError."""
    yield db
    try:
        db.flush()
    except IntegrityError as e:
        raise DuplicateRowError(str(e.orig)) from e
