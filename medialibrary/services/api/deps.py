# medialibrary/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from medialibrary.database.core.main import SessionLocal


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction: COMMIT when the endpoint returns, ROLLBACK
    when an exception (HTTPException included) bubbles out.

    Usage in routers:
      def endpoint(db: Session = Depends(transactional_session)):
          ...
    """
    with db.begin():
        yield db
