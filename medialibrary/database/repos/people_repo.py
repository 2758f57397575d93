# medialibrary/database/repos/people_repo.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from medialibrary.common.logging import get_logger
from medialibrary.database.core.transaction import flushing
from medialibrary.database.models.person import Person

P = TypeVar("P", bound=Person)

logger = get_logger(__name__)


class SqlAlchemyPeopleRepo:
    """Lookups and find-or-create for every Person subtype (Actor, Director, ...)."""

    def __init__(self, session: Session) -> None:
        self.db = session

    def list_all(self, model: Type[P]) -> List[P]:
        stmt = select(model).order_by(model.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def find_by_name(self, model: Type[P], first_name: str, last_name: str) -> Optional[P]:
        stmt = (
            select(model)
            .where(model.first_name == first_name, model.last_name == last_name)
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def find_or_create(self, model: Type[P], first_name: str, last_name: str) -> P:
        existing = self.find_by_name(model, first_name, last_name)
        if existing is not None:
            logger.info("Reusing %s already present: %s %s (id=%s)", model.__name__, first_name, last_name, existing.id)
            return existing

        with flushing(self.db):
            obj = model(first_name=first_name, last_name=last_name)
            self.db.add(obj)
        logger.info("Created %s: %s %s (id=%s)", model.__name__, first_name, last_name, obj.id)
        return obj

    def resolve_all(self, model: Type[P], names: Iterable[Tuple[str, str]]) -> List[P]:
        """
        Map (first_name, last_name) pairs onto persisted rows, creating the
        missing ones. Duplicates inside `names` collapse to a single row and
        the first-seen order is kept.
        """
        resolved: Dict[Tuple[str, str], P] = {}
        for first_name, last_name in names:
            key = (first_name, last_name)
            if key not in resolved:
                resolved[key] = self.find_or_create(model, first_name, last_name)
        return list(resolved.values())
