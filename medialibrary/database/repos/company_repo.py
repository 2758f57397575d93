# medialibrary/database/repos/company_repo.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from medialibrary.common.logging import get_logger
from medialibrary.database.core.transaction import flushing
from medialibrary.database.models.company import Company

C = TypeVar("C", bound=Company)

logger = get_logger(__name__)


class SqlAlchemyCompanyRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def list_all(self, model: Type[C]) -> List[C]:
        stmt = select(model).order_by(model.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def find_by_name(self, model: Type[C], name: str) -> Optional[C]:
        stmt = select(model).where(model.name == name).limit(1)
        return self.db.execute(stmt).scalars().first()

    def find_or_create(self, model: Type[C], name: str) -> C:
        existing = self.find_by_name(model, name)
        if existing is not None:
            logger.info("Reusing %s already present: %s (id=%s)", model.__name__, name, existing.id)
            return existing

        with flushing(self.db):
            obj = model(name=name)
            self.db.add(obj)
        logger.info("Created %s: %s (id=%s)", model.__name__, name, obj.id)
        return obj

    def resolve_all(self, model: Type[C], names: Iterable[str]) -> List[C]:
        resolved: Dict[str, C] = {}
        for name in names:
            if name not in resolved:
                resolved[name] = self.find_or_create(model, name)
        return list(resolved.values())
