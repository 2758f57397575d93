# medialibrary/database/repos/media_repo.py
from __future__ import annotations

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from medialibrary.common.logging import get_logger
from medialibrary.database.core.transaction import flushing
from medialibrary.database.models.media import Media

M = TypeVar("M", bound=Media)

logger = get_logger(__name__)


class SqlAlchemyMediaRepo(Generic[M]):
    """
    Repository for one concrete media type.

    Queries are restricted to the model's own discriminator value, so a
    repo for Book never returns the Comic rows that share its table.
    """

    def __init__(self, db: Session, model: Type[M]) -> None:
        self.db = db
        self.model = model
        self.identity: str = model.__mapper__.polymorphic_identity

    def _is_own(self) -> ColumnElement[bool]:
        return self.model.media_type == self.identity

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def list_all(self) -> List[M]:
        stmt = select(self.model).where(self._is_own()).order_by(self.model.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def latest(self, limit: int) -> List[M]:
        """The `limit` most recently inserted items, oldest first."""
        stmt = (
            select(self.model)
            .where(self._is_own())
            .order_by(self.model.id.desc())
            .limit(limit)
        )
        rows = list(self.db.execute(stmt).scalars().all())
        rows.reverse()
        return rows

    def get(self, media_id: int) -> Optional[M]:
        obj = self.db.get(self.model, media_id)
        if obj is None or not isinstance(obj, self.model) or obj.media_type != self.identity:
            return None
        return obj

    def search_title(self, fragment: str) -> List[M]:
        """Case-insensitive substring match; `%` and `_` are literal, blank matches nothing."""
        q = (fragment or "").strip().lower()
        if not q:
            return []
        stmt = (
            select(self.model)
            .where(self._is_own(), func.lower(self.model.title).contains(q, autoescape=True))
            .order_by(self.model.id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def find_by_natural_key(self, title: str, exclude_id: Optional[int] = None, **fields: Any) -> Optional[M]:
        """
        Case-insensitive title match plus exact equality on every extra
        field (None matches NULL).
        """
        stmt = select(self.model).where(
            self._is_own(),
            func.lower(self.model.title) == (title or "").strip().lower(),
        )
        for name, value in fields.items():
            stmt = stmt.where(getattr(self.model, name) == value)
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        return self.db.execute(stmt.limit(1)).scalars().first()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def add(self, obj: M) -> M:
        with flushing(self.db):
            self.db.add(obj)
        logger.info("Created %s %r (id=%s)", self.identity, obj.title, obj.id)
        return obj

    def save(self, obj: M) -> M:
        with flushing(self.db):
            self.db.add(obj)
        logger.info("Updated %s %r (id=%s)", self.identity, obj.title, obj.id)
        return obj

    def delete(self, obj: M) -> None:
        with flushing(self.db):
            self.db.delete(obj)
        logger.info("Deleted %s %r (id=%s)", self.identity, obj.title, obj.id)
