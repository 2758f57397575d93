# medialibrary/services/api/routers/home.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from medialibrary.common.logging import get_logger
from medialibrary.common.settings import get_settings
from medialibrary.database.repos.media_repo import SqlAlchemyMediaRepo
from medialibrary.services.api.deps import transactional_session
from medialibrary.services.api.resources import MEDIA_RESOURCES
from medialibrary.services.schemas.media import HomePage

cfg = get_settings()
logger = get_logger(__name__)
router = APIRouter(tags=["home"])


@router.get("/home/", response_model=HomePage)
def home(db: Session = Depends(transactional_session)) -> HomePage:
    """The latest items of every media type, oldest first within each list."""
    size = cfg.api.home_page_size
    logger.info("Fetching the %s latest items of each media type", size)
    sections = {
        r.home_key: [r.read_schema.model_validate(o) for o in SqlAlchemyMediaRepo(db, r.model).latest(size)]
        for r in MEDIA_RESOURCES
    }
    return HomePage.model_validate(sections)
