# medialibrary/services/api/routers/people.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Type

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from medialibrary.common.logging import get_logger
from medialibrary.common.settings import get_settings
from medialibrary.database.models.person import (
    Actor, Author, Director, Illustrator, Person, Producer, Singer,
)
from medialibrary.database.repos.people_repo import SqlAlchemyPeopleRepo
from medialibrary.services.api.deps import transactional_session
from medialibrary.services.schemas.people import PersonRead

cfg = get_settings()
logger = get_logger(__name__)
router = APIRouter(prefix=cfg.api.prefix, tags=["people"])

# (listing segment, search segment, model)
_PEOPLE = (
    ("actors", "actor", Actor),
    ("directors", "director", Director),
    ("producers", "producer", Producer),
    ("authors", "author", Author),
    ("illustrators", "illustrator", Illustrator),
    ("singers", "singer", Singer),
)


def _register(plural: str, singular: str, model: Type[Person]) -> None:
    label = model.__name__

    @router.get(f"/{plural}/", response_model=List[PersonRead], name=f"{plural}_list")
    def list_people(db: Session = Depends(transactional_session)):
        logger.info("Fetching all %s", plural)
        rows = SqlAlchemyPeopleRepo(db).list_all(model)
        if not rows:
            return Response(status_code=HTTPStatus.NO_CONTENT)
        return [PersonRead.model_validate(p) for p in rows]

    @router.get(f"/search/{singular}", response_model=PersonRead, name=f"{singular}_search")
    def search_person(
        fname: str = Query(..., min_length=1, description="First name"),
        lname: str = Query(..., min_length=1, description="Last name"),
        db: Session = Depends(transactional_session),
    ):
        logger.info("Fetching %s %s %s", label, fname, lname)
        obj = SqlAlchemyPeopleRepo(db).find_by_name(model, fname.strip(), lname.strip())
        if obj is None:
            logger.error("%s %s %s not found.", label, fname, lname)
            raise HTTPException(
                status_code=HTTPStatus.NOT_FOUND,
                detail=f"{label} {fname} {lname} not found",
            )
        return PersonRead.model_validate(obj)


for _plural, _singular, _model in _PEOPLE:
    _register(_plural, _singular, _model)
