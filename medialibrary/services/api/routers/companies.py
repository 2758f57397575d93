# medialibrary/services/api/routers/companies.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Type

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from medialibrary.common.logging import get_logger
from medialibrary.common.settings import get_settings
from medialibrary.database.models.company import Company, Developer, LabelRecords, Publisher
from medialibrary.database.repos.company_repo import SqlAlchemyCompanyRepo
from medialibrary.services.api.deps import transactional_session
from medialibrary.services.schemas.companies import CompanyRead

cfg = get_settings()
logger = get_logger(__name__)
router = APIRouter(prefix=cfg.api.prefix, tags=["companies"])

_COMPANIES = (
    ("publishers", "publisher", "Publisher", Publisher),
    ("developers", "developer", "Developer", Developer),
    ("label-records", "label-records", "Label records", LabelRecords),
)


def _register(plural: str, singular: str, label: str, model: Type[Company]) -> None:
    @router.get(f"/{plural}/", response_model=List[CompanyRead], name=f"{plural}_list")
    def list_companies(db: Session = Depends(transactional_session)):
        logger.info("Fetching all %s", plural)
        rows = SqlAlchemyCompanyRepo(db).list_all(model)
        if not rows:
            return Response(status_code=HTTPStatus.NO_CONTENT)
        return [CompanyRead.model_validate(c) for c in rows]

    @router.get(f"/search/{singular}", response_model=CompanyRead, name=f"{plural}_search")
    def search_company(
        name: str = Query(..., min_length=1),
        db: Session = Depends(transactional_session),
    ):
        logger.info("Fetching %s %s", label, name)
        obj = SqlAlchemyCompanyRepo(db).find_by_name(model, name.strip())
        if obj is None:
            logger.error("%s %s not found.", label, name)
            raise HTTPException(
                status_code=HTTPStatus.NOT_FOUND,
                detail=f"{label} {name} not found",
            )
        return CompanyRead.model_validate(obj)


for _plural, _singular, _label, _model in _COMPANIES:
    _register(_plural, _singular, _label, _model)
