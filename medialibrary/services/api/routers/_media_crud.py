# medialibrary/services/api/routers/_media_crud.py
#
# No `from __future__ import annotations` here: endpoint signatures use the
# schema classes captured by the closure and FastAPI must see real types.

from http import HTTPStatus
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from medialibrary.common.logging import get_logger
from medialibrary.common.settings import get_settings
from medialibrary.database.core.transaction import DuplicateRowError
from medialibrary.database.repos.media_repo import SqlAlchemyMediaRepo
from medialibrary.services.api.deps import transactional_session
from medialibrary.services.api.resources import MediaResource
from medialibrary.services.linking.resolver import resolve_related

cfg = get_settings()
logger = get_logger(__name__)


# ---- helpers ----

def _scalars(resource: MediaResource, payload: BaseModel) -> Dict[str, Any]:
    """Column values of the payload (related collections are resolved separately)."""
    return payload.model_dump(exclude={f.attr for f in resource.related})


def _natural_key(resource: MediaResource, payload: BaseModel) -> Dict[str, Any]:
    return {name: getattr(payload, name) for name in resource.key_fields}


def _conflict(resource: MediaResource, title: str) -> HTTPException:
    logger.error("Unable to save %s %r: it already exists.", resource.label, title)
    return HTTPException(
        status_code=HTTPStatus.CONFLICT,
        detail=f"{resource.label} {title} already exists",
    )


def _not_found(resource: MediaResource, what: str) -> HTTPException:
    logger.error("%s with %s not found.", resource.label, what)
    return HTTPException(
        status_code=HTTPStatus.NOT_FOUND,
        detail=f"{resource.label} with {what} not found",
    )


def build_media_router(resource: MediaResource) -> APIRouter:
    """
    CRUD + search routes for one media type, mounted at
    `<api prefix>/<resource.slug>`.
    """
    router = APIRouter(prefix=f"{cfg.api.prefix}/{resource.slug}", tags=[resource.slug])
    read_schema = resource.read_schema
    create_schema = resource.create_schema
    by_id_route = f"{resource.slug}_get_by_id"

    def _get_or_404(repo: SqlAlchemyMediaRepo, media_id: int):
        obj = repo.get(media_id)
        if obj is None:
            raise _not_found(resource, f"id {media_id}")
        return obj

    # ---- reads ----

    @router.get("/", response_model=List[read_schema], name=f"{resource.slug}_list")
    def list_all(db: Session = Depends(transactional_session)):
        logger.info("Fetching all %s", resource.slug)
        rows = SqlAlchemyMediaRepo(db, resource.model).list_all()
        if not rows:
            return Response(status_code=HTTPStatus.NO_CONTENT)
        return [read_schema.model_validate(r) for r in rows]

    @router.get("/search/title/{title}", response_model=List[read_schema], name=f"{resource.slug}_search_title")
    def search_by_title(title: str, db: Session = Depends(transactional_session)):
        logger.info("Fetching %s with title %r", resource.label, title)
        rows = SqlAlchemyMediaRepo(db, resource.model).search_title(title)
        if not rows:
            raise _not_found(resource, f"title {title}")
        return [read_schema.model_validate(r) for r in rows]

    if resource.search_field:
        field_name = resource.search_field

        @router.get(
            "/search/title/{title}/{number}",
            response_model=read_schema,
            name=f"{resource.slug}_search_title_{field_name}",
        )
        def search_by_title_and_number(
            title: str,
            number: int = Path(..., description=field_name.replace("_", " ")),
            db: Session = Depends(transactional_session),
        ):
            logger.info("Fetching %s with title %r and %s %s", resource.label, title, field_name, number)
            obj = SqlAlchemyMediaRepo(db, resource.model).find_by_natural_key(title, **{field_name: number})
            if obj is None:
                raise _not_found(resource, f"title {title} and {field_name.replace('_', ' ')} {number}")
            return read_schema.model_validate(obj)

    @router.get("/search/id/{media_id}", response_model=read_schema, name=by_id_route)
    def get_by_id(media_id: int, db: Session = Depends(transactional_session)):
        logger.info("Fetching %s with id %s", resource.label, media_id)
        obj = _get_or_404(SqlAlchemyMediaRepo(db, resource.model), media_id)
        return read_schema.model_validate(obj)

    # ---- writes ----

    @router.post("/", response_model=read_schema, status_code=HTTPStatus.CREATED, name=f"{resource.slug}_create")
    def create(
        payload: create_schema,
        request: Request,
        response: Response,
        db: Session = Depends(transactional_session),
    ):
        logger.info("Creating %s: %r", resource.label, payload.title)
        repo = SqlAlchemyMediaRepo(db, resource.model)
        if repo.find_by_natural_key(payload.title, **_natural_key(resource, payload)) is not None:
            raise _conflict(resource, payload.title)

        obj = resource.model(**_scalars(resource, payload))
        try:
            resolve_related(db, obj, payload, resource.related)
            repo.add(obj)
        except DuplicateRowError:
            raise _conflict(resource, payload.title)

        response.headers["Location"] = str(request.url_for(by_id_route, media_id=obj.id))
        return read_schema.model_validate(obj)

    @router.put("/{media_id}", response_model=read_schema, name=f"{resource.slug}_update")
    def update(
        media_id: int,
        payload: create_schema,
        db: Session = Depends(transactional_session),
    ):
        logger.info("Updating %s with id %s", resource.label, media_id)
        repo = SqlAlchemyMediaRepo(db, resource.model)
        obj = _get_or_404(repo, media_id)

        clash = repo.find_by_natural_key(payload.title, exclude_id=media_id, **_natural_key(resource, payload))
        if clash is not None:
            raise _conflict(resource, payload.title)

        for name, value in _scalars(resource, payload).items():
            setattr(obj, name, value)
        try:
            resolve_related(db, obj, payload, resource.related)
            repo.save(obj)
        except DuplicateRowError:
            raise _conflict(resource, payload.title)
        return read_schema.model_validate(obj)

    @router.delete("/{media_id}", response_model=read_schema, name=f"{resource.slug}_delete")
    def delete(media_id: int, db: Session = Depends(transactional_session)):
        logger.info("Deleting %s with id %s", resource.label, media_id)
        repo = SqlAlchemyMediaRepo(db, resource.model)
        obj = _get_or_404(repo, media_id)
        deleted = read_schema.model_validate(obj)
        repo.delete(obj)
        return deleted

    return router
