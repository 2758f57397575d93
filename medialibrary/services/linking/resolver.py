# medialibrary/services/linking/resolver.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Type, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from medialibrary.database.models.company import Company
from medialibrary.database.models.media import Media
from medialibrary.database.models.person import Person
from medialibrary.database.repos.company_repo import SqlAlchemyCompanyRepo
from medialibrary.database.repos.people_repo import SqlAlchemyPeopleRepo


@dataclass(frozen=True)
class RelatedField:
    """A many-to-many attribute of a media model and the row type it points at."""
    attr: str
    model: Type[Union[Person, Company]]


def resolve_related(
    db: Session,
    obj: Media,
    payload: BaseModel,
    fields: Iterable[RelatedField],
) -> None:
    """
    Replace every related collection of `obj` with persisted rows matching the
    payload: existing people/companies are reused, missing ones are created.
    """
    people = SqlAlchemyPeopleRepo(db)
    companies = SqlAlchemyCompanyRepo(db)

    for field in fields:
        incoming = getattr(payload, field.attr) or []
        if issubclass(field.model, Person):
            rows = people.resolve_all(field.model, [(p.first_name, p.last_name) for p in incoming])
        else:
            rows = companies.resolve_all(field.model, [c.name for c in incoming])
        setattr(obj, field.attr, rows)
