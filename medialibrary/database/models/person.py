# medialibrary/database/models/person.py
from __future__ import annotations

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from medialibrary.database.core.main import Base
from medialibrary.database.core.service_object import ServiceObject
from medialibrary.domain.enums import PersonType


# =======================
# People
# =======================
class Person(ServiceObject, Base):
    """
    Every person attached to a media item, one row per (role, name).
    The role is the discriminator: the same human credited as actor and as
    director is two rows.
    """
    __tablename__ = "people"
    __table_args__ = (
        UniqueConstraint("person_type", "first_name", "last_name", name="uq_people_type_first_last"),
        Index("ix_people_last_name", "last_name"),
    )

    person_type: Mapped[str] = mapped_column(String(32), nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)

    __mapper_args__ = {
        "polymorphic_on": "person_type",
        "polymorphic_abstract": True,
    }

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id} name={self.full_name!r}>"


class Actor(Person):
    __mapper_args__ = {"polymorphic_identity": PersonType.actor.value}


class Director(Person):
    __mapper_args__ = {"polymorphic_identity": PersonType.director.value}


class Producer(Person):
    __mapper_args__ = {"polymorphic_identity": PersonType.producer.value}


class Author(Person):
    __mapper_args__ = {"polymorphic_identity": PersonType.author.value}


class Illustrator(Person):
    __mapper_args__ = {"polymorphic_identity": PersonType.illustrator.value}


class Singer(Person):
    __mapper_args__ = {"polymorphic_identity": PersonType.singer.value}
