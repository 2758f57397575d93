# medialibrary/database/models/company.py
from __future__ import annotations

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from medialibrary.database.core.main import Base
from medialibrary.database.core.service_object import ServiceObject
from medialibrary.domain.enums import CompanyType


class Company(ServiceObject, Base):
    __tablename__ = "companies"
    __table_args__ = (
        UniqueConstraint("company_type", "name", name="uq_companies_type_name"),
    )

    company_type: Mapped[str] = mapped_column(String(32), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    __mapper_args__ = {
        "polymorphic_on": "company_type",
        "polymorphic_abstract": True,
    }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id} name={self.name!r}>"


class Publisher(Company):
    __mapper_args__ = {"polymorphic_identity": CompanyType.publisher.value}


class Developer(Company):
    __mapper_args__ = {"polymorphic_identity": CompanyType.developer.value}


class LabelRecords(Company):
    __mapper_args__ = {"polymorphic_identity": CompanyType.label_records.value}
