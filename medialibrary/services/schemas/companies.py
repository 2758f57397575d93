# medialibrary/services/schemas/companies.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompanyIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)


class CompanyRead(CompanyIn):
    model_config = ConfigDict(from_attributes=True)

    id: int
