# medialibrary/services/schemas/people.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------- Person ----------

class PersonIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)


class PersonRead(PersonIn):
    model_config = ConfigDict(from_attributes=True)

    id: int
