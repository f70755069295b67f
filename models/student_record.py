from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StudentRecord(BaseModel):
    name: str
    surname: str
    age: int
    institution: str

    model_config = ConfigDict(extra="ignore", frozen=True)
