from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EmployeeRecord(BaseModel):
    full_name: str
    position: str
    phone: str
    email: str
    salary: int

    model_config = ConfigDict(extra="ignore", frozen=True)
