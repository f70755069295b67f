from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .employee_record import EmployeeRecord


class CompanyRecord(BaseModel):
    """Sample company with the employees it owns."""

    name: str
    founding_date: datetime
    business_profile: str
    director_full_name: str
    employee_count: int
    address: str
    employees: tuple[EmployeeRecord, ...] = ()

    model_config = ConfigDict(extra="ignore", frozen=True)
