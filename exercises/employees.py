from __future__ import annotations

from datetime import datetime
from typing import List, Sequence

from config.settings import get_settings
from engine import QueryEngine, run_query
from engine import predicates as p
from models import CompanyRecord, EmployeeRecord
from services.reporting import Section, format_employee

from .sample_data import build_companies


def _salary(employee: EmployeeRecord) -> int:
    return employee.salary


def _position(employee: EmployeeRecord) -> str:
    return employee.position


def get_employees_of_company(companies: Sequence[CompanyRecord], company_name: str) -> List[EmployeeRecord]:
    """All employees of the named company; empty when no company matches."""
    return (
        QueryEngine(companies, name="employees_of_company")
        .where(lambda c: c.name == company_name)
        .select_many(lambda c: c.employees)
        .to_list()
    )


def get_employees_with_salary_greater_than(
    companies: Sequence[CompanyRecord], company_name: str, amount: int
) -> List[EmployeeRecord]:
    staff = get_employees_of_company(companies, company_name)
    return run_query(staff, p.greater_than(amount, _salary), name="employees_salary_above")


def get_employees_by_position(
    companies: Sequence[CompanyRecord], company_name: str, text: str
) -> List[EmployeeRecord]:
    staff = get_employees_of_company(companies, company_name)
    return run_query(staff, p.contains(text, _position, ignore_case=True), name="employees_by_position")


def get_employees_sorted_by_salary(
    companies: Sequence[CompanyRecord], company_name: str, descending: bool = False
) -> List[EmployeeRecord]:
    staff = get_employees_of_company(companies, company_name)
    return run_query(staff, key=_salary, descending=descending, name="employees_by_salary")


class EmployeesExercise:
    exercise_name = "employees"
    title = "Employee queries"

    def run(self, now: datetime) -> List[Section]:
        companies = build_companies()
        threshold = get_settings().demo_salary_threshold

        def section(title: str, rows: List[EmployeeRecord]) -> Section:
            return Section(title, tuple(format_employee(e) for e in rows))

        return [
            section("Employees of Global Bank Ltd:", get_employees_of_company(companies, "Global Bank Ltd")),
            section("Employees of Unknown Corp:", get_employees_of_company(companies, "Unknown Corp")),
            section(
                f"Tech Solutions employees earning more than {threshold}:",
                get_employees_with_salary_greater_than(companies, "Tech Solutions", threshold),
            ),
            section(
                "Global Bank Ltd managers:",
                get_employees_by_position(companies, "Global Bank Ltd", "manager"),
            ),
            section(
                "Global Bank Ltd employees by salary, highest first:",
                get_employees_sorted_by_salary(companies, "Global Bank Ltd", descending=True),
            ),
        ]
