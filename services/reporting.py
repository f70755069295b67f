from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Optional, TextIO, Tuple

from models import CompanyRecord, EmployeeRecord, StudentRecord


@dataclass(frozen=True)
class Section:
    title: str
    lines: Tuple[str, ...] = ()


def format_values(values: Iterable[Any]) -> str:
    """Comma-join primitive results (cities, numbers) on a single line."""
    return ", ".join(str(v) for v in values)


def format_company(company: CompanyRecord) -> str:
    return ", ".join([
        f"Name: {company.name}",
        f"Founded: {company.founding_date.strftime('%Y-%m-%d')}",
        f"Profile: {company.business_profile}",
        f"Director: {company.director_full_name}",
        f"Employees: {company.employee_count}",
        f"Address: {company.address}",
    ])


def format_employee(employee: EmployeeRecord) -> str:
    return ", ".join([
        f"Name: {employee.full_name}",
        f"Position: {employee.position}",
        f"Phone: {employee.phone}",
        f"Email: {employee.email}",
        f"Salary: {employee.salary}",
    ])


def format_student(student: StudentRecord) -> str:
    return ", ".join([student.name, student.surname, str(student.age), student.institution])


def values_section(title: str, values: Iterable[Any]) -> Section:
    return Section(title, (format_values(values),))


def render_sections(sections: Iterable[Section]) -> str:
    blocks = []
    for section in sections:
        blocks.append("\n".join([section.title, *section.lines]))
    return "\n\n".join(blocks)


def print_sections(sections: Iterable[Section], stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    text = render_sections(sections)
    if text:
        print(text, file=out)
