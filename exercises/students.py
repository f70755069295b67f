from __future__ import annotations

from datetime import datetime
from typing import List, Sequence

from engine import run_query
from engine import predicates as p
from models import StudentRecord
from services.reporting import Section, format_student

from .sample_data import build_students


def _surname(student: StudentRecord) -> str:
    return student.surname


def _age(student: StudentRecord) -> int:
    return student.age


def get_all_students(students: Sequence[StudentRecord]) -> List[StudentRecord]:
    return list(students)


def get_students_with_surname_starting(students: Sequence[StudentRecord], prefix: str) -> List[StudentRecord]:
    return run_query(students, p.starts_with(prefix, _surname), name="students_surname_prefix")


def get_students_older_than(students: Sequence[StudentRecord], age: int) -> List[StudentRecord]:
    return run_query(students, p.greater_than(age, _age), name="students_older_than")


def get_students_with_age_in_range(students: Sequence[StudentRecord], low: int, high: int) -> List[StudentRecord]:
    return run_query(students, p.in_range(low, high, _age), name="students_age_in_range")


def get_students_by_institution(students: Sequence[StudentRecord], institution: str) -> List[StudentRecord]:
    return run_query(students, p.equals(institution, lambda s: s.institution), name="students_by_institution")


def get_students_from_institution_older_than(
    students: Sequence[StudentRecord], institution: str, age: int
) -> List[StudentRecord]:
    return run_query(
        students,
        p.equals(institution, lambda s: s.institution),
        p.greater_than(age, _age),
        name="students_institution_older_than",
    )


def get_students_with_name_containing(students: Sequence[StudentRecord], text: str) -> List[StudentRecord]:
    return run_query(students, p.contains(text, lambda s: s.name, ignore_case=True), name="students_name_contains")


def get_students_sorted_by_age(students: Sequence[StudentRecord], descending: bool = False) -> List[StudentRecord]:
    return run_query(students, key=_age, descending=descending, name="students_by_age")


class StudentsExercise:
    exercise_name = "students"
    title = "Student queries"

    def run(self, now: datetime) -> List[Section]:
        students = build_students()

        def section(title: str, rows: List[StudentRecord]) -> Section:
            return Section(title, tuple(format_student(s) for s in rows))

        return [
            section("All students:", get_all_students(students)),
            section("Students whose surname starts with 'Bro':", get_students_with_surname_starting(students, "Bro")),
            section("Students older than 20:", get_students_older_than(students, 20)),
            section("Students aged 18 to 19:", get_students_with_age_in_range(students, 18, 19)),
            section("Students at MIT:", get_students_by_institution(students, "MIT")),
            section("MIT students older than 20:", get_students_from_institution_older_than(students, "MIT", 20)),
            section("Students with 'an' in the first name:", get_students_with_name_containing(students, "an")),
            section("Students by age, youngest first:", get_students_sorted_by_age(students)),
        ]
