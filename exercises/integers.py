from __future__ import annotations

from datetime import datetime
from typing import List, Sequence

from engine import run_query
from engine import predicates as p
from services.reporting import Section, values_section

from .sample_data import build_numbers


def _ascending(value: int) -> int:
    return value


def get_even_numbers(numbers: Sequence[int]) -> List[int]:
    return run_query(numbers, p.is_even(), name="even_numbers")


def get_odd_numbers(numbers: Sequence[int]) -> List[int]:
    return run_query(numbers, p.is_odd(), name="odd_numbers")


def get_numbers_greater_than(numbers: Sequence[int], threshold: int) -> List[int]:
    return run_query(numbers, p.greater_than(threshold), name="numbers_greater_than")


def get_numbers_in_range(numbers: Sequence[int], low: int, high: int) -> List[int]:
    """Numbers between ``low`` and ``high``, both ends included."""
    return run_query(numbers, p.in_range(low, high), name="numbers_in_range")


def get_multiples_of_seven(numbers: Sequence[int]) -> List[int]:
    return run_query(numbers, p.divisible_by(7), key=_ascending, name="multiples_of_seven")


def get_multiples_of_eight_descending(numbers: Sequence[int]) -> List[int]:
    return run_query(
        numbers,
        p.divisible_by(8),
        key=_ascending,
        descending=True,
        name="multiples_of_eight_descending",
    )


class IntegersExercise:
    exercise_name = "numbers"
    title = "Integer queries"

    def run(self, now: datetime) -> List[Section]:
        numbers = build_numbers()
        return [
            values_section("All numbers:", numbers),
            values_section("Even numbers:", get_even_numbers(numbers)),
            values_section("Odd numbers:", get_odd_numbers(numbers)),
            values_section("Numbers greater than 10:", get_numbers_greater_than(numbers, 10)),
            values_section("Numbers between 5 and 20:", get_numbers_in_range(numbers, 5, 20)),
            values_section("Multiples of seven in ascending order:", get_multiples_of_seven(numbers)),
            values_section("Multiples of eight in descending order:", get_multiples_of_eight_descending(numbers)),
        ]
