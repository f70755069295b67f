"""Predicate factories shared by the exercises.

Every factory returns a plain ``record -> bool`` callable with no state of
its own. String and numeric tests take an optional ``field`` accessor so the
same test works on a bare value (a city name, an integer) or on a record
attribute (``lambda c: c.name``).
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from services.name_utils import last_name


logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]
Accessor = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


def _get(field: Optional[Accessor]) -> Accessor:
    return field or _identity


# Strings

def length_equals(length: int, field: Optional[Accessor] = None) -> Predicate:
    get = _get(field)
    return lambda record: len(get(record)) == length


def starts_with(prefix: str, field: Optional[Accessor] = None) -> Predicate:
    get = _get(field)
    return lambda record: get(record).startswith(prefix)


def ends_with(suffix: str, field: Optional[Accessor] = None) -> Predicate:
    get = _get(field)
    return lambda record: get(record).endswith(suffix)


def starts_and_ends_with(prefix: str, suffix: str, field: Optional[Accessor] = None) -> Predicate:
    return all_of(starts_with(prefix, field), ends_with(suffix, field))


def contains(substring: str, field: Optional[Accessor] = None, ignore_case: bool = False) -> Predicate:
    get = _get(field)
    if ignore_case:
        needle = substring.lower()
        return lambda record: needle in get(record).lower()
    return lambda record: substring in get(record)


def equals(value: Any, field: Optional[Accessor] = None, ignore_case: bool = False) -> Predicate:
    get = _get(field)
    if ignore_case:
        target = str(value).lower()
        return lambda record: str(get(record)).lower() == target
    return lambda record: get(record) == value


# Numbers

def is_even(field: Optional[Accessor] = None) -> Predicate:
    return divisible_by(2, field)


def is_odd(field: Optional[Accessor] = None) -> Predicate:
    get = _get(field)
    return lambda record: get(record) % 2 != 0


def greater_than(threshold: float, field: Optional[Accessor] = None) -> Predicate:
    get = _get(field)
    return lambda record: get(record) > threshold


def in_range(low: float, high: float, field: Optional[Accessor] = None) -> Predicate:
    """Inclusive on both ends; an inverted range matches nothing."""
    get = _get(field)
    return lambda record: low <= get(record) <= high


def divisible_by(divisor: int, field: Optional[Accessor] = None) -> Predicate:
    if divisor == 0:
        raise ValueError("divisor must be non-zero")
    get = _get(field)
    return lambda record: get(record) % divisor == 0


# Dates

def subtract_years(moment: datetime, years: int) -> datetime:
    """Move ``moment`` back by calendar years, clamping 29 Feb to 28 Feb."""
    try:
        return moment.replace(year=moment.year - years)
    except ValueError:
        return moment.replace(year=moment.year - years, day=28)


def founded_more_than_years_ago(years: int, now: datetime, field: Optional[Accessor] = None) -> Predicate:
    get = _get(field)
    threshold = subtract_years(now, years)
    return lambda record: get(record) < threshold


def founded_days_ago(days: int, now: datetime, field: Optional[Accessor] = None) -> Predicate:
    """Exact timestamp equality against ``now - days``.

    Against a wall-clock ``now`` this practically never matches; it only
    lines up when ``now`` is pinned (QUERY_NOW) to a value whose time of day
    equals the stored founding timestamp.
    """
    get = _get(field)
    threshold = now - timedelta(days=days)
    logger.debug("exact founding-date match against %s", threshold.isoformat())
    return lambda record: get(record) == threshold


# Names

def last_name_equals(target: str, field: Optional[Accessor] = None) -> Predicate:
    get = _get(field)
    wanted = target.lower()
    return lambda record: last_name(get(record)).lower() == wanted


# Combinators

def all_of(*predicates: Predicate) -> Predicate:
    return lambda record: all(p(record) for p in predicates)
