"""Eager filter/sort over small in-memory collections.

Invariants:
    - Input is snapshotted as a tuple; no record is ever mutated
    - where() keeps original relative order
    - order_by() is stable in both directions
    - Matching nothing yields an empty list, never an error
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from engine.predicates import Predicate


logger = logging.getLogger(__name__)

T = TypeVar("T")


class QueryEngine(Generic[T]):
    def __init__(self, records: Iterable[T], name: Optional[str] = None, total: Optional[int] = None):
        self._records: tuple = tuple(records)
        self.name = name
        # Size of the collection the query started from, for logging
        self.total = len(self._records) if total is None else total

    def _derive(self, records: Iterable[Any]) -> "QueryEngine[Any]":
        return QueryEngine(records, name=self.name, total=self.total)

    def where(self, *predicates: Predicate) -> "QueryEngine[T]":
        """Keep records satisfying every predicate (logical AND)."""
        return self._derive(r for r in self._records if all(p(r) for p in predicates))

    def order_by(self, key: Callable[[T], Any], descending: bool = False) -> "QueryEngine[T]":
        # sorted() with reverse=True still keeps equal keys in input order
        return self._derive(sorted(self._records, key=key, reverse=descending))

    def select(self, projection: Callable[[T], Any]) -> "QueryEngine[Any]":
        return self._derive(projection(r) for r in self._records)

    def select_many(self, projection: Callable[[T], Iterable[Any]]) -> "QueryEngine[Any]":
        return self._derive(item for r in self._records for item in projection(r))

    def first_or_none(self) -> Optional[T]:
        return self._records[0] if self._records else None

    def count(self) -> int:
        return len(self._records)

    def to_list(self) -> List[T]:
        result = list(self._records)
        logger.debug(
            "query evaluated",
            extra={"query": self.name or "-", "matched": len(result), "total": self.total},
        )
        return result


def run_query(
    records: Iterable[T],
    *predicates: Predicate,
    key: Optional[Callable[[T], Any]] = None,
    descending: bool = False,
    name: Optional[str] = None,
) -> List[T]:
    """Filter ``records`` by all ``predicates`` then optionally sort by ``key``."""
    query = QueryEngine(records, name=name).where(*predicates)
    if key is not None:
        query = query.order_by(key, descending=descending)
    return query.to_list()
