from .query_engine import QueryEngine, run_query

__all__ = [
    "QueryEngine",
    "run_query",
]
