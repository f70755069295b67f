from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def to_local_naive(moment: datetime) -> datetime:
    """Drop any UTC offset by converting to local wall time; sample dates carry none."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def _parse_now(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return to_local_naive(datetime.fromisoformat(value.strip()))
    except ValueError:
        raise RuntimeError(
            f"QUERY_NOW must be an ISO 8601 timestamp, got {value!r}"
        ) from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    log_level: str
    run_env: str

    # Fixed reference time for date predicates; None means wall clock
    query_now: datetime | None

    # Demo parameters
    demo_city_length: int = 10
    demo_years_ago: int = 10
    demo_days_ago: int = 30
    demo_salary_threshold: int = 3000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
        run_env=os.getenv("RUN_ENV", "local"),
        query_now=_parse_now(os.getenv("QUERY_NOW")),
        demo_city_length=_env_int("DEMO_CITY_LENGTH", 10),
        demo_years_ago=_env_int("DEMO_YEARS_AGO", 10),
        demo_days_ago=_env_int("DEMO_DAYS_AGO", 30),
        demo_salary_threshold=_env_int("DEMO_SALARY_THRESHOLD", 3000),
    )
