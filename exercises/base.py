from __future__ import annotations

from datetime import datetime
from typing import List, Protocol

from services.reporting import Section


class Exercise(Protocol):
    exercise_name: str
    title: str

    def run(self, now: datetime) -> List[Section]:
        ...
