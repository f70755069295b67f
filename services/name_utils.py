from __future__ import annotations

from typing import Optional


def last_name(full_name: Optional[str]) -> str:
    """Return the last space-separated token of a full name ('' when blank)."""
    if not full_name:
        return ""
    return full_name.split(" ")[-1]
