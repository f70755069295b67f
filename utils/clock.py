from __future__ import annotations

from datetime import datetime

from config.settings import get_settings


def reference_now() -> datetime:
    """Return the configured QUERY_NOW, or the local wall clock when unset."""
    configured = get_settings().query_now
    if configured is not None:
        return configured
    return datetime.now()
