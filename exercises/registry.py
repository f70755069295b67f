from __future__ import annotations

from typing import Any, Dict, Optional


# Insertion order doubles as demo order
_REGISTRY: Dict[str, Any] = {}


def register(factory, name: Optional[str] = None) -> None:
    """Register an exercise factory under ``name`` or its ``exercise_name``."""
    _REGISTRY[name or factory.exercise_name] = factory


def get_exercise(name: str):
    if name not in _REGISTRY:
        raise KeyError(f"Unknown exercise: {name}")
    return _REGISTRY[name]()


def available_exercises() -> Dict[str, Any]:
    return dict(_REGISTRY)
