from __future__ import annotations

import pytest


def test_builtin_exercises_registered_in_demo_order():
    # Import package to trigger registration
    import exercises  # noqa: F401
    from exercises.registry import available_exercises, get_exercise

    assert list(available_exercises().keys()) == ["cities", "numbers", "companies", "employees", "students"]

    ex = get_exercise("students")
    assert getattr(ex, "exercise_name", None) == "students"


def test_unknown_exercise_raises():
    from exercises.registry import get_exercise

    with pytest.raises(KeyError):
        get_exercise("does_not_exist")
