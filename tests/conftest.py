"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict, List

from workout_sequencer.engine import SupersetEngine


@pytest.fixture
def superset_plan() -> List[Dict[str, Any]]:
    """Two supersets around a standalone exercise."""
    return [
        {"name": "test1", "sets": 2, "groupNumber": "1"},
        {"name": "test2", "sets": 3, "groupNumber": "1"},
        {"name": "Test3", "sets": 2, "groupNumber": "1"},
        {"type": "echo", "name": "not super", "sets": 2},
        {"name": "superset2", "sets": 3, "groupNumber": "2", "restSec": 90},
        {"name": "superset2b", "sets": 2, "groupNumber": "2", "restSec": 45},
    ]


@pytest.fixture
def pair_plan() -> List[Dict[str, Any]]:
    """Group "1" with A (2 sets, 60s rest) and B (3 sets, 30s rest)."""
    return [
        {"name": "A", "type": "exercise", "sets": 2, "restSec": 60, "groupNumber": "1"},
        {"name": "B", "type": "exercise", "sets": 3, "restSec": 30, "groupNumber": "1"},
    ]


@pytest.fixture
def pair_engine(pair_plan) -> SupersetEngine:
    return SupersetEngine(pair_plan)


@pytest.fixture
def triple_engine() -> SupersetEngine:
    """Group "7" with three members that rest 45s, plus a standalone item."""
    return SupersetEngine([
        {"name": "Squat", "sets": 3, "restSec": 45, "groupNumber": 7},
        {"name": "Row", "sets": 3, "restSec": 45, "groupNumber": "7"},
        {"name": "Plank", "sets": 2, "restSec": 45, "groupNumber": " 7 "},
        {"name": "Stretch", "sets": 1},
    ])
