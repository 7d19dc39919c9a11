"""Tests for the linear plan timeline."""

import pytest

from workout_sequencer.data.models import PlanItem
from workout_sequencer.timeline import TimelineStep, build_timeline
from workout_sequencer.timeline.builder import (
    find_timeline_index,
    item_sets,
    next_set_number,
)


class TestBuildTimeline:
    """Test timeline construction."""

    def test_sets_are_expanded_in_plan_order(self):
        timeline = build_timeline([{"sets": 2}, {"sets": 1}])

        assert timeline == [
            TimelineStep(0, 1),
            TimelineStep(0, 2),
            TimelineStep(1, 1),
        ]

    def test_holes_keep_their_index(self):
        timeline = build_timeline([{"sets": 0}, {"sets": 3}, None, {"sets": "2"}])

        assert [(s.item_index, s.set_number) for s in timeline] == [
            (0, 1),
            (1, 1), (1, 2), (1, 3),
            (3, 1), (3, 2),
        ]

    @pytest.mark.parametrize("plan", [None, [], "abc", {"sets": 3}])
    def test_non_plans_are_empty(self, plan):
        assert build_timeline(plan) == []

    def test_groups_are_ignored(self):
        timeline = build_timeline([
            {"sets": 1, "groupNumber": 1},
            {"sets": 1},
            {"sets": 1, "groupNumber": 1},
        ])
        assert [s.item_index for s in timeline] == [0, 1, 2]

    def test_accepts_plan_items(self):
        timeline = build_timeline([PlanItem(name="a", sets=3)])
        assert len(timeline) == 3


class TestItemSets:
    """Test set counting for raw and normalized items."""

    @pytest.mark.parametrize("raw, expected", [
        ({"sets": 4}, 4),
        ({"sets": "3"}, 3),
        ({"sets": 2.9}, 2),
        ({"sets": 0}, 1),
        ({"sets": -2}, 1),
        ({"sets": "many"}, 1),
        ({"sets": True}, 1),
        ({}, 1),
    ])
    def test_raw_items(self, raw, expected):
        assert item_sets(raw) == expected

    def test_plan_item(self):
        assert item_sets(PlanItem(sets=5)) == 5


class TestTimelineLookup:
    """Test timeline position helpers."""

    def test_find_timeline_index(self):
        timeline = build_timeline([{"sets": 2}, None, {"sets": 2}])

        assert find_timeline_index(timeline, 2, 2) == 3
        assert find_timeline_index(timeline, 1, 1) == -1
        assert find_timeline_index(timeline, 0, 3) == -1

    @pytest.mark.parametrize("total, remaining, expected", [
        (3, 3, 1),
        (3, 2, 2),
        (3, 1, 3),
        (3, 0, 4),
        (2, 5, 1),
    ])
    def test_next_set_number(self, total, remaining, expected):
        assert next_set_number(total, remaining) == expected
