"""Unit tests for the superset sequencing engine."""

import pytest
from unittest.mock import Mock

from workout_sequencer.config.defaults import (
    DefaultConfig,
    LoggingParams,
    NavigationParams,
    RestParams,
)
from workout_sequencer.data.models import PlanItem
from workout_sequencer.engine import SupersetEngine
from workout_sequencer.state.models import (
    GroupSnapshot,
    NextAction,
    NextStep,
    RemainingSets,
)


def make_config(default_rest_sec=0.0, max_undo_depth=100):
    return DefaultConfig(
        rest=RestParams(default_rest_sec=default_rest_sec),
        navigation=NavigationParams(max_undo_depth=max_undo_depth),
        logging=LoggingParams(),
    )


class TestSupersetEngineInitialization:
    """Test plan ingestion."""

    def test_engine_initialization(self, superset_plan):
        engine = SupersetEngine(superset_plan)

        assert len(engine.items) == 6
        assert engine.has_groups() is True
        assert set(engine.get_state()) == {"1", "2"}

    def test_empty_and_missing_plan(self):
        for plan in (None, []):
            engine = SupersetEngine(plan)
            assert engine.items == ()
            assert engine.has_groups() is False
            assert engine.get_state() == {}

    def test_plan_without_groups(self):
        engine = SupersetEngine([{"name": "a", "sets": 3}, {"name": "b"}])
        assert engine.has_groups() is False
        assert engine.get_next_exercise(0) == NextStep.complete()

    def test_accepts_plan_items(self):
        engine = SupersetEngine([
            PlanItem(name="a", sets=2, group_number="x"),
            PlanItem(name="b", sets=2, group_number="x"),
        ])
        assert engine.get_grouped_items("x") == [0, 1]

    def test_issues_are_collected(self):
        engine = SupersetEngine([{"name": "a", "sets": "lots", "groupNumber": 1}])

        assert engine.items[0].sets == 1
        assert any(issue.field == "sets" and not issue.missing for issue in engine.issues)

    def test_config_default_rest_applies_to_missing_rest(self):
        engine = SupersetEngine(
            [{"name": "a", "sets": 2, "groupNumber": 1}],
            config=make_config(default_rest_sec=20)
        )
        assert engine.resolve_rest_seconds(0) == 20
        assert engine.get_next_exercise(0).rest_sec == 20

    def test_independent_instances(self, pair_plan):
        first = SupersetEngine(pair_plan)
        second = SupersetEngine(pair_plan)

        first.get_next_exercise(0)

        assert first.get_remaining_sets(0) == 1
        assert second.get_remaining_sets(0) == 2
        assert second.get_history() == ()

    def test_unknown_phase_logs_warning(self, pair_plan):
        engine = SupersetEngine(pair_plan)
        engine.logger = Mock()

        engine.next(0, "bogus")

        engine.logger.warning.assert_called_once()


class TestGetNextExercise:
    """Test completion handling through the engine."""

    def test_pair_sequence(self, pair_engine):
        steps = [pair_engine.get_next_exercise(index) for index in (0, 1, 0, 1, 1)]

        assert [(s.action, s.item_index) for s in steps] == [
            (NextAction.NEXT_EXERCISE, 1),
            (NextAction.REST_THEN_CONTINUE, 0),
            (NextAction.NEXT_EXERCISE, 1),
            (NextAction.REST_THEN_CONTINUE, 1),
            (NextAction.COMPLETE, None),
        ]
        assert steps[1].rest_sec == 30
        assert steps[3].rest_after == 1
        assert pair_engine.is_group_complete("1") is True

    def test_standalone_item_completes(self, superset_plan):
        engine = SupersetEngine(superset_plan)

        assert engine.get_next_exercise(3) == NextStep.complete()
        assert engine.get_history() == ()

    @pytest.mark.parametrize("index", [-1, 6, 100, None, "1", True, 1.0])
    def test_unknown_indices_complete(self, superset_plan, index):
        engine = SupersetEngine(superset_plan)
        before = engine.get_state()

        assert engine.get_next_exercise(index).action == NextAction.COMPLETE
        assert engine.get_state() == before

    def test_completing_exhausted_item_does_not_go_negative(self, pair_engine):
        for _ in range(4):
            pair_engine.get_next_exercise(0)
        assert pair_engine.get_remaining_sets(0) == 0

    def test_hole_is_not_grouped(self):
        engine = SupersetEngine([
            {"name": "a", "sets": 2, "groupNumber": 1},
            None,
            {"name": "b", "sets": 2, "groupNumber": 1},
        ])

        assert engine.get_grouped_items(1) == [0, 2]
        assert engine.get_next_exercise(1) == NextStep.complete()
        assert engine.get_next_exercise(0).item_index == 2

    def test_history_records_completions(self, pair_engine):
        pair_engine.get_next_exercise(0)
        pair_engine.get_next_exercise(1)

        history = pair_engine.get_history()

        assert [t.completed_item for t in history] == [0, 1]
        assert history[1].action == NextAction.REST_THEN_CONTINUE
        assert history[1].round_number == 1
        assert history[1].rest_sec == 30


class TestQueries:
    """Test read-only engine queries."""

    def test_get_state_snapshot(self, pair_engine):
        pair_engine.get_next_exercise(0)

        state = pair_engine.get_state()

        assert state == {
            "1": GroupSnapshot(
                group_id="1",
                current_round=1,
                items=(RemainingSets(0, 1), RemainingSets(1, 3)),
            )
        }
        assert state["1"].as_dict() == {0: 1, 1: 3}

    def test_get_state_is_detached(self, pair_engine):
        state = pair_engine.get_state()
        state.clear()

        assert pair_engine.get_state() != {}
        assert pair_engine.get_state() == pair_engine.get_state()

    def test_remaining_sets(self, superset_plan):
        engine = SupersetEngine(superset_plan)

        assert engine.get_remaining_sets(1) == 3
        assert engine.get_remaining_sets(3) == 0
        assert engine.get_remaining_sets(42) == 0

    def test_group_key_normalization(self, triple_engine):
        assert triple_engine.get_grouped_items(7) == [0, 1, 2]
        assert triple_engine.get_grouped_items("7") == [0, 1, 2]
        assert triple_engine.get_grouped_items(7.0) == [0, 1, 2]
        assert triple_engine.get_grouped_items("8") == []
        assert triple_engine.get_grouped_items(None) == []

    def test_is_grouped(self, triple_engine):
        assert triple_engine.is_grouped(0) is True
        assert triple_engine.is_grouped(3) is False
        assert triple_engine.is_grouped(True) is False

    def test_find_group_for_item(self, superset_plan):
        engine = SupersetEngine(superset_plan)

        assert engine.find_group_for_item(4).id == "2"
        assert engine.find_group_for_item(3) is None

    def test_get_group_info(self, pair_engine):
        pair_engine.get_next_exercise(0)
        pair_engine.get_next_exercise(1)

        info = pair_engine.get_group_info("1")

        assert info["is_group"] is True
        assert info["exercise_count"] == 2
        assert info["current_round"] == 2
        assert info["items"][1] == {
            "item_index": 1, "name": "B", "total_sets": 3, "remaining": 2
        }

    def test_get_group_info_for_standalone(self, superset_plan):
        engine = SupersetEngine(superset_plan)

        info = engine.get_group_info("standalone-3")

        assert info["is_group"] is False
        assert info["items"][0]["name"] == "not super"
        assert engine.get_group_info("missing") is None

    def test_is_group_complete(self, pair_engine):
        assert pair_engine.is_group_complete("1") is False
        assert pair_engine.is_group_complete("nope") is False
        assert pair_engine.is_group_complete(None) is False

    def test_group_zero_is_a_real_group(self):
        engine = SupersetEngine([
            {"name": "a", "sets": 1, "groupNumber": 0},
            {"name": "b", "sets": 1, "groupNumber": "0"},
        ])
        assert engine.get_grouped_items(0) == [0, 1]
        assert engine.get_next_exercise(0).item_index == 1

    def test_resolve_rest_seconds(self, superset_plan):
        engine = SupersetEngine(superset_plan)

        assert engine.resolve_rest_seconds(4) == 90
        assert engine.resolve_rest_seconds(0) == 0
        assert engine.resolve_rest_seconds(99) == 0
