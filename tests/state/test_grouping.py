"""Tests for the group builder."""

from workout_sequencer.data.models import PlanItem
from workout_sequencer.state.grouping import (
    build_groups,
    find_group_for_item,
    has_groups,
    index_groups,
)


def item(name, group=None, sets=1):
    return PlanItem(name=name, sets=sets, group_number=group)


class TestBuildGroups:
    """Test partitioning plan items into ordered groups."""

    def test_standalone_items_are_singletons(self):
        groups = build_groups([item("a"), item("b")])

        assert [g.id for g in groups] == ["standalone-0", "standalone-1"]
        assert all(not g.is_group for g in groups)
        assert groups[1].item_indices == [1]

    def test_group_position_fixed_at_first_occurrence(self):
        """Interleaved members join the group created by the first member."""
        groups = build_groups([
            item("a", "1"), item("x"), item("b", "2"), item("c", "1"), item("d", "2"),
        ])

        assert [g.id for g in groups] == ["1", "standalone-1", "2"]
        assert groups[0].item_indices == [0, 3]
        assert groups[2].item_indices == [2, 4]
        assert groups[0].is_group is True

    def test_holes_are_skipped_without_renumbering(self):
        groups = build_groups([item("a", "1"), None, item("b", "1"), None, item("c")])

        assert groups[0].item_indices == [0, 2]
        assert groups[1].id == "standalone-4"

    def test_single_member_group_is_still_a_group(self):
        groups = build_groups([item("a", "solo", sets=3)])
        assert groups[0].is_group is True
        assert groups[0].id == "solo"

    def test_empty_plan(self):
        assert build_groups([]) == []


class TestGroupLookups:
    """Test group lookup helpers."""

    def test_find_group_for_item(self):
        groups = build_groups([item("a", "1"), item("b"), item("c", "1")])

        assert find_group_for_item(groups, 2).id == "1"
        assert find_group_for_item(groups, 1) is None
        assert find_group_for_item(groups, 99) is None

    def test_index_groups_only_covers_real_groups(self):
        groups = build_groups([item("a", "1"), item("b"), item("c", "1")])
        owners = index_groups(groups)

        assert set(owners) == {0, 2}
        assert owners[0] is owners[2]

    def test_has_groups(self):
        assert has_groups(build_groups([item("a"), item("b", "1")])) is True
        assert has_groups(build_groups([item("a"), item("b")])) is False
