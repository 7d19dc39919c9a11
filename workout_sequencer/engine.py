"""
Superset sequencing engine.

One engine instance is one workout session. It ingests the plan once, owns
every group's remaining-sets state and the session history, and answers
completion and navigation events from the driving caller (a workout runner
or UI). Nothing is shared between instances.
"""

from typing import Any, Optional, Sequence

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .data.models import PlanItem
from .data.normalizer import FieldIssue, PlanNormalizer
from .state.grouping import build_groups, has_groups, index_groups
from .state.history import SessionHistory
from .state.machine import resolve_next_exercise
from .state.models import (
    Group,
    GroupSnapshot,
    GroupState,
    NavigationTarget,
    NextStep,
    RoundTransition,
    StepPhase,
)
from .state.navigation import navigate_next, navigate_previous
from .utils.coercion import normalize_group_key

logger = structlog.get_logger(__name__)


class SupersetEngine:
    """
    Round-robin sequencing of grouped plan items.

    Standalone items are never owned by the engine: completing one always
    resolves to ``complete`` and the caller moves on in plan order.
    """

    def __init__(self, items: Optional[Sequence[Any]] = None,
                 config: Optional[DefaultConfig] = None) -> None:
        """
        Initialize the engine for one session.

        Args:
            items: Ordered plan entries (mappings or PlanItems, None for holes)
            config: Effective configuration, defaults when omitted
        """
        self.logger = logger
        self.config = config or get_default_config()

        normalizer = PlanNormalizer(default_rest_sec=self.config.rest.default_rest_sec)
        normalization = normalizer.normalize_plan(items)

        self.items: tuple[Optional[PlanItem], ...] = tuple(normalization.items)
        self.issues: tuple[FieldIssue, ...] = tuple(normalization.issues)
        self.groups: tuple[Group, ...] = tuple(build_groups(self.items))
        self._owners: dict[int, Group] = index_groups(self.groups)
        self._group_states: dict[str, GroupState] = {
            group.id: GroupState.for_group(group)
            for group in self.groups if group.is_group
        }
        self.history = SessionHistory(max_undo_depth=self.config.navigation.max_undo_depth)

        self.logger.info(
            "Superset engine initialized",
            item_count=len(self.items),
            group_count=len(self._group_states),
            standalone_count=len(self.groups) - len(self._group_states),
            issue_count=len(self.issues)
        )

    # Completion flow

    def get_next_exercise(self, completed_item_index: int) -> NextStep:
        """
        Record one completed set of an item and decide what comes next.

        Unknown indices, holes and standalone items resolve to ``complete``.
        """
        group = self.find_group_for_item(completed_item_index)
        if group is None:
            self.logger.debug(
                "Completed item is not grouped",
                item_index=completed_item_index
            )
            return NextStep.complete()

        state = self._group_states.get(group.id)
        round_number = state.current_round if state else 1
        step = resolve_next_exercise(group, state, completed_item_index)

        if state is not None:
            self.history.record_completion(group.id, completed_item_index, step, round_number)
        return step

    def complete_rest(self, item_index: int) -> NavigationTarget:
        """The rest after ``item_index`` elapsed: first member of the next round."""
        return self.next(item_index, StepPhase.REST)

    # Navigation

    def next(self, item_index: int, phase: StepPhase = StepPhase.EXERCISE) -> NavigationTarget:
        """Manual step forward inside the item's group."""
        group = self.find_group_for_item(item_index)
        state = self._group_states.get(group.id) if group else None
        return navigate_next(group, state, self.history, item_index, self._phase(phase))

    def previous(self, item_index: int, phase: StepPhase = StepPhase.EXERCISE) -> NavigationTarget:
        """Manual step backward inside the item's group."""
        group = self.find_group_for_item(item_index)
        state = self._group_states.get(group.id) if group else None
        return navigate_previous(group, state, self.history, item_index, self._phase(phase))

    # Queries

    def get_remaining_sets(self, item_index: int) -> int:
        """Remaining sets of a grouped item, 0 for standalone or unknown items."""
        group = self.find_group_for_item(item_index)
        if group is None:
            return 0
        state = self._group_states.get(group.id)
        return state.remaining(item_index) if state else 0

    def get_state(self) -> dict[str, GroupSnapshot]:
        """Read-only snapshot of every group's state."""
        return {group_id: state.snapshot() for group_id, state in self._group_states.items()}

    def is_grouped(self, item_index: int) -> bool:
        return self.find_group_for_item(item_index) is not None

    def get_grouped_items(self, group_id: Any) -> list[int]:
        """Plan indices of a group's members in group order, empty if unknown."""
        group = self._find_group(group_id)
        return group.item_indices if group else []

    def has_groups(self) -> bool:
        return has_groups(self.groups)

    def find_group_for_item(self, item_index: int) -> Optional[Group]:
        # bool is an int subclass and would alias items 0 and 1
        if isinstance(item_index, bool) or not isinstance(item_index, int):
            return None
        return self._owners.get(item_index)

    def get_group_info(self, group_id: Any) -> Optional[dict[str, Any]]:
        """Display summary of a group or standalone item, None if unknown."""
        group = self._find_group(group_id)
        if group is None:
            return None

        state = self._group_states.get(group.id)
        return {
            "group_id": group.id,
            "is_group": group.is_group,
            "exercise_count": len(group.members),
            "current_round": state.current_round if state else 1,
            "items": [
                {
                    "item_index": member.index,
                    "name": member.item.name,
                    "total_sets": member.item.sets,
                    "remaining": state.remaining(member.index) if state else member.item.sets,
                }
                for member in group.members
            ],
        }

    def get_history(self) -> tuple[RoundTransition, ...]:
        """Every completion event recorded in this session, oldest first."""
        return self.history.transitions()

    def is_group_complete(self, group_id: Any) -> bool:
        key = normalize_group_key(group_id)
        state = self._group_states.get(key) if key else None
        return state is not None and not state.any_remaining()

    def resolve_rest_seconds(self, item_index: int) -> float:
        """Coerced rest of an item, 0 for holes and unknown indices."""
        item = self._item_at(item_index)
        return item.rest_sec if item else 0.0

    def _find_group(self, group_id: Any) -> Optional[Group]:
        key = normalize_group_key(group_id)
        if key is None:
            return None
        for group in self.groups:
            if group.id == key:
                return group
        return None

    def _item_at(self, item_index: int) -> Optional[PlanItem]:
        if isinstance(item_index, bool) or not isinstance(item_index, int):
            return None
        if 0 <= item_index < len(self.items):
            return self.items[item_index]
        return None

    def _phase(self, phase: Any) -> StepPhase:
        try:
            return StepPhase(phase)
        except ValueError:
            self.logger.warning("Unknown navigation phase, assuming exercise", phase=phase)
            return StepPhase.EXERCISE
