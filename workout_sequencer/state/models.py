"""
State machine data models for superset group sequencing.

This module defines the group structure derived from a plan, the mutable
per-group remaining-sets state owned by an engine, and the immutable
results returned to the driving caller.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..data.models import PlanItem

STANDALONE_PREFIX = "standalone-"


class NextAction(str, Enum):
    """What the caller should do after a set is completed."""
    NEXT_EXERCISE = "next-exercise"
    REST_THEN_CONTINUE = "rest-then-continue"
    COMPLETE = "complete"


class StepPhase(str, Enum):
    """Phase the caller is showing when it navigates."""
    EXERCISE = "exercise"
    REST = "rest"


class NavigationStep(str, Enum):
    """Kind of target a navigation request resolved to."""
    EXERCISE = "exercise"
    REST = "rest"
    BOUNDARY = "boundary"
    NONE = "none"


@dataclass(frozen=True)
class GroupMember:
    """A plan item referenced by its original plan index."""
    index: int
    item: PlanItem


@dataclass(frozen=True)
class Group:
    """Ordered members sharing one group key, or a standalone singleton."""

    id: str
    members: tuple[GroupMember, ...]
    is_group: bool

    @property
    def item_indices(self) -> list[int]:
        return [member.index for member in self.members]

    def position_of(self, item_index: int) -> int:
        """Position of an item within the group, -1 if absent."""
        for position, member in enumerate(self.members):
            if member.index == item_index:
                return position
        return -1

    def member_at(self, item_index: int) -> Optional[GroupMember]:
        for member in self.members:
            if member.index == item_index:
                return member
        return None


@dataclass
class GroupState:
    """
    Remaining-sets bookkeeping for one real group.

    Counts start at each member's configured sets and only go down, one per
    recorded completion, never below zero.
    """

    group_id: str
    sets_remaining: dict[int, int]
    current_round: int = 1

    @classmethod
    def for_group(cls, group: Group) -> "GroupState":
        return cls(
            group_id=group.id,
            sets_remaining={member.index: member.item.sets for member in group.members},
        )

    def remaining(self, item_index: int) -> int:
        return self.sets_remaining.get(item_index, 0)

    def decrement(self, item_index: int) -> int:
        """Record one completed set, returning the new remaining count."""
        current = self.sets_remaining.get(item_index, 0)
        if current > 0:
            self.sets_remaining[item_index] = current - 1
        return self.sets_remaining.get(item_index, 0)

    def any_remaining(self) -> bool:
        return any(count > 0 for count in self.sets_remaining.values())

    def snapshot(self) -> "GroupSnapshot":
        return GroupSnapshot(
            group_id=self.group_id,
            current_round=self.current_round,
            items=tuple(
                RemainingSets(item_index=index, remaining=remaining)
                for index, remaining in self.sets_remaining.items()
            ),
        )


@dataclass(frozen=True)
class RemainingSets:
    """Remaining sets of one group member."""
    item_index: int
    remaining: int


@dataclass(frozen=True)
class GroupSnapshot:
    """Read-only copy of a GroupState."""
    group_id: str
    current_round: int
    items: tuple[RemainingSets, ...] = ()

    def as_dict(self) -> dict[int, int]:
        return {entry.item_index: entry.remaining for entry in self.items}


@dataclass(frozen=True)
class NextStep:
    """Result of recording a completed set."""

    action: NextAction
    item_index: Optional[int] = None
    rest_after: Optional[int] = None                 # Item whose restSec applies
    rest_sec: Optional[float] = None

    @classmethod
    def complete(cls) -> "NextStep":
        return cls(action=NextAction.COMPLETE)


@dataclass(frozen=True)
class NavigationTarget:
    """Result of a manual next/previous request."""

    step: NavigationStep
    item_index: Optional[int] = None
    rest_sec: Optional[float] = None
    after: Optional[int] = None                      # Item the rest follows
    starting_new_round: bool = False
    group_boundary: Optional[str] = None             # "start" or "end"

    @classmethod
    def none(cls, group_boundary: Optional[str] = None) -> "NavigationTarget":
        return cls(step=NavigationStep.NONE, group_boundary=group_boundary)

    @property
    def has_target(self) -> bool:
        return self.step in (NavigationStep.EXERCISE, NavigationStep.REST)

    @property
    def phase(self) -> Optional[StepPhase]:
        """Phase the caller shows after following this target."""
        if self.step == NavigationStep.EXERCISE:
            return StepPhase.EXERCISE
        if self.step == NavigationStep.REST:
            return StepPhase.REST
        return None


@dataclass(frozen=True)
class RoundTransition:
    """One completion event recorded by the engine."""

    sequence: int
    group_id: str
    completed_item: int
    action: NextAction
    target_item: Optional[int] = None
    rest_sec: Optional[float] = None
    round_number: int = 1


@dataclass(frozen=True)
class NavigationMove:
    """A manual move, kept so previous() can retrace it."""

    origin_item: int
    origin_phase: StepPhase
    target: NavigationTarget
    epoch: int = 0                                   # Completion count when the move was made
