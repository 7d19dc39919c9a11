"""
Timeline builder.

The timeline is every set of every item in plan order. It ignores groups
entirely and never touches engine state; callers use it to show linear
progress ("set 5 of 14") and to locate the step a grouped target maps to.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..data.models import PlanItem
from ..utils.coercion import coerce_sets


@dataclass(frozen=True)
class TimelineStep:
    """One set of one plan item."""
    item_index: int
    set_number: int                                  # 1..sets


def item_sets(item: Any) -> int:
    """Coerced set count of a raw or normalized plan item."""
    if isinstance(item, PlanItem):
        return max(1, item.sets)
    if isinstance(item, Mapping):
        return coerce_sets(item.get("sets"))
    return coerce_sets(getattr(item, "sets", None))


def build_timeline(items: Optional[Sequence[Any]]) -> list[TimelineStep]:
    """Ordered steps for every non-None item; holes keep their index slot."""
    timeline = []
    if not items or isinstance(items, (str, bytes, Mapping)):
        return timeline

    for item_index, item in enumerate(items):
        if item is None:
            continue
        for set_number in range(1, item_sets(item) + 1):
            timeline.append(TimelineStep(item_index=item_index, set_number=set_number))
    return timeline


def find_timeline_index(timeline: Sequence[TimelineStep], item_index: int, set_number: int) -> int:
    """Position of the (item, set) step, -1 when absent."""
    for position, step in enumerate(timeline):
        if step.item_index == item_index and step.set_number == set_number:
            return position
    return -1


def next_set_number(total_sets: int, remaining: int) -> int:
    """Set number to run next for an item with ``remaining`` sets left."""
    return max(1, total_sets - remaining + 1)
