"""
Core group round state machine.

Members of a group perform one set each, back to back, in member order,
skipping exhausted members. After the last qualifying member of a round
exactly one rest happens, then the round restarts from the first member that
still has sets. A single-member group therefore rests after every set until
it is exhausted.
"""

from typing import Optional

from ..logging.config import get_state_logger, log_state_transition
from .models import Group, GroupState, NextAction, NextStep

state_logger = get_state_logger(__name__)


def next_member_with_sets(group: Group, state: GroupState, position: int) -> Optional[int]:
    """First member strictly after ``position`` that still has sets."""
    for member in group.members[position + 1:]:
        if state.remaining(member.index) > 0:
            return member.index
    return None


def previous_member_with_sets(group: Group, state: GroupState, position: int) -> Optional[int]:
    """Closest member strictly before ``position`` that still has sets."""
    for member in reversed(group.members[:max(position, 0)]):
        if state.remaining(member.index) > 0:
            return member.index
    return None


def first_member_with_sets(group: Group, state: GroupState) -> Optional[int]:
    """First member in group order that still has sets."""
    if not group.members:
        return None

    # Nominal round start
    first = group.members[0].index
    if state.remaining(first) > 0:
        return first

    # First member exhausted, fall back to a full scan
    for member in group.members:
        if state.remaining(member.index) > 0:
            return member.index
    return None


def resolve_next_exercise(
    group: Optional[Group],
    state: Optional[GroupState],
    completed_index: int
) -> NextStep:
    """
    Record one completed set and decide what comes next.

    Args:
        group: Real group owning the completed item, None for standalone items
        state: Remaining-sets state of that group
        completed_index: Plan index of the item whose set was just completed

    Returns:
        NextStep with action next-exercise, rest-then-continue or complete
    """
    if group is None or state is None:
        return NextStep.complete()

    position = group.position_of(completed_index)
    if position < 0:
        return NextStep.complete()

    remaining_after = state.decrement(completed_index)

    # 1) Continue the round without rest
    target = next_member_with_sets(group, state, position)
    if target is not None:
        step = NextStep(action=NextAction.NEXT_EXERCISE, item_index=target)
        log_state_transition(
            state_logger,
            group_id=group.id,
            completed_item=completed_index,
            action=step.action.value,
            target_item=target,
            context={
                "round": state.current_round,
                "completed_remaining": remaining_after,
            }
        )
        return step

    # 2) Group exhausted
    if not state.any_remaining():
        log_state_transition(
            state_logger,
            group_id=group.id,
            completed_item=completed_index,
            action=NextAction.COMPLETE.value,
            target_item=None,
            context={"rounds": state.current_round}
        )
        return NextStep.complete()

    # 3) Round boundary: rest after the completed item, then restart the round
    target = first_member_with_sets(group, state)
    if target is None:
        return NextStep.complete()

    completed_item = group.members[position].item
    step = NextStep(
        action=NextAction.REST_THEN_CONTINUE,
        item_index=target,
        rest_after=completed_index,
        rest_sec=completed_item.rest_sec,
    )
    state.current_round += 1

    log_state_transition(
        state_logger,
        group_id=group.id,
        completed_item=completed_index,
        action=step.action.value,
        target_item=target,
        context={
            "rest_sec": step.rest_sec,
            "next_round": state.current_round,
            "remaining": dict(state.sets_remaining),
        }
    )
    return step
