"""
Manual next/previous navigation within a group.

Navigation reads remaining-sets state but never changes it. Lookups that
fail resolve to a NONE target so the caller simply stops moving inside the
group; crossing a group boundary is always the caller's job.
"""

from typing import Optional

from ..logging.config import get_navigation_logger, log_navigation
from .history import SessionHistory
from .machine import (
    first_member_with_sets,
    next_member_with_sets,
    previous_member_with_sets,
)
from .models import (
    Group,
    GroupState,
    NavigationStep,
    NavigationTarget,
    StepPhase,
)

navigation_logger = get_navigation_logger(__name__)


def exercise_target(item_index: int, starting_new_round: bool = False) -> NavigationTarget:
    return NavigationTarget(
        step=NavigationStep.EXERCISE,
        item_index=item_index,
        starting_new_round=starting_new_round,
    )


def rest_target(item_index: int, rest_sec: float) -> NavigationTarget:
    # The rest phase is addressed by the item it follows
    return NavigationTarget(
        step=NavigationStep.REST,
        item_index=item_index,
        after=item_index,
        rest_sec=rest_sec,
    )


def resolve_rest_after(group: Group, history: SessionHistory, item_index: int) -> float:
    """
    Rest seconds for a rest shown after ``item_index``.

    A recorded round boundary after that item wins; otherwise the group's
    last completed member decides, and the item's own rest is the fallback.
    """
    pending = history.pending_rest(group.id)
    if pending is not None and pending.completed_item == item_index and pending.rest_sec is not None:
        return pending.rest_sec

    last_completed = history.last_completed_item(group.id)
    member = group.member_at(last_completed) if last_completed is not None else None
    if member is None:
        member = group.member_at(item_index)
    return member.item.rest_sec if member else 0.0


def navigate_next(
    group: Optional[Group],
    state: Optional[GroupState],
    history: SessionHistory,
    item_index: int,
    phase: StepPhase = StepPhase.EXERCISE
) -> NavigationTarget:
    """
    Step forward from ``item_index``.

    From an exercise: the next member of the round with sets left; at the
    end of the round a rest step when the last completed member rests, or
    the first member of the next round. From a rest: the first member of the
    next round. Returns a NONE target once the group has nothing left.
    """
    target = _next_target(group, state, history, item_index, phase)

    if target.has_target:
        history.record_move(item_index, phase, target)

    log_navigation(
        navigation_logger,
        direction="next",
        item_index=item_index,
        phase=phase.value,
        step=target.step.value,
        target_item=target.item_index,
        context={"group_id": group.id if group else None,
                 "starting_new_round": target.starting_new_round}
    )
    return target


def _next_target(group, state, history, item_index, phase) -> NavigationTarget:
    if group is None or state is None or group.position_of(item_index) < 0:
        return NavigationTarget.none()

    if not state.any_remaining():
        return NavigationTarget.none(group_boundary="end")

    if phase == StepPhase.REST:
        first = first_member_with_sets(group, state)
        return exercise_target(first, starting_new_round=True)

    position = group.position_of(item_index)
    later = next_member_with_sets(group, state, position)
    if later is not None:
        return exercise_target(later)

    # Round exhausted: rest only if a member has been completed in this group
    if history.last_completed_item(group.id) is not None:
        rest_sec = resolve_rest_after(group, history, item_index)
        if rest_sec > 0:
            return rest_target(item_index, rest_sec)

    first = first_member_with_sets(group, state)
    return exercise_target(first, starting_new_round=True)


def navigate_previous(
    group: Optional[Group],
    state: Optional[GroupState],
    history: SessionHistory,
    item_index: int,
    phase: StepPhase = StepPhase.EXERCISE
) -> NavigationTarget:
    """
    Step backward from ``item_index``.

    A move made by navigate_next is retraced exactly while no set has been
    completed since. Otherwise: from a rest, back to the exercise it
    follows; from an exercise, the previous member of the round with sets
    left, then the pending rest of the round, then a "start" boundary.
    """
    target = _previous_target(group, state, history, item_index, phase)

    log_navigation(
        navigation_logger,
        direction="previous",
        item_index=item_index,
        phase=phase.value,
        step=target.step.value,
        target_item=target.item_index,
        context={"group_id": group.id if group else None,
                 "group_boundary": target.group_boundary}
    )
    return target


def _previous_target(group, state, history, item_index, phase) -> NavigationTarget:
    if group is None or state is None or group.position_of(item_index) < 0:
        return NavigationTarget.none()

    move = history.retrace(item_index, phase)
    if move is not None:
        if move.origin_phase == StepPhase.REST:
            return rest_target(move.origin_item, resolve_rest_after(group, history, move.origin_item))
        return exercise_target(move.origin_item)

    if not state.any_remaining():
        return NavigationTarget.none(group_boundary="start")

    if phase == StepPhase.REST:
        return exercise_target(item_index)

    position = group.position_of(item_index)
    earlier = previous_member_with_sets(group, state, position)
    if earlier is not None:
        return exercise_target(earlier)

    pending = history.pending_rest(group.id)
    if pending is not None and pending.target_item == item_index:
        return rest_target(pending.completed_item, pending.rest_sec or 0.0)

    return NavigationTarget(step=NavigationStep.BOUNDARY, group_boundary="start")
