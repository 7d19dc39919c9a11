"""
Session history for round transitions and manual navigation.

Completion events are appended to an append-only transition log; nothing is
ever removed from it. The log answers "which member was completed last in
this group" and "is a rest pending in this group" at any depth.

Manual moves are kept on a bounded undo trail so previous() can retrace
next() exactly. A completion changes remaining sets, so it invalidates the
trail.
"""

from typing import Optional

from .models import (
    NavigationMove,
    NavigationTarget,
    NextAction,
    NextStep,
    RoundTransition,
    StepPhase,
)


class SessionHistory:
    """Round transitions and the manual navigation trail of one session."""

    def __init__(self, max_undo_depth: int = 100):
        self.max_undo_depth = max_undo_depth
        self._transitions: list[RoundTransition] = []
        self._undo_trail: list[NavigationMove] = []

    @property
    def epoch(self) -> int:
        """Number of completion events recorded so far."""
        return len(self._transitions)

    def record_completion(
        self,
        group_id: str,
        completed_item: int,
        step: NextStep,
        round_number: int
    ) -> RoundTransition:
        transition = RoundTransition(
            sequence=len(self._transitions),
            group_id=group_id,
            completed_item=completed_item,
            action=step.action,
            target_item=step.item_index,
            rest_sec=step.rest_sec,
            round_number=round_number,
        )
        self._transitions.append(transition)
        self._undo_trail.clear()
        return transition

    def transitions(self, group_id: Optional[str] = None) -> tuple[RoundTransition, ...]:
        if group_id is None:
            return tuple(self._transitions)
        return tuple(t for t in self._transitions if t.group_id == group_id)

    def last_transition(self, group_id: str) -> Optional[RoundTransition]:
        for transition in reversed(self._transitions):
            if transition.group_id == group_id:
                return transition
        return None

    def last_completed_item(self, group_id: str) -> Optional[int]:
        """Member whose set was completed most recently in the group."""
        transition = self.last_transition(group_id)
        return transition.completed_item if transition else None

    def pending_rest(self, group_id: str) -> Optional[RoundTransition]:
        """
        The group's rest boundary that is still active.

        A rest stays active from the round boundary until the next completion
        in the same group.
        """
        transition = self.last_transition(group_id)
        if transition and transition.action == NextAction.REST_THEN_CONTINUE:
            return transition
        return None

    def record_move(self, origin_item: int, origin_phase: StepPhase,
                    target: NavigationTarget) -> None:
        if self.max_undo_depth <= 0 or not target.has_target:
            return
        self._undo_trail.append(NavigationMove(
            origin_item=origin_item,
            origin_phase=origin_phase,
            target=target,
            epoch=self.epoch,
        ))
        if len(self._undo_trail) > self.max_undo_depth:
            del self._undo_trail[0]

    def retrace(self, item_index: int, phase: StepPhase) -> Optional[NavigationMove]:
        """
        Pop the latest manual move if it landed on (item_index, phase).

        Returns None when the caller is somewhere the trail does not explain.
        """
        if not self._undo_trail:
            return None
        move = self._undo_trail[-1]
        if move.epoch != self.epoch:
            return None
        if move.target.item_index != item_index or move.target.phase != phase:
            return None
        return self._undo_trail.pop()

    @property
    def undo_depth(self) -> int:
        return len(self._undo_trail)
