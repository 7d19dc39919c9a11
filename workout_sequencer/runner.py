"""
Workout runner.

Drives a SupersetEngine through a whole plan the way a UI would, without a
clock: each timeline step is treated as completed as soon as it is reached,
and the engine decides where to go next. Grouped items jump to the matching
(item, set) timeline step; standalone items and finished groups resume at the
first timeline step that has not run yet, so items placed between members of
a group still run and no grouped step runs twice.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence

import structlog

from .config.defaults import DefaultConfig
from .engine import SupersetEngine
from .state.models import NextAction, NextStep
from .timeline.builder import (
    TimelineStep,
    build_timeline,
    find_timeline_index,
    next_set_number,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ExecutedStep:
    """A set that ran, and the rest the caller owes after it."""
    item_index: int
    set_number: int
    timeline_index: int
    action: NextAction
    rest_sec: float = 0.0


class WorkoutRunner:
    """Runs one session of a plan to completion."""

    def __init__(self, items: Optional[Sequence[Any]] = None,
                 config: Optional[DefaultConfig] = None) -> None:
        self.logger = logger
        self.engine = SupersetEngine(items, config)
        self.timeline: list[TimelineStep] = build_timeline(self.engine.items)
        self._executed: set[int] = set()

    def run(self) -> Iterator[ExecutedStep]:
        """
        Yield executed steps until the plan is done.

        The runner owns a single session, so a second call yields nothing.
        """
        position = self._first_pending()

        while position is not None:
            step = self.timeline[position]
            self._executed.add(position)

            result = self.engine.get_next_exercise(step.item_index)
            target = self._target_position(result)
            next_position = target if target is not None else self._first_pending()

            yield ExecutedStep(
                item_index=step.item_index,
                set_number=step.set_number,
                timeline_index=position,
                action=result.action,
                rest_sec=self._rest_after(step, result, next_position),
            )
            position = next_position

        self.logger.info(
            "Workout finished",
            executed_steps=len(self._executed),
            timeline_length=len(self.timeline)
        )

    def order(self) -> list[tuple[int, int]]:
        """Run the plan and return the executed (item_index, set_number) pairs."""
        return [(step.item_index, step.set_number) for step in self.run()]

    @property
    def progress(self) -> tuple[int, int]:
        """(steps executed, total steps) for display."""
        return len(self._executed), len(self.timeline)

    def _target_position(self, result: NextStep) -> Optional[int]:
        if result.action == NextAction.COMPLETE or result.item_index is None:
            return None

        item = self.engine.items[result.item_index]
        remaining = self.engine.get_remaining_sets(result.item_index)
        set_number = next_set_number(item.sets, remaining)
        position = find_timeline_index(self.timeline, result.item_index, set_number)

        if position < 0 or position in self._executed:
            self.logger.warning(
                "Engine target has no pending timeline step",
                item_index=result.item_index,
                set_number=set_number
            )
            return None
        return position

    def _first_pending(self) -> Optional[int]:
        for position in range(len(self.timeline)):
            if position not in self._executed:
                return position
        return None

    def _rest_after(self, step: TimelineStep, result: NextStep,
                    next_position: Optional[int]) -> float:
        if next_position is None:
            return 0.0
        if result.action == NextAction.NEXT_EXERCISE:
            return 0.0
        if result.action == NextAction.REST_THEN_CONTINUE:
            return result.rest_sec or 0.0
        return self.engine.resolve_rest_seconds(step.item_index)
