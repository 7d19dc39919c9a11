"""
Plan item data model.

PlanItems are created once at session start and never modified afterwards.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class PlanItem:
    """One exercise entry of a workout plan, with coerced fields."""

    name: str = ""
    type: Optional[str] = None                       # Category marker, e.g. "exercise", "echo"
    sets: int = 1                                    # Always >= 1
    rest_sec: float = 0.0                            # Always >= 0
    group_number: Optional[str] = None               # Normalized key, None when standalone

    # Fields the sequencer does not interpret (reps, load, mode, ...)
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def is_grouped(self) -> bool:
        return self.group_number is not None

    def to_dict(self) -> dict[str, Any]:
        """Wire representation using the plan builder's field names."""
        data = dict(self.extra)
        data.update({
            "name": self.name,
            "type": self.type,
            "sets": self.sets,
            "restSec": self.rest_sec,
            "groupNumber": self.group_number,
        })
        return data
