"""
Plan data normalization for converting raw plan entries to PlanItems.

This module handles field name standardization (the plan builder's camelCase
spelling and snake_case are both accepted) and coercion of loosely-typed
numeric and group fields. Normalization never fails: every problem is
recorded as a FieldIssue and replaced with a safe default.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

from ..errors import DataQualityError, MalformedDataError, MissingDataError
from ..logging.config import get_logger
from ..utils.coercion import (
    DEFAULT_REST_SEC,
    DEFAULT_SETS,
    normalize_group_key,
    parse_rest_seconds,
    parse_sets,
)
from .models import PlanItem

logger = get_logger(__name__)

# Accepted spellings per field, first match wins
FIELD_ALIASES = {
    "sets": ("sets",),
    "rest_sec": ("restSec", "rest_sec"),
    "group_number": ("groupNumber", "group_number"),
}

KNOWN_KEYS = {"name", "type"} | {alias for names in FIELD_ALIASES.values() for alias in names}


@dataclass(frozen=True)
class FieldIssue:
    """A plan item field that was replaced with a default."""
    item_index: Optional[int]
    field: str
    message: str
    raw_value: Any
    default_used: Any
    missing: bool = False


@dataclass
class PlanNormalizationResult:
    """Result of plan normalization process."""
    # Same length as the input, None marks a hole
    items: list[Optional[PlanItem]] = field(default_factory=list)
    issues: list[FieldIssue] = field(default_factory=list)

    @property
    def has_malformed_fields(self) -> bool:
        return any(not issue.missing for issue in self.issues)


class PlanNormalizer:
    """
    Plan data normalization pipeline.

    Converts raw plan entries to PlanItems, keeping holes in place so that
    plan indices never shift.
    """

    def __init__(self, default_rest_sec: float = DEFAULT_REST_SEC):
        """
        Initialize plan normalizer.

        Args:
            default_rest_sec: Rest used when restSec is missing or invalid
        """
        self.default_rest_sec = max(0.0, float(default_rest_sec))
        self.logger = logger

    def normalize_plan(self, raw_items: Optional[Sequence[Any]]) -> PlanNormalizationResult:
        """
        Normalize a whole plan.

        Args:
            raw_items: Ordered plan entries; None entries are holes

        Returns:
            PlanNormalizationResult with one slot per input entry
        """
        result = PlanNormalizationResult()

        if raw_items is None:
            return result
        if isinstance(raw_items, (str, bytes, Mapping)):
            issue = FieldIssue(
                item_index=None,
                field="plan",
                message=f"plan must be a sequence of items, got {type(raw_items).__name__}",
                raw_value=raw_items,
                default_used=[],
            )
            result.issues.append(issue)
            self.logger.warning("Plan is not a sequence, treating as empty", raw_type=type(raw_items).__name__)
            return result

        for index, raw in enumerate(raw_items):
            item, issues = self.normalize_item(raw, index)
            result.items.append(item)
            result.issues.extend(issues)

        if result.issues:
            self.logger.info(
                "Plan normalized with defaults applied",
                item_count=len(result.items),
                issue_count=len(result.issues),
                malformed=result.has_malformed_fields
            )

        return result

    def normalize_item(self, raw: Any, index: Optional[int] = None) -> tuple[Optional[PlanItem], list[FieldIssue]]:
        """
        Normalize a single plan entry.

        Returns:
            (PlanItem or None for a hole, issues found while coercing)
        """
        if raw is None:
            return None, []

        if isinstance(raw, PlanItem):
            raw = raw.to_dict()

        if not isinstance(raw, Mapping):
            self.logger.warning(
                "Plan entry is not a mapping, treating as hole",
                item_index=index,
                raw_type=type(raw).__name__
            )
            return None, [FieldIssue(
                item_index=index,
                field="item",
                message=f"plan entry must be a mapping, got {type(raw).__name__}",
                raw_value=raw,
                default_used=None,
            )]

        issues: list[FieldIssue] = []

        sets = self._coerce_field(raw, "sets", parse_sets, DEFAULT_SETS, index, issues)
        rest_sec = self._coerce_field(
            raw, "rest_sec", parse_rest_seconds, self.default_rest_sec, index, issues
        )
        group_number = normalize_group_key(self._lookup(raw, "group_number"))

        name = raw.get("name")
        item_type = raw.get("type")

        item = PlanItem(
            name="" if name is None else str(name),
            type=None if item_type is None else str(item_type),
            sets=sets,
            rest_sec=rest_sec,
            group_number=group_number,
            extra=MappingProxyType({k: v for k, v in raw.items() if k not in KNOWN_KEYS}),
        )
        return item, issues

    def _lookup(self, raw: Mapping[str, Any], field_name: str) -> Any:
        for alias in FIELD_ALIASES[field_name]:
            if alias in raw:
                return raw[alias]
        return None

    def _coerce_field(self, raw, field_name, parser, default, index, issues):
        value = self._lookup(raw, field_name)
        try:
            return parser(value)
        except MissingDataError as e:
            # Absent fields are normal for optional plan inputs
            self.logger.debug("Plan field missing, using default", item_index=index,
                              field=field_name, default=default)
            issues.append(FieldIssue(index, field_name, str(e), value, default, missing=True))
        except MalformedDataError as e:
            self.logger.warning("Plan field malformed, using default", item_index=index,
                                field=field_name, raw_value=repr(value), default=default,
                                error=str(e))
            issues.append(FieldIssue(index, field_name, str(e), value, default))
        except DataQualityError as e:
            self.logger.warning("Plan field rejected, using default", item_index=index,
                                field=field_name, error=str(e))
            issues.append(FieldIssue(index, field_name, str(e), value, default))
        return default
