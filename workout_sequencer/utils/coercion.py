"""
Coercion of loosely-typed plan item fields.

Plan items arrive from UI forms and stored JSON, so numeric fields may be
strings, floats, None or garbage. The ``parse_*`` functions are strict and
raise a ``DataQualityError`` subclass; the ``coerce_*`` functions never raise
and fall back to the documented defaults.
"""

import math
from numbers import Real
from typing import Any, Optional

from ..errors import DataQualityError, MalformedDataError, MissingDataError

DEFAULT_SETS = 1
DEFAULT_REST_SEC = 0.0


def parse_number(value: Any, field: str) -> float:
    """
    Parse a finite number from a numeric value or numeric string.

    Raises:
        MissingDataError: value is None or an empty/whitespace string
        MalformedDataError: value is not a finite number
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingDataError(f"{field} is missing", field=field, data_type="number")

    # bool is an int subclass; True is not "1 set"
    if isinstance(value, bool):
        raise MalformedDataError(
            f"{field} must be numeric, got bool",
            field=field, raw_data=value, expected_format="number"
        )

    if isinstance(value, Real):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError as e:
            raise MalformedDataError(
                f"{field} is not numeric: {value!r}",
                field=field, raw_data=value, expected_format="number"
            ) from e
    else:
        raise MalformedDataError(
            f"{field} has unsupported type {type(value).__name__}",
            field=field, raw_data=value, expected_format="number"
        )

    if not math.isfinite(number):
        raise MalformedDataError(
            f"{field} is not finite: {value!r}",
            field=field, raw_data=value, expected_format="finite number"
        )
    return number


def parse_sets(value: Any) -> int:
    """Parse a set count; values below one are malformed, fractions truncate."""
    number = parse_number(value, "sets")
    if number < 1:
        raise MalformedDataError(
            f"sets must be at least 1, got {value!r}",
            field="sets", raw_data=value, expected_format="integer >= 1"
        )
    return int(number)


def parse_rest_seconds(value: Any) -> float:
    """Parse a rest duration in seconds, flooring negative values at zero."""
    return max(0.0, parse_number(value, "restSec"))


def coerce_sets(value: Any) -> int:
    """Set count as an integer >= 1; unusable values become 1."""
    try:
        return parse_sets(value)
    except DataQualityError:
        return DEFAULT_SETS


def coerce_rest_seconds(value: Any, default: float = DEFAULT_REST_SEC) -> float:
    """Rest duration >= 0; missing or invalid values become ``default``."""
    try:
        return parse_rest_seconds(value)
    except DataQualityError:
        return max(0.0, float(default))


def normalize_group_key(value: Any) -> Optional[str]:
    """
    Normalize a group identifier to a trimmed string key.

    Returns None when the item is standalone. Integral numbers use their
    integer spelling, so 1, 1.0 and " 1 " all map to "1".
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Real):
        number = float(value)
        if not math.isfinite(number):
            return None
        if number.is_integer():
            return str(int(number))
        return str(number)

    key = str(value).strip()
    return key or None
