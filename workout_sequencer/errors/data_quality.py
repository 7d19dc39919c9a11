"""
Data quality error classifications for plan item ingestion.

These exceptions categorize the problems a raw plan item field can have.
They are always recoverable: the normalizer substitutes a default value.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, field: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.field = field
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """A plan item field is absent or empty."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """A plan item field exists but cannot be used as given."""

    def __init__(self, message: str, raw_data: Optional[Any] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
