"""
Error classification for plan ingestion and configuration handling.

The sequencing core never raises: these exceptions are raised by the strict
field parsers and the configuration loader, and are caught and degraded to
safe defaults wherever plan data is ingested.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]
