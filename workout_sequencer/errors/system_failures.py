"""
System failure error classifications.

These represent failures outside the sequencing core that need a human to
fix them, such as a broken configuration file.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Configuration file could not be read or failed validation."""

    def __init__(self, message: str, source: Optional[str] = None,
                 errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        self.errors = errors or []
