"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any

KNOWN_SECTIONS = {
    "rest": {"default_rest_sec"},
    "navigation": {"max_undo_depth"},
    "logging": {"level", "format_json"},
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_rest_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rest parameters."""
        errors = []

        if "default_rest_sec" in params:
            value = params["default_rest_sec"]
            if (isinstance(value, bool) or not isinstance(value, (int, float))
                    or not math.isfinite(value) or value < 0):
                errors.append(ValidationError(
                    field="rest.default_rest_sec",
                    message="Must be a finite non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_navigation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate navigation parameters."""
        errors = []

        if "max_undo_depth" in params:
            value = params["max_undo_depth"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append(ValidationError(
                    field="navigation.max_undo_depth",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {sorted(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="logging.format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, value in config.items():
            if section not in KNOWN_SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
                continue
            if not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))
                continue
            for key in value:
                if key not in KNOWN_SECTIONS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=value[key]
                    ))

        if isinstance(config.get("rest"), dict):
            errors.extend(ConfigValidator.validate_rest_params(config["rest"]))

        if isinstance(config.get("navigation"), dict):
            errors.extend(ConfigValidator.validate_navigation_params(config["navigation"]))

        if isinstance(config.get("logging"), dict):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
