"""Default configuration parameters for the workout sequencer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RestParams:
    """Rest duration parameters."""
    default_rest_sec: float = 0.0          # Used when restSec is missing or invalid


@dataclass(frozen=True)
class NavigationParams:
    """Manual navigation parameters."""
    max_undo_depth: int = 100              # Manual moves kept for previous()


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    rest: RestParams
    navigation: NavigationParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        rest=RestParams(),
        navigation=NavigationParams(),
        logging=LoggingParams(),
    )
