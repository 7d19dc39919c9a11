"""
Centralized logging configuration for the workout sequencer.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the system should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Configure standard library logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    # Final rendering processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for group round state transitions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the state machine subsystem
    """
    return get_logger(name).bind(
        subsystem="state_machine",
        audit_trail=True
    )


def get_navigation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for manual next/previous navigation decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the navigation subsystem
    """
    return get_logger(name).bind(
        subsystem="navigation",
        audit_trail=False
    )


def log_state_transition(
    logger: FilteringBoundLogger,
    group_id: str,
    completed_item: int,
    action: str,
    target_item: Optional[int],
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a group round transition with standardized format.

    Args:
        logger: Structlog logger instance
        group_id: Group the completed item belongs to
        completed_item: Plan index of the item whose set was completed
        action: Resulting action value
        target_item: Plan index the caller should run next, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        group_id=group_id,
        completed_item=completed_item,
        action=action,
        target_item=target_item,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")


def log_navigation(
    logger: FilteringBoundLogger,
    direction: str,
    item_index: int,
    phase: str,
    step: str,
    target_item: Optional[int],
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a manual navigation decision with standardized format.

    Args:
        logger: Structlog logger instance
        direction: "next" or "previous"
        item_index: Plan index the caller navigated from
        phase: Phase the caller navigated from ("exercise" or "rest")
        step: Resulting navigation step value
        target_item: Plan index of the target, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        direction=direction,
        from_item=item_index,
        from_phase=phase,
        step=step,
        target_item=target_item,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Navigation")
