"""
Centralized logging configuration for the storydesk core.

This module provides standardized logging configuration using structlog
for all components. Matching decisions and degraded inputs are logged
through loggers obtained here so the dashboard gets one consistent,
structured stream.
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
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

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


def get_matcher_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for record matching decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for matching decisions
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="matching",
        audit_trail=True
    )


def log_match_decision(
    logger: FilteringBoundLogger,
    planning_id: Any,
    strategy: str,
    planning_title: str,
    metrics_title: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a single matching decision with standardized format.

    Args:
        logger: Structlog logger instance
        planning_id: ID of the planning record being matched
        strategy: Strategy that produced the match ("none" if unmatched)
        planning_title: Title of the planning record
        metrics_title: Title of the matched metrics record, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        planning_id=planning_id,
        strategy=strategy,
        planning_title=planning_title,
        metrics_title=metrics_title,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if strategy == "none":
        bound_logger.debug("No metrics record matched")
    else:
        bound_logger.debug("Metrics record matched")
