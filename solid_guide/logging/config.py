"""
Centralized logging configuration for the SOLID guide tooling.

The catalog, renderer, outputs, fidelity checker and CLI all log through
structlog configured here. Output goes to stderr so that a document
rendered to stdout is never interleaved with log lines. The example
modules under ``solid_guide.principles`` deliberately do not log.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the whole guide.

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
        stream=sys.stderr,
        format="%(message)s",
        force=True,
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
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
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


def log_check_result(
    logger: FilteringBoundLogger,
    principle: str,
    check: str,
    passed: bool,
    detail: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a fidelity check outcome with standardized fields.

    Args:
        logger: Structlog logger instance
        principle: Principle letter the check belongs to
        check: Name of the check
        passed: Whether the example still demonstrates its principle
        detail: Human readable explanation of the outcome
        context: Additional context data
    """
    bound_logger = logger.bind(
        principle=principle,
        check=check,
        check_result="PASS" if passed else "FAIL",
        detail=detail,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if passed:
        bound_logger.info("Fidelity check passed")
    else:
        bound_logger.warning("Fidelity check failed")
