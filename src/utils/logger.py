"""
Module: logger.py
Description: Structured logging configuration for the SQS delete action.

Configures structlog for either JSON output or GitHub Actions workflow
commands. Provides consistent logging across all modules with proper
context and structured data.

Key Components:
- JSON output for log collectors
- Workflow command output for the Actions runner
- Timestamp and log level processors
- configure_logging() / get_logger() helper functions

Dependencies: structlog, datetime, logging
Author: SQS Delete Queue Action Team
"""

import logging
import os
from datetime import datetime, timezone
from typing import Optional

import structlog

from utils.actions import format_command

LOG_FORMATS = ('github', 'json')


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """
    Add log level to event dictionary.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with level
    """
    event_dict["level"] = method_name.upper()
    return event_dict


def _render_workflow_command(logger, method_name, event_dict):
    """
    Render a log event the way the Actions runner displays it.

    Warnings and errors become ::warning:: / ::error:: annotations,
    debug events become ::debug:: lines, everything else is printed
    as plain text. Remaining context is appended as key=value pairs.
    """
    event_dict.pop("timestamp", None)
    level = event_dict.pop("level", method_name.upper())
    message = str(event_dict.pop("event", ""))
    exc_text = event_dict.pop("exception", None)

    context = " ".join(f"{key}={value}" for key, value in event_dict.items())
    if context:
        message = f"{message} {context}"
    if exc_text:
        message = f"{message}\n{exc_text}"

    if level in ("WARNING", "WARN"):
        return format_command("warning", message)
    if level in ("ERROR", "CRITICAL", "EXCEPTION"):
        return format_command("error", message)
    if level == "DEBUG":
        return format_command("debug", message)
    return message


def default_log_format() -> str:
    """Pick workflow commands when running on an Actions runner."""
    if os.environ.get("GITHUB_ACTIONS", "").lower() == "true":
        return "github"
    return "json"


def configure_logging(level: str = "INFO", log_format: Optional[str] = None) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Minimum log level name (DEBUG, INFO, WARNING, ...)
        log_format: 'github' or 'json'; detected from the environment when omitted

    Raises:
        ValueError: If log_format is not supported
    """
    log_format = log_format or default_log_format()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"log_format must be one of: {', '.join(LOG_FORMATS)}")

    min_level = logging.getLevelName(level.upper())
    if not isinstance(min_level, int):
        raise ValueError(f"Unknown log level: {level}")

    if log_format == "github":
        renderer = _render_workflow_command
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            # Add timestamp and log level
            _add_timestamp,
            _add_log_level,
            # Add exception information
            structlog.processors.format_exc_info,
            renderer,
        ],
        # Actions reads workflow commands from stdout
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        # main reconfigures once settings are loaded
        cache_logger_on_first_use=False,
    )


configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Deleting queue", queue_url="https://sqs.us-east-1.amazonaws.com/123/q")
        {"event": "Deleting queue", "queue_url": "...", "timestamp": "...", "level": "INFO"}
    """
    return structlog.get_logger(name)
