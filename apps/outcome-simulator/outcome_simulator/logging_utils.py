"""Structured logging helpers for the outcome simulator."""

from __future__ import annotations

import io
import logging
import sys
from typing import Any

import structlog
from rich.console import Console
from rich.text import Text

from .output_config import LogFormat

LEVEL_STYLES = {
    "debug": "dim cyan",
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "critical": "bold white on red",
}


class RichConsoleRenderer:
    """structlog renderer producing Rich-styled single-line events."""

    def __call__(self, logger: Any, name: str, event_dict: dict[str, Any]) -> str:
        timestamp = event_dict.pop("timestamp", "")
        level = event_dict.pop("level", "info")
        event = event_dict.pop("event", "")

        text = Text()
        text.append(timestamp, style="dim white")
        text.append(f" [{level:<8}] ", style=LEVEL_STYLES.get(level, "white"))
        text.append(event, style="bold white")

        pairs = [(key, value) for key, value in sorted(event_dict.items()) if key not in ("stack", "exception")]
        if pairs:
            text.append(" " * max(1, 24 - len(event)))
        for key, value in pairs:
            text.append(f"{key}=", style="dim white")
            text.append(f"{value} ", style="bright_cyan")

        buffer = io.StringIO()
        Console(file=buffer, force_terminal=True, width=200, legacy_windows=False).print(text, end="")
        return buffer.getvalue().rstrip()


def configure_logging(log_level: str, log_format: LogFormat = "console") -> structlog.stdlib.BoundLogger:
    """Configure structlog; events go to stderr so stdout carries only the report."""

    normalized_level = getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=normalized_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        structlog.processors.format_exc_info,
    ]

    if log_format == "console":
        processors.append(RichConsoleRenderer())
    elif log_format == "plain":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:  # json
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(normalized_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Level may be reconfigured per invocation; do not freeze module loggers.
        cache_logger_on_first_use=False,
    )

    return structlog.get_logger("outcome_simulator")
