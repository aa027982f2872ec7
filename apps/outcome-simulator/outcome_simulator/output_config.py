"""Output and log format configuration."""

from __future__ import annotations

import os
from enum import Enum
from typing import Literal


class OutputFormat(str, Enum):
    """Console output formats."""
    AUTO = "auto"
    RICH = "rich"
    PLAIN = "plain"
    JSON = "json"


LogFormat = Literal["json", "console", "plain"]

ENV_VAR_NAME = "CONSOLE_OUTPUT_FORMAT"
LOG_LEVEL_ENV_VAR = "OUTCOME_SIM_LOG_LEVEL"


def _parse(value: str | None) -> OutputFormat | None:
    if not value:
        return None
    try:
        return OutputFormat(value.lower())
    except ValueError:
        return None


def get_output_format(cli_override: str | None = None) -> OutputFormat:
    """
    Get the output format with priority: CLI parameter > Environment variable > Default (auto).

    Unknown values are ignored and fall through to the next source.
    """
    return _parse(cli_override) or _parse(os.environ.get(ENV_VAR_NAME)) or OutputFormat.AUTO


def get_log_format(output_format: OutputFormat) -> LogFormat:
    """
    Map an output format to a log format:
    - json -> json
    - plain -> plain (no colors)
    - auto/rich -> console (with colors)
    """
    if output_format is OutputFormat.JSON:
        return "json"
    if output_format is OutputFormat.PLAIN:
        return "plain"
    return "console"
