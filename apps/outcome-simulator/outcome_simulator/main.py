"""Entry point for the outcome simulator CLI."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

if __package__ in {None, ""}:
    sys.path.append(str(Path(__file__).resolve().parents[1]))
    __package__ = "outcome_simulator"

from .catalog import DEFAULT_SCENARIOS
from .console_reporter import ConsoleReporter
from .errors import InvalidInputError
from .loader import load_scenarios
from .logging_utils import configure_logging
from .output_config import LOG_LEVEL_ENV_VAR, get_log_format, get_output_format
from .probes import default_probes
from .simulator import compare

app = typer.Typer(help="Compare crash-on-first-failure against graceful degradation.")


@app.command()
def simulate(
    scenarios: Optional[Path] = typer.Option(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="YAML scenario file replacing the built-in request scenarios.",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--output-format",
        help="Output format: auto, rich, plain or json (default: $CONSOLE_OUTPUT_FORMAT or auto).",
    ),
    log_level: str = typer.Option(
        "warning",
        envvar=LOG_LEVEL_ENV_VAR,
        help="Log level for structured events written to stderr.",
    ),
    probes: bool = typer.Option(
        True,
        "--probes/--no-probes",
        help="Run the scripted failure probes before the policy comparison.",
    ),
) -> None:
    """Run strict and resilient policies over a fixed scenario set and report availability."""

    fmt = get_output_format(output_format)
    logger = configure_logging(log_level, get_log_format(fmt))
    reporter = ConsoleReporter(output_format=fmt)

    if scenarios is None:
        scenario_list = list(DEFAULT_SCENARIOS)
    else:
        try:
            scenario_list = load_scenarios(scenarios)
        except (ValueError, ValidationError, yaml.YAMLError) as exc:
            raise typer.BadParameter(f"Invalid scenario file {scenarios}: {exc}") from exc

    if probes:
        reporter.report_probes(default_probes())

    try:
        comparison = compare(scenario_list)
    except InvalidInputError as exc:
        logger.warning("simulation_rejected", reason=str(exc))
        reporter.print_error(str(exc))
        raise typer.Exit(code=1) from exc

    reporter.report_comparison(comparison)
    reporter.finish()
    logger.info(
        "simulation_finished",
        strict_availability=round(comparison.strict.availability, 4),
        resilient_availability=round(comparison.resilient.availability, 4),
    )


def run() -> None:
    """CLI entry point for console_scripts."""

    app()


if __name__ == "__main__":  # pragma: no cover
    run()
