"""Console reporter that adapts simulator output to the environment."""

from __future__ import annotations

import json
import os
import sys
from typing import Any, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import Comparison, RunResult, Scenario
from .output_config import OutputFormat

CI_ENV_VARS = ("CI", "JENKINS_HOME", "GITLAB_CI", "TRAVIS", "GITHUB_ACTIONS")


def _percent(value: float) -> str:
    return f"{value * 100:.1f}%"


class ConsoleReporter:
    """
    Renders probes, runs and the policy comparison.

    AUTO resolves to rich output only for an interactive terminal outside CI;
    otherwise plain text. JSON collects everything and prints one document
    from ``finish``.
    """

    def __init__(self, output_format: OutputFormat = OutputFormat.AUTO) -> None:
        self.output_format = output_format
        self.use_rich = self._detect_rich()
        self.console = Console() if self.use_rich else None
        self._document: dict[str, Any] = {}

    def _detect_rich(self) -> bool:
        if self.output_format == OutputFormat.RICH:
            return True
        if self.output_format != OutputFormat.AUTO:
            return False
        is_terminal = sys.stdout.isatty()
        is_ci = any(name in os.environ for name in CI_ENV_VARS)
        return is_terminal and not is_ci

    @property
    def is_json(self) -> bool:
        return self.output_format == OutputFormat.JSON

    def report_probes(self, probes: Sequence[Scenario]) -> None:
        """Show each scripted probe and what it turned into."""
        if self.is_json:
            self._document["probes"] = [probe.model_dump(mode="json") for probe in probes]
            return
        if self.use_rich:
            table = Table(title="Failure probes", show_header=True, header_style="bold cyan")
            table.add_column("Probe", width=22)
            table.add_column("Status", width=10)
            table.add_column("Detail")
            for probe in probes:
                table.add_row(Text(probe.name), *self._rich_status(probe))
            self.console.print(table)
            return
        print("=== Failure probes ===")
        for probe in probes:
            if probe.succeeded:
                print(f"  {probe.name:<22} ✓ ok")
            else:
                print(f"  {probe.name:<22} ✗ handled: {probe.reason}")
        print()

    def report_run(self, result: RunResult) -> None:
        """Show one policy run scenario by scenario."""
        if self.is_json:
            return
        title = f"{result.policy.value.capitalize()} policy"
        if self.use_rich:
            table = Table(title=title, show_header=True, header_style="bold cyan")
            table.add_column("#", style="dim", width=4)
            table.add_column("Scenario", width=22)
            table.add_column("Status", width=10)
            table.add_column("Detail")
            for index, scenario in enumerate(result.scenarios_attempted, start=1):
                table.add_row(str(index), Text(scenario.name), *self._rich_status(scenario))
            self.console.print(table)
            if result.halted_early:
                self.console.print(
                    f"[bold red]Halted at first failure:[/] {result.skipped} remaining scenarios dropped"
                )
            self.console.print(
                f"Succeeded: [green]{result.succeeded}[/]  Failed: [red]{result.failed}[/]  "
                f"Availability: [bold cyan]{_percent(result.availability)}[/]"
            )
            return
        print(f"=== {title} ===")
        for index, scenario in enumerate(result.scenarios_attempted, start=1):
            if scenario.succeeded:
                print(f"  [{index}] {scenario.name} ✓")
            else:
                print(f"  [{index}] {scenario.name} ✗ {scenario.reason}")
        if result.halted_early:
            print(f"  Halted at first failure: {result.skipped} remaining scenarios dropped")
        print(
            f"  Results: {result.succeeded} succeeded, {result.failed} failed "
            f"({len(result.scenarios_attempted)} of {result.total_scenarios} attempted)"
        )
        print(f"  Availability: {_percent(result.availability)}")
        print()

    def report_comparison(self, comparison: Comparison) -> None:
        """Show both runs followed by the availability contrast."""
        if self.is_json:
            self._document["comparison"] = comparison.as_serializable()
            return
        self.report_run(comparison.strict)
        self.report_run(comparison.resilient)

        strict = _percent(comparison.strict.availability)
        resilient = _percent(comparison.resilient.availability)
        gain = f"{comparison.availability_gain * 100:+.1f} pts"
        if self.use_rich:
            summary = Text()
            summary.append(f"Strict: {strict}  ", style="bold red")
            summary.append(f"Resilient: {resilient}  ", style="bold green")
            summary.append(f"Gain: {gain}", style="bold cyan")
            self.console.print()
            self.console.print(Panel(summary, title=Text("Availability", style="bold"), border_style="cyan"))
            return
        print("-" * 80)
        print(f"Availability: strict {strict} | resilient {resilient} | gain {gain}")

    def finish(self) -> None:
        """Flush collected output (JSON only)."""
        if self.is_json:
            print(json.dumps(self._document, indent=2))

    def print_error(self, message: str) -> None:
        if self.use_rich:
            Console(stderr=True).print(Text.assemble(("Error: ", "bold red"), message))
        else:
            print(f"Error: {message}", file=sys.stderr)

    @staticmethod
    def _rich_status(scenario: Scenario) -> tuple[Text, Text]:
        if scenario.succeeded:
            return Text("✓ OK", style="green"), Text("")
        return Text("✗ FAIL", style="red"), Text(scenario.reason or "")
