"""
StrictKit Console Reporter

Generates human-readable colored console output, one line per gate.
"""

from __future__ import annotations

import sys

import click

from strictkit import __version__
from strictkit.core.finding import Finding, Status
from strictkit.core.report import Report


def safe_echo(text: str = "", **kwargs) -> None:
    """Echo text, handling Unicode issues on Windows consoles."""
    try:
        click.echo(text, **kwargs)
    except UnicodeEncodeError:
        safe = text.encode(sys.stdout.encoding or "utf-8", errors="replace").decode(
            sys.stdout.encoding or "utf-8", errors="replace"
        )
        click.echo(safe, **kwargs)


# Status colors
STATUS_COLORS = {
    Status.PASS: "green",
    Status.WARN: "yellow",
    Status.FAIL: "red",
}

RULE = "-" * 55


class ConsoleReporter:
    """Prints the audit report to the console."""

    def __init__(self, show_telemetry_notice: bool = False) -> None:
        self.show_telemetry_notice = show_telemetry_notice

    def report(self, report: Report) -> None:
        self._print_header(report)
        for finding in report.findings:
            safe_echo(self.format_line(finding))
        self._print_footer(report)

    @staticmethod
    def format_line(finding: Finding) -> str:
        color = STATUS_COLORS.get(finding.status, "white")
        return (
            click.style(f"{finding.status.value:<5}", fg=color, bold=True)
            + click.style(f" [{finding.rule_id}] ", fg="bright_black")
            + click.style(f"{finding.gate:<10}", fg="bright_white")
            + f": {finding.message}"
        )

    def _print_header(self, report: Report) -> None:
        safe_echo("")
        safe_echo(click.style("  StrictKit Audit Report", fg="bright_blue", bold=True))
        safe_echo(click.style(f"  Version: {__version__}", fg="white"))
        safe_echo(click.style(f"  Target: {report.metadata.path}", fg="white"))
        safe_echo(click.style(RULE, fg="bright_black"))
        safe_echo("")

    def _print_footer(self, report: Report) -> None:
        summary = report.summary
        safe_echo("")
        safe_echo(click.style(RULE, fg="bright_black"))
        safe_echo(
            f"  {summary.total} gate(s): "
            + click.style(f"{summary.passed} passed", fg="green")
            + ", "
            + click.style(f"{summary.failed} failed", fg="red")
            + ", "
            + click.style(f"{summary.warned} warned", fg="yellow")
        )

        if self.show_telemetry_notice:
            safe_echo(click.style(
                "\n  Anonymous usage metrics collected. Set STRICTKIT_TELEMETRY=off to disable.",
                fg="bright_black",
            ))

        safe_echo("")
        if report.success:
            safe_echo(click.style("  [OK] Project meets StrictKit standards.", fg="green", bold=True))
        else:
            safe_echo(click.style(
                "  [X] Project violates the StrictKit baseline.",
                fg="bright_red",
                bold=True,
            ))
        safe_echo("")
