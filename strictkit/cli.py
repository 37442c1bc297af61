"""
StrictKit CLI

Command-line interface for running policy audits.

Commands:
    strictkit audit [PATH]          - Run all enabled gates
    strictkit explain RULE          - Show the doctrine behind a gate
    strictkit init                  - Create a default config file
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from strictkit import __version__
from strictkit.audit import AuditError, run_audit
from strictkit.core.config import CONFIG_FILENAME, StrictKitConfig, generate_default_config
from strictkit.doctrine import DOCTRINE, lookup
from strictkit.integrations.github import emit_annotations, is_github_actions, write_step_summary
from strictkit.reporting.console import ConsoleReporter, safe_echo
from strictkit.reporting.json_reporter import JSONReporter
from strictkit.telemetry import TELEMETRY_JOIN_TIMEOUT, is_disabled, track_audit

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_FATAL = 2


@click.group()
@click.version_option(version=__version__, prog_name="StrictKit")
def cli() -> None:
    """
    StrictKit - Policy gates for deployment pipelines

    Audit a project for explicit any types, hardcoded secrets, unpinned
    Docker images, console.log() residue, and missing lockfiles.
    """
    pass


# ═══════════════════════════════════════════════════════
#  strictkit audit
# ═══════════════════════════════════════════════════════
@cli.command()
@click.argument("path", type=click.Path(file_okay=False), default=".")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
@click.option("--output", "-o", "output_file", type=click.Path(), default=None,
              help="Also write the JSON report to a file.")
@click.option("--config", "config_path", type=click.Path(), default=None,
              help="Path to .strictkit.yaml configuration file.")
@click.option("--ci", is_flag=True, help="Enable CI mode (GitHub Actions annotations, etc.).")
@click.option("--no-telemetry", is_flag=True, help="Do not send anonymous usage metrics.")
@click.option("--verbose", "-v", is_flag=True, help="Log gate progress to stderr.")
def audit(
    path: str,
    as_json: bool,
    output_file: Optional[str],
    config_path: Optional[str],
    ci: bool,
    no_telemetry: bool,
    verbose: bool,
) -> None:
    """Audit a project directory.

    Examples:

        strictkit audit

        strictkit audit ./app --json --output strictkit-report.json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    target = Path(path).resolve()

    # ── Load configuration ──
    cfg_path = Path(config_path) if config_path else target / CONFIG_FILENAME
    config = StrictKitConfig.load(cfg_path)

    # CLI flags override config
    use_json = as_json or config.output.format == "json"
    out_file = output_file or config.output.file
    telemetry_enabled = config.telemetry.enabled and not no_telemetry

    # ── Run gates ──
    try:
        report = run_audit(target, config)
    except AuditError as exc:
        safe_echo(click.style(f"  [X] {exc}", fg="red"), err=True)
        sys.exit(EXIT_FATAL)

    telemetry_thread = track_audit(report, enabled=telemetry_enabled)

    # ── Report ──
    if use_json:
        safe_echo(JSONReporter(report).render(output_file=out_file))
    else:
        console = ConsoleReporter(show_telemetry_notice=telemetry_enabled and not is_disabled())
        console.report(report)
        if out_file:
            JSONReporter(report).render(output_file=out_file)

    # ── CI integrations ──
    if ci or is_github_actions():
        # stdout carries the JSON document in --json mode
        emit_annotations(report, force=True, err=use_json)
        write_step_summary(report)

    if telemetry_thread is not None:
        telemetry_thread.join(TELEMETRY_JOIN_TIMEOUT)

    # ── Exit code ──
    sys.exit(EXIT_OK if report.success else EXIT_FAILED)


# ═══════════════════════════════════════════════════════
#  strictkit explain
# ═══════════════════════════════════════════════════════
@cli.command()
@click.argument("rule", required=False)
def explain(rule: Optional[str]) -> None:
    """Explain the doctrine behind a gate.

    Example:

        strictkit explain INTEGRITY
    """
    entry = lookup(rule) if rule else None
    if entry is None:
        names = "|".join(e.family for e in DOCTRINE)
        safe_echo(click.style(f"\nUsage: strictkit explain [{names}]", fg="yellow"))
        return

    severity_color = "red" if entry.severity == "FAIL" else "yellow"
    safe_echo(click.style(f"\nStrictKit Doctrine: {entry.family} [{entry.rule_id}]", fg="blue"))
    safe_echo(click.style("-" * 49, fg="bright_black"))
    safe_echo(f"{click.style('Gate:', bold=True)}        {entry.gate}")
    safe_echo(f"{click.style('Severity:', bold=True)}    {click.style(entry.severity, fg=severity_color)}")
    safe_echo(f"{click.style('Philosophy:', bold=True)}  {entry.philosophy}")
    safe_echo(f"{click.style('Action:', bold=True)}      {entry.fix}\n")


# ═══════════════════════════════════════════════════════
#  strictkit init
# ═══════════════════════════════════════════════════════
@cli.command()
@click.option("--path", "-p", "target_path", type=click.Path(), default=".",
              help="Directory to create the config file in.")
def init(target_path: str) -> None:
    """Create a default .strictkit.yaml."""
    target = Path(target_path).resolve()
    target.mkdir(parents=True, exist_ok=True)

    config_file = target / CONFIG_FILENAME

    if config_file.exists():
        safe_echo(click.style(f"  [!] {config_file} already exists, skipping.", fg="yellow"))
        return

    config_file.write_text(generate_default_config(), encoding="utf-8")
    safe_echo(click.style(f"  [+] Created {config_file}", fg="green"))
    safe_echo("")
    safe_echo("  Run 'strictkit audit' to check your project.")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
