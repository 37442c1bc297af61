"""
StrictKit GitHub Actions Integration

Provides helpers for running StrictKit in GitHub Actions:
- GitHub Actions annotations (warnings/errors)
- Step summary output
- Environment detection
"""

from __future__ import annotations

import logging
import os

import click

from strictkit.core.finding import Status
from strictkit.core.report import Report

logger = logging.getLogger(__name__)

STATUS_ICONS = {Status.PASS: "✅", Status.WARN: "⚠️", Status.FAIL: "❌"}


def is_github_actions() -> bool:
    """Check if currently running inside GitHub Actions."""
    return os.environ.get("GITHUB_ACTIONS") == "true"


def emit_annotations(report: Report, force: bool = False, err: bool = False) -> None:
    """
    Emit a workflow annotation for every gate that did not pass.
    FAIL shows as an error, WARN as a warning.

    Args:
        report: The audit report.
        force: Emit even when not running inside GitHub Actions.
        err: Write to stderr, keeping stdout free for machine-readable output.
    """
    if not (force or is_github_actions()):
        return

    for finding in report.findings:
        if finding.status is Status.PASS:
            continue
        level = "error" if finding.status is Status.FAIL else "warning"
        # ::error title={title}::{message}
        click.echo(f"::{level} title={finding.rule_id} - {finding.gate}::{finding.message}", err=err)


def write_step_summary(report: Report) -> None:
    """
    Append a markdown summary to the GitHub Actions step summary.
    This appears on the workflow run page.
    """
    if not is_github_actions():
        return

    summary_file = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary_file:
        return

    lines = [
        "## StrictKit Audit Results\n",
        f"**Target:** `{report.metadata.path}`\n",
        "| Status | Rule | Gate | Message |",
        "|--------|------|------|---------|",
    ]
    for finding in report.findings:
        icon = STATUS_ICONS[finding.status]
        lines.append(
            f"| {icon} {finding.status.value} | {finding.rule_id} | {finding.gate} | {finding.message} |"
        )

    lines.append("")
    summary = report.summary
    lines.append(
        f"**{summary.passed}** passed, **{summary.failed}** failed, **{summary.warned}** warned"
    )
    lines.append("")
    if report.success:
        lines.append("### ✅ Project meets StrictKit standards")
    else:
        lines.append("### ❌ Project violates the StrictKit baseline")

    try:
        with open(summary_file, "a", encoding="utf-8") as fh:
            fh.write("\n".join(lines) + "\n")
    except OSError as exc:
        logger.warning("Could not write step summary: %s", exc)
