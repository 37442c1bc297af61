"""
StrictKit NO_ANY Gate

Fails when TypeScript sources declare explicit `any` types.
Detection is syntax-aware (see strictkit.analysis.syntax).
"""

from __future__ import annotations

import logging
from typing import List

from strictkit.analysis.syntax import SyntaxParseError, count_escape_markers
from strictkit.core.finding import Finding, Status
from strictkit.core.gate import BaseGate
from strictkit.core.source import SourceReadError, SourceTree

logger = logging.getLogger(__name__)

TYPESCRIPT_EXTENSIONS = frozenset({".ts", ".tsx"})


class AnyTypeGate(BaseGate):
    """Counts `any` type nodes across all TypeScript files."""

    name = "NO_ANY"
    rule_id = "SK-INT-001"
    extensions = TYPESCRIPT_EXTENSIONS

    def evaluate(self, tree: SourceTree, paths: List[str]) -> Finding:
        if not paths:
            return self.finding(Status.WARN, "No TypeScript files found.")

        total = 0
        affected = 0
        scanned = 0
        unparsed = 0
        unreadable = 0

        for path in paths:
            try:
                unit = tree.read(path)
            except SourceReadError as exc:
                logger.debug("Skipping %s: %s", path, exc)
                unreadable += 1
                continue

            try:
                found = count_escape_markers(unit.path, unit.content)
            except SyntaxParseError as exc:
                logger.info("%s", exc)
                unparsed += 1
                continue

            scanned += 1
            if found:
                total += found
                affected += 1

        if scanned == 0:
            return self.finding(
                Status.WARN,
                f"Type scan could not be completed: none of {len(paths)} "
                f"TypeScript file(s) could be analyzed ({_describe_skipped(unparsed, unreadable)}).",
                count=0,
                affected_files=0,
            )

        skipped = ""
        if unparsed or unreadable:
            skipped = f" ({_describe_skipped(unparsed, unreadable)} skipped)"

        if total > 0:
            return self.finding(
                Status.FAIL,
                f"Found {total} explicit 'any' usages in {affected} file(s).{skipped}",
                count=total,
                affected_files=affected,
            )

        return self.finding(
            Status.PASS,
            f"No explicit any types found in {scanned} file(s).{skipped}",
            count=0,
            affected_files=0,
        )


def _describe_skipped(unparsed: int, unreadable: int) -> str:
    parts = []
    if unparsed:
        parts.append(f"{unparsed} unparsable")
    if unreadable:
        parts.append(f"{unreadable} unreadable")
    return ", ".join(parts) + " file(s)"
