"""
StrictKit CONSOLE Gate

Counts leftover console.log() call sites in JavaScript and TypeScript.
Comments and string literals are masked first so that documentation
and log messages mentioning console.log() are not reported.
"""

from __future__ import annotations

import logging
import re
from typing import List

from strictkit.analysis.sanitize import sanitize
from strictkit.core.finding import Finding, Status
from strictkit.core.gate import BaseGate
from strictkit.core.source import SourceReadError, SourceTree

logger = logging.getLogger(__name__)

SCRIPT_EXTENSIONS = frozenset({".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs"})

CONSOLE_LOG = re.compile(r"\bconsole\s*\.\s*log\s*\(")


class ConsoleGate(BaseGate):
    name = "CONSOLE"
    rule_id = "SK-QLT-001"
    extensions = SCRIPT_EXTENSIONS
    skip_tests = True

    def evaluate(self, tree: SourceTree, paths: List[str]) -> Finding:
        total = 0
        affected = 0

        for path in paths:
            try:
                unit = tree.read(path)
            except SourceReadError as exc:
                logger.debug("Skipping %s: %s", path, exc)
                continue

            found = count_console_calls(unit.content)
            if found:
                total += found
                affected += 1

        if total:
            return self.finding(
                Status.FAIL,
                f"{total} console.log() call(s) found in {affected} file(s).",
                count=total,
                affected_files=affected,
            )

        return self.finding(Status.PASS, "No console.log() calls found.", count=0, affected_files=0)


def count_console_calls(content: str) -> int:
    return len(CONSOLE_LOG.findall(sanitize(content)))
