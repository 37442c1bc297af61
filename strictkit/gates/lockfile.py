"""
StrictKit LOCKFILE Gate

Requires a committed dependency lockfile at the project root.
"""

from __future__ import annotations

from typing import List

from strictkit.core.finding import Finding, Status
from strictkit.core.gate import BaseGate
from strictkit.core.source import SourceTree

LOCKFILES = ("package-lock.json", "yarn.lock", "pnpm-lock.yaml", "bun.lockb")


class LockfileGate(BaseGate):
    name = "LOCKFILE"
    rule_id = "SK-DEP-001"

    def candidates(self, tree: SourceTree) -> List[str]:
        return [name for name in LOCKFILES if tree.exists(name)]

    def evaluate(self, tree: SourceTree, paths: List[str]) -> Finding:
        if paths:
            return self.finding(Status.PASS, f"Lockfile found: {', '.join(paths)}")
        return self.finding(
            Status.FAIL,
            f"No lockfile found. Expected one of: {', '.join(LOCKFILES)}",
        )
