"""
StrictKit Base Gate

A gate is one independent policy check that inspects the source tree
and returns exactly one Finding.

Gates:
- AnyTypeGate (NO_ANY)
- SecretsGate (SECRETS)
- DockerGate (DOCKER)
- ConsoleGate (CONSOLE)
- LockfileGate (LOCKFILE)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from strictkit.core.config import GateConfig
from strictkit.core.finding import Finding, Status
from strictkit.core.source import SourceTree

logger = logging.getLogger(__name__)


class BaseGate(ABC):
    """
    Minimal gate interface.
    Each gate must implement evaluate().
    """

    name: str = "BASE"
    rule_id: str = "SK-GEN-001"
    extensions: frozenset[str] = frozenset()
    skip_tests: bool = False

    def __init__(self, config: Optional[GateConfig] = None):
        self.config = config or GateConfig()

    def candidates(self, tree: SourceTree) -> List[str]:
        """Paths in this gate's scope. Root-level gates override this."""
        return tree.find(self.extensions, skip_tests=self.skip_tests)

    @abstractmethod
    def evaluate(self, tree: SourceTree, paths: List[str]) -> Finding:
        """
        Evaluate the candidate paths and return this gate's verdict.
        """
        raise NotImplementedError

    def run(self, tree: SourceTree) -> Finding:
        """Evaluate the gate; an unexpected error becomes a WARN for this gate only."""
        if not self.config.enabled:
            return self.finding(Status.WARN, "Gate disabled by configuration.")
        try:
            return self.evaluate(tree, self.candidates(tree))
        except Exception as exc:
            logger.warning("Gate %s failed: %s", self.name, exc, exc_info=True)
            return self.finding(Status.WARN, f"Gate could not complete: {exc}")

    def finding(
        self,
        status: Status,
        message: str,
        count: Optional[int] = None,
        affected_files: Optional[int] = None,
    ) -> Finding:
        return Finding(
            gate=self.name,
            rule_id=self.rule_id,
            status=status,
            message=message,
            count=count,
            affected_files=affected_files,
        )
