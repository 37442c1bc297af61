"""
StrictKit Audit Runner

Single entry point: run_audit(root) -> Report.

Gates run in their fixed registration order and each contributes exactly
one Finding. Gates share no state, so the order only matters for the
layout of the report.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from strictkit.core.config import StrictKitConfig
from strictkit.core.gate import BaseGate
from strictkit.core.report import Report, aggregate
from strictkit.core.source import SourceTree
from strictkit.gates.any_type import AnyTypeGate
from strictkit.gates.console import ConsoleGate
from strictkit.gates.docker import DockerGate
from strictkit.gates.lockfile import LockfileGate
from strictkit.gates.secrets import SecretsGate

logger = logging.getLogger(__name__)

GATE_CLASSES: tuple[type[BaseGate], ...] = (
    AnyTypeGate,
    SecretsGate,
    DockerGate,
    ConsoleGate,
    LockfileGate,
)


class AuditError(Exception):
    """The audit root cannot be read at all."""


def build_gates(config: Optional[StrictKitConfig] = None) -> List[BaseGate]:
    """
    Instantiate every gate in registration order.

    Disabled gates are included; their run() reports a WARN without evaluating.
    """
    config = config or StrictKitConfig()
    gates: List[BaseGate] = []
    for gate_cls in GATE_CLASSES:
        gate_config = config.gate(gate_cls.name)
        if not gate_config.enabled:
            logger.info("Gate %s disabled by configuration", gate_cls.name)
        gates.append(gate_cls(gate_config))
    return gates


def run_audit(
    root: Union[str, Path],
    config: Optional[StrictKitConfig] = None,
) -> Report:
    """
    Audit a project directory.

    Args:
        root: Project root path.
        config: Loaded configuration; defaults apply when omitted.

    Returns:
        A Report with one Finding per registered gate.

    Raises:
        AuditError: If the root is missing, not a directory, or unlistable.
    """
    config = config or StrictKitConfig()
    target = Path(root).resolve()

    if not target.is_dir():
        raise AuditError(f"Not a directory: {target}")
    try:
        os.listdir(target)
    except OSError as exc:
        raise AuditError(f"Cannot read {target}: {exc}") from exc

    tree = SourceTree(target, exclude=config.exclude_paths)

    findings = []
    for gate in build_gates(config):
        finding = gate.run(tree)
        logger.debug("%s -> %s: %s", gate.name, finding.status.value, finding.message)
        findings.append(finding)

    return aggregate(findings, target)
