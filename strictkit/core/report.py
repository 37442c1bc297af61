"""
StrictKit Report Aggregation

Turns the ordered gate findings into the final report envelope.
The aggregator is a pure tally: it never re-derives or re-validates
a Finding, it only counts statuses and stamps metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

from strictkit import TOOL_NAME, __version__
from strictkit.core.finding import Finding, Status


@dataclass(frozen=True)
class ReportMetadata:
    tool: str
    version: str
    timestamp: str
    path: str


@dataclass(frozen=True)
class Summary:
    total: int = 0
    passed: int = 0
    failed: int = 0
    warned: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "warned": self.warned,
        }


@dataclass(frozen=True)
class Report:
    metadata: ReportMetadata
    findings: tuple[Finding, ...]
    summary: Summary
    success: bool

    @property
    def broken_rules(self) -> list[str]:
        """Rule ids of every gate that did not pass, in gate order."""
        return [f.rule_id for f in self.findings if f.status is not Status.PASS]

    def get(self, gate: str) -> Optional[Finding]:
        for finding in self.findings:
            if finding.gate == gate:
                return finding
        return None

    def to_dict(self) -> dict[str, Any]:
        """Flat JSON-compatible structure for machine consumers."""
        return {
            "meta": {
                "tool": self.metadata.tool,
                "version": self.metadata.version,
                "timestamp": self.metadata.timestamp,
                "path": self.metadata.path,
            },
            "summary": self.summary.to_dict(),
            "results": [f.to_dict() for f in self.findings],
            "success": self.success,
        }


def aggregate(
    findings: Iterable[Finding],
    root: Path,
    timestamp: Optional[datetime] = None,
) -> Report:
    """
    Build a Report from findings in gate registration order.

    Args:
        findings: One Finding per registered gate, already ordered.
        root: Project root; recorded as an absolute path.
        timestamp: Override for the report time (defaults to now, UTC).

    Returns:
        The immutable Report.
    """
    ordered = tuple(findings)
    passed = failed = warned = 0

    for finding in ordered:
        if finding.status is Status.PASS:
            passed += 1
        elif finding.status is Status.FAIL:
            failed += 1
        else:
            warned += 1

    when = timestamp or datetime.now(timezone.utc)
    metadata = ReportMetadata(
        tool=TOOL_NAME,
        version=__version__,
        timestamp=when.isoformat(),
        path=str(Path(root).resolve()),
    )

    return Report(
        metadata=metadata,
        findings=ordered,
        summary=Summary(
            total=len(ordered),
            passed=passed,
            failed=failed,
            warned=warned,
        ),
        success=failed == 0,
    )
