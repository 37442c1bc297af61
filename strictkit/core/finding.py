"""
StrictKit Finding Model

A Finding is one gate's verdict for the whole project.
Exactly one Finding is produced per registered gate per audit run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Status(Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    WARN = "WARN"

    @classmethod
    def from_string(cls, value: str) -> "Status":
        """Parse a status from a string (case-insensitive)."""
        return cls[value.strip().upper()]


@dataclass(frozen=True)
class Finding:
    gate: str
    rule_id: str
    status: Status
    message: str
    count: Optional[int] = None
    affected_files: Optional[int] = None

    @property
    def passed(self) -> bool:
        return self.status is Status.PASS

    def display(self) -> str:
        """Single-line human-readable form."""
        return f"{self.status.value:<5} [{self.rule_id}] {self.gate:<10}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert finding to a dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "gate": self.gate,
            "id": self.rule_id,
            "status": self.status.value,
            "message": self.message,
        }
        if self.count is not None:
            result["count"] = self.count
        if self.affected_files is not None:
            result["files"] = self.affected_files
        return result
