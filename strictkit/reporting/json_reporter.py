"""
StrictKit JSON Reporter

Generates machine-readable JSON output format:
{
    "meta": {"tool": "StrictKit", "version": ..., "timestamp": ..., "path": ...},
    "summary": {"total": N, "passed": n, "failed": n, "warned": n},
    "results": [{"gate": ..., "id": ..., "status": ..., "message": ...}, ...],
    "success": true
}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from strictkit.core.report import Report


class JSONReporter:
    """Generates JSON-formatted audit reports."""

    def __init__(self, report: Report) -> None:
        self.report = report

    def render(self, output_file: Optional[str] = None) -> str:
        """
        Generate JSON report.

        Args:
            output_file: Optional file path to write the report to.

        Returns:
            The JSON string.
        """
        json_str = json.dumps(self.report.to_dict(), indent=2)

        if output_file:
            Path(output_file).write_text(json_str + "\n", encoding="utf-8")

        return json_str
