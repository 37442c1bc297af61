"""
StrictKit Configuration Management

Loads and manages configuration from .strictkit.yaml files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from strictkit.core.finding import Status

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".strictkit.yaml"

GATE_NAMES = ("NO_ANY", "SECRETS", "DOCKER", "CONSOLE", "LOCKFILE")

DEFAULT_EXCLUDE_PATHS = [
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    "out",
    "coverage",
    "vendor",
]


@dataclass
class GateConfig:
    enabled: bool = True
    # Only consulted by gates with a configurable failure severity (SECRETS).
    severity: Status = Status.FAIL


@dataclass
class OutputConfig:
    format: str = "console"
    file: Optional[str] = None


@dataclass
class TelemetryConfig:
    enabled: bool = True


@dataclass
class StrictKitConfig:
    """Root configuration object for StrictKit."""

    output: OutputConfig = field(default_factory=OutputConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    gates: dict[str, GateConfig] = field(
        default_factory=lambda: {name: GateConfig() for name in GATE_NAMES}
    )
    exclude_paths: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATHS))

    def gate(self, name: str) -> GateConfig:
        return self.gates.get(name) or GateConfig()

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "StrictKitConfig":
        """Load configuration from a YAML file, falling back to defaults."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
            return cls()

        if not isinstance(raw, dict):
            logger.warning("Ignoring config %s: top level is not a mapping", config_path)
            return cls()

        return cls._from_dict(raw)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "StrictKitConfig":
        """Build config from a parsed YAML dictionary."""
        output_data = data.get("output") or {}
        output = OutputConfig(
            format=output_data.get("format", "console"),
            file=output_data.get("file"),
        )

        telemetry_data = data.get("telemetry") or {}
        telemetry = TelemetryConfig(enabled=bool(telemetry_data.get("enabled", True)))

        gates: dict[str, GateConfig] = {}
        gates_data = data.get("gates") or {}
        for name in GATE_NAMES:
            gate_raw = gates_data.get(name) or {}
            gates[name] = GateConfig(
                enabled=bool(gate_raw.get("enabled", True)),
                severity=_parse_severity(name, gate_raw.get("severity")),
            )

        exclude_paths = data.get("exclude_paths", list(DEFAULT_EXCLUDE_PATHS))

        return cls(
            output=output,
            telemetry=telemetry,
            gates=gates,
            exclude_paths=list(exclude_paths),
        )


def _parse_severity(gate: str, value: Optional[str]) -> Status:
    if value is None:
        return Status.FAIL
    try:
        severity = Status.from_string(str(value))
    except KeyError:
        severity = None
    if severity not in (Status.FAIL, Status.WARN):
        logger.warning("Invalid severity %r for gate %s, using FAIL", value, gate)
        return Status.FAIL
    return severity


def generate_default_config() -> str:
    """Generate a default .strictkit.yaml configuration file content."""
    return """\
# StrictKit Configuration

# Output settings
output:
  format: console  # console, json
  # file: strictkit-report.json

# Gate settings
gates:
  NO_ANY:
    enabled: true
  SECRETS:
    enabled: true
    severity: FAIL  # FAIL or WARN
  DOCKER:
    enabled: true
  CONSOLE:
    enabled: true
  LOCKFILE:
    enabled: true

# Anonymous usage metrics (or set STRICTKIT_TELEMETRY=off)
telemetry:
  enabled: true

# Global exclusions
exclude_paths:
  - node_modules
  - .git
  - dist
  - build
  - .next
  - out
  - coverage
  - vendor
"""
