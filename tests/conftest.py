"""
Pytest Configuration and Fixtures

Shared fixtures for StrictKit tests.
"""

import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from strictkit.core.config import StrictKitConfig
from strictkit.core.finding import Finding, Status
from strictkit.core.source import SourceTree


@pytest.fixture(autouse=True)
def no_telemetry(monkeypatch: pytest.MonkeyPatch) -> None:
    """Never let a test reach the telemetry endpoint."""
    monkeypatch.setenv("STRICTKIT_TELEMETRY", "off")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_file(temp_dir: Path) -> Callable[[str, str], Path]:
    """Write a file relative to temp_dir, creating parent directories."""

    def _write(relative_path: str, content: str) -> Path:
        path = temp_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def tree(temp_dir: Path) -> SourceTree:
    """A SourceTree rooted at temp_dir."""
    return SourceTree(temp_dir)


@pytest.fixture
def config() -> StrictKitConfig:
    """Create a default configuration."""
    return StrictKitConfig()


@pytest.fixture
def sample_findings() -> list[Finding]:
    """One finding per status, in gate order."""
    return [
        Finding(gate="NO_ANY", rule_id="SK-INT-001", status=Status.FAIL,
                message="Found 2 explicit 'any' usages in 1 file(s).", count=2, affected_files=1),
        Finding(gate="SECRETS", rule_id="SK-SEC-001", status=Status.PASS,
                message="No obvious secret patterns detected.", count=0, affected_files=0),
        Finding(gate="DOCKER", rule_id="SK-INF-001", status=Status.WARN,
                message="No Dockerfile found."),
        Finding(gate="CONSOLE", rule_id="SK-QLT-001", status=Status.PASS,
                message="No console.log() calls found.", count=0, affected_files=0),
        Finding(gate="LOCKFILE", rule_id="SK-DEP-001", status=Status.PASS,
                message="Lockfile found: package-lock.json"),
    ]


@pytest.fixture
def dockerfile(write_file: Callable[[str, str], Path]) -> Path:
    """Create a multi-stage Dockerfile with one unpinned image."""
    return write_file("Dockerfile", '''FROM node:20-alpine AS deps
RUN npm ci
FROM deps AS builder
RUN npm run build
FROM node:latest
COPY --from=builder /app .
CMD ["node", "server.js"]
''')
