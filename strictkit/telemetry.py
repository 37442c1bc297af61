"""
StrictKit Anonymous Telemetry

Fire-and-forget usage reporting. The request runs on a daemon thread with
its own timeout; nothing here can change the audit result or exit code.

Opt out with STRICTKIT_TELEMETRY=off or `telemetry.enabled: false`.
"""

from __future__ import annotations

import logging
import os
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import requests

from strictkit import __version__
from strictkit.core.report import Report

logger = logging.getLogger(__name__)

ENDPOINT = "https://strictkit.dev/api/telemetry"
REQUEST_TIMEOUT = 1.5
# Upper bound the CLI waits for the request before exiting
TELEMETRY_JOIN_TIMEOUT = 2.0

CONFIG_DIR = Path.home() / ".strictkit"
ID_FILE = CONFIG_DIR / "anon-id"

CI_ENV_VARS = ("CI", "GITHUB_ACTIONS", "GITLAB_CI", "BUILDKITE", "CIRCLECI", "JENKINS_URL")


def is_disabled() -> bool:
    return os.environ.get("STRICTKIT_TELEMETRY", "").strip().lower() in ("off", "0", "false")


def _debug_enabled() -> bool:
    return os.environ.get("STRICTKIT_DEBUG") == "true"


def get_anonymous_id(id_file: Optional[Path] = None) -> str:
    """Return the persisted machine id, creating it on first use."""
    id_file = id_file or ID_FILE
    try:
        if id_file.exists():
            existing = id_file.read_text(encoding="utf-8").strip()
            if existing:
                return existing
        id_file.parent.mkdir(parents=True, exist_ok=True)
        anon_id = str(uuid.uuid4())
        id_file.write_text(anon_id, encoding="utf-8")
        return anon_id
    except OSError:
        return "unknown-machine"


def get_source() -> str:
    if any(os.environ.get(var) for var in CI_ENV_VARS):
        return "ci"
    if os.path.exists("/.dockerenv"):
        return "container"
    return "local"


def build_payload(report: Report, anon_id: str) -> dict[str, Any]:
    return {
        "event": "audit_completed",
        "anonymousId": anon_id,
        "source": get_source(),
        "version": __version__,
        "result": "PASS" if report.success else "FAIL",
        "rulesBroken": report.broken_rules,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def _send(payload: dict[str, Any]) -> None:
    try:
        response = requests.post(ENDPOINT, json=payload, timeout=REQUEST_TIMEOUT)
        if _debug_enabled():
            logger.warning("[Telemetry] Status: %s", response.status_code)
    except requests.RequestException as exc:
        if _debug_enabled():
            logger.warning("[Telemetry Error] %s", exc)
        else:
            logger.debug("Telemetry request failed: %s", exc)


def track_audit(report: Report, enabled: bool = True) -> Optional[threading.Thread]:
    """
    Send an anonymous audit summary in the background.

    Returns:
        The started daemon thread, or None when telemetry is disabled.
    """
    if not enabled or is_disabled():
        return None

    payload = build_payload(report, get_anonymous_id())
    thread = threading.Thread(target=_send, args=(payload,), name="strictkit-telemetry", daemon=True)
    thread.start()
    return thread
