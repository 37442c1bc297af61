"""
StrictKit SECRETS Gate

Detects hardcoded credentials using high-confidence regex signatures.
Scans raw file content: secrets live inside string literals, so the
sanitizer is deliberately not applied here.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Pattern

from strictkit.core.finding import Finding, Status
from strictkit.core.gate import BaseGate
from strictkit.core.source import SourceReadError, SourceTree

logger = logging.getLogger(__name__)

# File extensions to scan for secrets
SECRET_EXTENSIONS = frozenset({
    ".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs",
    ".json", ".yaml", ".yml",
})

# Generated dependency locks are full of hashes that look like tokens
LOCKFILE_NAMES = {"package-lock.json", "npm-shrinkwrap.json", "pnpm-lock.yaml", "yarn.lock"}


class SecretsGate(BaseGate):
    """
    Flags every file containing at least one credential signature.
    The first matching signature short-circuits the file.
    """

    name = "SECRETS"
    rule_id = "SK-SEC-001"
    extensions = SECRET_EXTENSIONS
    skip_tests = True

    # (label, pattern), checked in order
    PATTERNS: list[tuple[str, Pattern[str]]] = [
        ("Stripe live key",
         re.compile(r"\b[sr]k_live_[A-Za-z0-9]{24,}")),
        ("AWS access key ID",
         re.compile(r"\b(?:AKIA|ASIA)[0-9A-Z]{16}\b")),
        ("GitHub token",
         re.compile(r"\bgh[pousr]_[A-Za-z0-9]{36,}")),
        ("GitHub fine-grained token",
         re.compile(r"\bgithub_pat_[A-Za-z0-9_]{82}")),
        ("OpenAI API key",
         re.compile(r"\bsk-(?:proj-)?[A-Za-z0-9_-]{32,}")),
        ("Google API key",
         re.compile(r"\bAIza[0-9A-Za-z_-]{35}")),
        ("Slack token",
         re.compile(r"\bxox[abposr]-[A-Za-z0-9-]{10,}")),
        ("Private key",
         re.compile(r"-----BEGIN (?:RSA |EC |DSA |OPENSSH |PGP |ENCRYPTED )?PRIVATE KEY(?: BLOCK)?-----")),
        ("Bearer token",
         re.compile(r"\bBearer\s+[A-Za-z0-9\-._~+/]{20,}=*", re.IGNORECASE)),
        ("API key assignment",
         re.compile(r"""["']?api_key["']?\s*:\s*["'][A-Za-z0-9_-]{10,}["']""", re.IGNORECASE)),
    ]

    def candidates(self, tree: SourceTree) -> List[str]:
        return [p for p in super().candidates(tree) if not self._is_ignored(p)]

    @staticmethod
    def _is_ignored(path: str) -> bool:
        name = path.rsplit("/", 1)[-1]
        return name in LOCKFILE_NAMES or name.startswith(".env")

    def evaluate(self, tree: SourceTree, paths: List[str]) -> Finding:
        offending: list[str] = []

        for path in paths:
            try:
                unit = tree.read(path)
            except SourceReadError as exc:
                logger.debug("Skipping %s: %s", path, exc)
                continue

            label = self.match(unit.content)
            if label:
                logger.debug("%s matched in %s", label, path)
                offending.append(path)

        if not offending:
            return self.finding(
                Status.PASS,
                "No obvious secret patterns detected.",
                count=0,
                affected_files=0,
            )

        others = ""
        if len(offending) > 1:
            others = f" (and {len(offending) - 1} other file(s))"

        return self.finding(
            self.config.severity,
            f"Secrets detected in {offending[0]}{others}",
            count=len(offending),
            affected_files=len(offending),
        )

    @classmethod
    def match(cls, content: str) -> Optional[str]:
        """Return the label of the first signature found in content."""
        for label, pattern in cls.PATTERNS:
            if pattern.search(content):
                return label
        return None
