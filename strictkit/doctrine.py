"""
StrictKit Doctrine

The reasoning behind each gate, shown by `strictkit explain`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DoctrineEntry:
    gate: str
    rule_id: str
    family: str
    severity: str
    philosophy: str
    fix: str


DOCTRINE: tuple[DoctrineEntry, ...] = (
    DoctrineEntry(
        gate="NO_ANY",
        rule_id="SK-INT-001",
        family="INTEGRITY",
        severity="FAIL",
        philosophy='The "any" type is a silent virus. It disables the compiler and hides technical debt.',
        fix="Use unknown, interfaces, or generics to maintain type safety.",
    ),
    DoctrineEntry(
        gate="SECRETS",
        rule_id="SK-SEC-001",
        family="SECURITY",
        severity="FAIL",
        philosophy="Hardcoded secrets are a liability. Environment variables are the only standard.",
        fix="Move secrets to .env and ensure .env is in .gitignore.",
    ),
    DoctrineEntry(
        gate="DOCKER",
        rule_id="SK-INF-001",
        family="INFRA",
        severity="FAIL",
        philosophy="Unpinned Docker images create non-deterministic builds.",
        fix="Use specific tags (e.g., node:20-alpine) or a sha256 digest instead of :latest.",
    ),
    DoctrineEntry(
        gate="CONSOLE",
        rule_id="SK-QLT-001",
        family="QUALITY",
        severity="FAIL",
        philosophy="console.log() is debugging residue. It leaks internals and pollutes production output.",
        fix="Remove the call or route it through a real logger.",
    ),
    DoctrineEntry(
        gate="LOCKFILE",
        rule_id="SK-DEP-001",
        family="DEPENDENCIES",
        severity="FAIL",
        philosophy="Without a lockfile, every install resolves a different dependency tree.",
        fix="Commit package-lock.json, yarn.lock, pnpm-lock.yaml, or bun.lockb.",
    ),
)


def lookup(name: str) -> Optional[DoctrineEntry]:
    """Find an entry by gate id, family alias, or rule id (case-insensitive)."""
    key = name.strip().upper()
    for entry in DOCTRINE:
        if key in (entry.gate, entry.family, entry.rule_id):
            return entry
    return None
