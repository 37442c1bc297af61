"""
StrictKit Source Tree

File enumeration and content reading for the audit root.
Gates never touch the file system directly; they ask the SourceTree
for candidate paths and read SourceUnits through it.
"""

from __future__ import annotations

import fnmatch
import os
import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional

from strictkit.core.config import DEFAULT_EXCLUDE_PATHS

MINIFIED_PATTERNS = ("*.min.js", "*.min.css")

TEST_NAME_SEGMENTS = {"test", "tests", "spec", "specs"}

TEST_DIRECTORIES = {
    "__tests__",
    "__mocks__",
    "__fixtures__",
    "test",
    "tests",
    "spec",
    "specs",
    "fixtures",
    "e2e",
}

_NAME_SEPARATORS = re.compile(r"[._-]")


class SourceReadError(OSError):
    """A candidate file could not be read."""


@dataclass(frozen=True)
class SourceUnit:
    path: str
    content: str


def is_test_path(path: str) -> bool:
    """
    Check whether a relative path is test-designated.

    A file is test-designated when a `.`/`_`/`-` separated segment of its
    name is a test marker (``auth.test.ts``, ``db_spec.js``), or when any
    of its directories is a recognized test directory (``__tests__/``).
    """
    parts = PurePosixPath(path).parts
    if not parts:
        return False

    *directories, name = parts
    if any(d in TEST_DIRECTORIES for d in directories):
        return True

    segments = _NAME_SEPARATORS.split(name.lower())
    # The final segment is the extension.
    return any(s in TEST_NAME_SEGMENTS for s in segments[:-1] or segments)


class SourceTree:
    """Read-only view of the project being audited."""

    def __init__(self, root: Path, exclude: Optional[Iterable[str]] = None):
        self.root = Path(root)
        self.exclude = list(exclude) if exclude is not None else list(DEFAULT_EXCLUDE_PATHS)

    def find(self, extensions: Iterable[str], skip_tests: bool = False) -> List[str]:
        """
        Enumerate files under the root with one of the given extensions.

        Args:
            extensions: Suffixes including the dot, e.g. ``{".ts", ".tsx"}``.
            skip_tests: Drop test-designated paths.

        Returns:
            Sorted relative POSIX paths.
        """
        wanted = {e.lower() for e in extensions}
        found: List[str] = []

        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = [d for d in dirnames if not self._is_excluded(d)]
            for filename in filenames:
                if self._is_excluded(filename) or self._is_minified(filename):
                    continue
                if os.path.splitext(filename)[1].lower() not in wanted:
                    continue
                rel = Path(dirpath, filename).relative_to(self.root).as_posix()
                if skip_tests and is_test_path(rel):
                    continue
                found.append(rel)

        return sorted(found)

    def read(self, path: str) -> SourceUnit:
        """Read a file relative to the root. A leading UTF-8 BOM is dropped."""
        try:
            content = (self.root / path).read_text(encoding="utf-8-sig", errors="ignore")
        except OSError as exc:
            raise SourceReadError(f"Cannot read {path}: {exc}") from exc
        return SourceUnit(path=path, content=content)

    def exists(self, path: str) -> bool:
        return (self.root / path).is_file()

    def _is_excluded(self, name: str) -> bool:
        return any(fnmatch.fnmatch(name, pattern) for pattern in self.exclude)

    @staticmethod
    def _is_minified(name: str) -> bool:
        return any(fnmatch.fnmatch(name, pattern) for pattern in MINIFIED_PATTERNS)
