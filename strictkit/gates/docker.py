"""
StrictKit DOCKER Gate

Analyzes the root Dockerfile for unpinned base images.

A base image reference is weak when it:
- has no tag (implicit :latest)
- uses the explicit :latest tag
- uses a floating alias such as :stable or :lts

A reference pinned by content digest (@sha256:...) is always strong.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from strictkit.core.finding import Finding, Status
from strictkit.core.gate import BaseGate
from strictkit.core.source import SourceReadError, SourceTree

logger = logging.getLogger(__name__)

DOCKERFILE = "Dockerfile"

FLOATING_TAGS = {"latest", "stable", "lts", "current", "edge", "mainline", "rolling", "nightly"}

_FROM_LINE = re.compile(
    r"^\s*FROM\s+(?:--platform=\S+\s+)?(?P<image>\S+)(?:\s+AS\s+(?P<alias>\S+))?",
    re.IGNORECASE,
)
_DIGEST = re.compile(r"@sha256:[0-9a-fA-F]{64}$")


@dataclass(frozen=True)
class ImageReference:
    raw: str
    line: int
    name: str
    tag: Optional[str]
    digest: Optional[str]

    @property
    def is_pinned(self) -> bool:
        if self.digest:
            return True
        if not self.tag:
            return False
        return self.tag.lower() not in FLOATING_TAGS


def parse_image_reference(raw: str, line: int = 0) -> ImageReference:
    """Split ``registry:port/name:tag@digest`` into its parts."""
    digest = None
    ref = raw
    if "@" in ref:
        ref, digest = ref.split("@", 1)
        if not _DIGEST.search("@" + digest):
            digest = None

    # A colon before the last slash belongs to a registry port.
    last_segment = ref.rsplit("/", 1)[-1]
    tag = None
    name = ref
    if ":" in last_segment:
        name, tag = ref.rsplit(":", 1)

    return ImageReference(raw=raw, line=line, name=name, tag=tag or None, digest=digest)


class DockerGate(BaseGate):
    """Checks every FROM instruction of the root Dockerfile."""

    name = "DOCKER"
    rule_id = "SK-INF-001"

    def candidates(self, tree: SourceTree) -> List[str]:
        return [DOCKERFILE] if tree.exists(DOCKERFILE) else []

    def evaluate(self, tree: SourceTree, paths: List[str]) -> Finding:
        if not paths:
            return self.finding(Status.WARN, "No Dockerfile found.")

        try:
            unit = tree.read(paths[0])
        except SourceReadError as exc:
            logger.warning("%s", exc)
            return self.finding(Status.WARN, f"Dockerfile could not be read: {exc}")

        references = self.base_images(unit.content)
        weak = [ref for ref in references if not ref.is_pinned]

        if weak:
            names = ", ".join(ref.raw for ref in weak)
            return self.finding(
                Status.FAIL,
                f"Unpinned Docker image(s) detected: {names}",
                count=len(weak),
                affected_files=1,
            )

        if not references:
            return self.finding(Status.PASS, "No external base images declared.", count=0)

        return self.finding(
            Status.PASS,
            f"All {len(references)} base image(s) are pinned.",
            count=0,
        )

    @staticmethod
    def base_images(content: str) -> List[ImageReference]:
        """External base images referenced by FROM lines, in file order."""
        stages: set[str] = set()
        references: List[ImageReference] = []

        for line_no, raw_line in enumerate(content.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            match = _FROM_LINE.match(line)
            if not match:
                continue

            image = match.group("image")
            alias = match.group("alias")

            # scratch, earlier build stages and ARG-driven images are not pullable refs
            if image.lower() == "scratch" or image.lower() in stages or "$" in image:
                logger.debug("Skipping base image %s on line %d", image, line_no)
            else:
                references.append(parse_image_reference(image, line_no))

            if alias:
                stages.add(alias.lower())

        return references
