"""
StrictKit - Policy gates for deployment pipelines

Audits a source tree against a fixed set of gates and reports
PASS / FAIL / WARN for each one:
- Explicit `any` types in TypeScript (syntax-aware)
- Hardcoded credentials
- Unpinned Docker base images
- Leftover console.log() calls
- Missing dependency lockfiles

Licensed under the Apache License 2.0
"""

__version__ = "1.0.0"
TOOL_NAME = "StrictKit"


__all__ = [
    "__version__",
    "TOOL_NAME",
]
