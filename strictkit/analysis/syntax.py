"""
StrictKit Syntax-Aware Matcher

Counts explicit `any` types in TypeScript sources using a tree-sitter
parse tree instead of regular expressions. Working on the tree catches
union members, mapped-type values, return types and TSX files, and
ignores `any` inside comments, strings and identifiers such as `company`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Node, Parser

ANY_TYPE_NODE = "predefined_type"
ANY_KEYWORD = b"any"

# Dialect name -> grammar loader
DIALECTS: Dict[str, object] = {
    "typescript": ts_typescript.language_typescript,
    "tsx": ts_typescript.language_tsx,
}


class SyntaxParseError(ValueError):
    """The source unit could not be parsed cleanly."""

    def __init__(self, path: str, line: int):
        super().__init__(f"Syntax error in {path} near line {line}")
        self.path = path
        self.line = line


def dialect_for(path: str) -> str:
    """TSX files embed markup and need the tsx grammar."""
    return "tsx" if path.lower().endswith(".tsx") else "typescript"


@lru_cache(maxsize=None)
def _parser(dialect: str) -> Parser:
    return Parser(Language(DIALECTS[dialect]()))


def _first_error_line(root: Node) -> int:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        if node.has_error:
            stack.extend(reversed(node.children))
    return root.start_point[0] + 1


def count_escape_markers(path: str, content: str) -> int:
    """
    Count `any` keyword type nodes in one TypeScript source unit.

    Args:
        path: File path; its extension selects the grammar dialect.
        content: Full source text.

    Returns:
        Number of `any` type nodes in the tree.

    Raises:
        SyntaxParseError: If the tree contains syntax errors.
    """
    tree = _parser(dialect_for(path)).parse(content.encode("utf-8"))
    root = tree.root_node

    if root.has_error:
        raise SyntaxParseError(path, _first_error_line(root))

    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == ANY_TYPE_NODE and node.text == ANY_KEYWORD:
            count += 1
        stack.extend(node.children)
    return count
