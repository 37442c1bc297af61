"""
StrictKit Source Sanitizer

Masks comments and string literals so that regex-based gates do not
report matches that only appear in prose or data.

Call order matters: strip_comments() must run before strip_strings().
The `//` URL heuristic in strip_comments() looks at raw text and can
misfire once strings have already been collapsed.
"""

from __future__ import annotations

import re

_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)

# `//` right after `:` is a URL scheme separator, not a comment.
_LINE_COMMENT = re.compile(r"(?<!:)//.*$", re.MULTILINE)

_STRING_LITERAL = re.compile(
    r"""
      (?P<template>`(?:[^`\\]|\\.)*`)
    | (?P<double>"(?:[^"\\]|\\.)*")
    | (?P<single>'(?:[^'\\]|\\.)*')
    """,
    re.VERBOSE | re.DOTALL,
)


def _keep_newlines(match: re.Match) -> str:
    return "\n" * match.group(0).count("\n")


def _empty_literal(match: re.Match) -> str:
    if match.group("single") is not None:
        return "''"
    if match.group("template") is not None:
        return '""' + _keep_newlines(match)
    return '""'


def strip_comments(code: str) -> str:
    """Remove block and line comments, keeping the line count intact."""
    code = _BLOCK_COMMENT.sub(_keep_newlines, code)
    return _LINE_COMMENT.sub("", code)


def strip_strings(code: str) -> str:
    """Collapse every string and template literal to an empty literal."""
    return _STRING_LITERAL.sub(_empty_literal, code)


def sanitize(code: str) -> str:
    """Comments first, then strings."""
    return strip_strings(strip_comments(code))
