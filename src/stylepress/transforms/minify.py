"""Minifier: strips comments and insignificant whitespace from stylesheet text.

This is a fixed sequence of literal removals, not a CSS-aware collapse.
Runs of four or more spaces are only reduced by the double/triple space
rules below.
"""

from __future__ import annotations

import re

from stylepress.model.result import CompressionResult

_COMMENT_RE = re.compile(r"/\*[^*]*\*+(?:[^/][^*]*\*+)*/")

# Removed outright, in this order.
_REMOVALS = ("\r\n", "\r", "\n", "\t", r"/\s\s+/", "  ", "   ")

# (needle, replacement), in this order.
_COLLAPSES = (
    (" {", "{"),
    ("{ ", "{"),
    (" }", "}"),
    ("} ", "}"),
    (": ", ":"),
)


def strip_comments(text: str) -> str:
    return _COMMENT_RE.sub("", text)


def minify(text: str) -> str:
    """Strip comments, then whitespace, then spaces around braces and colons."""
    output = strip_comments(text)
    for needle in _REMOVALS:
        output = output.replace(needle, "")
    for needle, replacement in _COLLAPSES:
        output = output.replace(needle, replacement)
    return output


def compression_ratio(source: str, output: str) -> float:
    """Percent of code points saved, rounded to 3 decimal places."""
    if not source:
        return 0.0
    return round(100 - (len(output) / len(source)) * 100, 3)


class Minifier:
    def apply(self, text: str) -> str:
        return minify(text)

    def compress(self, name: str, text: str) -> CompressionResult:
        output = minify(text)
        return CompressionResult(
            name=name,
            input_length=len(text),
            output=output,
            ratio=compression_ratio(text, output),
        )
