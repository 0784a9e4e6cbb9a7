"""Function dispatch: evaluates inline calls such as ``@colWidth(2)``.

Calls are found by a single forward scan. Comments are skipped, argument
spans end at the balancing ``)`` on the same line, and native CSS functions
(``url``, ``rgb``, ...) are passed through untouched.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator

from stylepress.config import FunctionPolicy
from stylepress.errors import FunctionCallError, UnknownFunctionError
from stylepress.functions.registry import FunctionResolver

__all__ = ["AT_RULES", "FunctionCall", "FunctionDispatcher", "RESERVED_FUNCTIONS", "split_arguments"]

RESERVED_FUNCTIONS = frozenset({"url", "attr", "rect", "rgb", "alpha", "lang"})

# Minified at-rules such as `@media(max-width:600px)` look like `@` calls.
AT_RULES = frozenset({"media", "supports", "container", "import", "layer", "document", "page"})

_QUOTES = "\"'"


@dataclass(frozen=True)
class FunctionCall:
    """A function token located in stylesheet text."""

    start: int
    end: int  # exclusive, just past the closing paren
    name: str
    raw_args: str
    text: str

    @property
    def args(self) -> list[str]:
        return split_arguments(self.raw_args)


def split_arguments(raw: str) -> list[str]:
    """Split on commas that are not nested in parens or quotes, trimming each."""
    if not raw.strip():
        return []
    args: list[str] = []
    current: list[str] = []
    depth = 0
    quote = ""
    for ch in raw:
        if quote:
            if ch == quote:
                quote = ""
        elif ch in _QUOTES:
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == "," and depth == 0:
            args.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    args.append("".join(current).strip())
    return args


def _find_closing(text: str, pos: int) -> int | None:
    """Index of the paren closing the one just before *pos*, if on the same line."""
    depth = 1
    quote = ""
    for i in range(pos, len(text)):
        ch = text[i]
        if ch in "\r\n":
            return None
        if quote:
            if ch == quote:
                quote = ""
        elif ch in _QUOTES:
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
    return None


class FunctionDispatcher:
    """Resolve function tokens through a host registry and splice in the results."""

    def __init__(
        self,
        resolver: FunctionResolver | None = None,
        *,
        sigil: str = "@",
        policy: FunctionPolicy = FunctionPolicy.FAIL,
        logger: logging.Logger | None = None,
    ) -> None:
        self.resolver = resolver
        self.sigil = sigil
        self.policy = policy
        self._log = logger or logging.getLogger("stylepress.functions")
        if sigil:
            self._start_re = re.compile(re.escape(sigil) + r"([_.a-zA-Z0-9]+)\(")
        else:
            self._start_re = re.compile(r"(?<![-\w.])([_.a-zA-Z0-9]+)\(")

    def scan(self, text: str) -> Iterator[FunctionCall]:
        """Yield every function token outside of ``/* */`` comments."""
        pos = 0
        while True:
            match = self._start_re.search(text, pos)
            if match is None:
                return
            comment = text.find("/*", pos, match.start())
            if comment != -1:
                close = text.find("*/", comment + 2)
                if close == -1:
                    return
                pos = close + 2
                continue
            end = _find_closing(text, match.end())
            if end is None:
                pos = match.end()
                continue
            yield FunctionCall(
                start=match.start(),
                end=end + 1,
                name=match.group(1),
                raw_args=text[match.end():end],
                text=text[match.start():end + 1],
            )
            pos = end + 1

    def apply(self, text: str, stylesheet: str = "") -> str:
        parts: list[str] = []
        pos = 0
        for call in self.scan(text):
            parts.append(text[pos:call.start])
            parts.append(self.evaluate(call, stylesheet))
            pos = call.end
        if not parts:
            return text
        parts.append(text[pos:])
        return "".join(parts)

    def for_stylesheet(self, stylesheet: str) -> _StylesheetDispatch:
        """A Transform that reports errors against *stylesheet*."""
        return _StylesheetDispatch(self, stylesheet)

    def evaluate(self, call: FunctionCall, stylesheet: str = "") -> str:
        """Return the replacement text for a single call."""
        name = call.name.lower()
        if name in RESERVED_FUNCTIONS or (self.sigil == "@" and name in AT_RULES):
            return call.text

        function = self.resolver.resolve(call.name) if self.resolver is not None else None
        if function is None:
            if self.policy is FunctionPolicy.WARN:
                self._log.warning(
                    "Unknown function %s in %s; leaving it unresolved",
                    call.name,
                    stylesheet or "<string>",
                )
                return call.text
            raise UnknownFunctionError(call.name, stylesheet=stylesheet)

        try:
            result = function(*call.args)
        except Exception as exc:
            if self.policy is FunctionPolicy.WARN:
                self._log.warning(
                    "Function %s failed in %s: %s", call.name, stylesheet or "<string>", exc
                )
                return call.text
            raise FunctionCallError(call.name, stylesheet=stylesheet, cause=exc) from exc

        return "" if result is None else str(result)


@dataclass(frozen=True)
class _StylesheetDispatch:
    dispatcher: FunctionDispatcher
    stylesheet: str

    def apply(self, text: str) -> str:
        return self.dispatcher.apply(text, self.stylesheet)
