"""Variable table: replaces bound placeholders such as ``@blue`` in stylesheet text."""

from __future__ import annotations

import re
from typing import Mapping

_NAME_STRIP_RE = re.compile(r"[^-_a-zA-Z0-9]")
_DELIMITER_STRIP_RE = re.compile(r"[^-_=+;:<>{}\[\]|]")
_TAG_RE = re.compile(r"<[^>]*(?:>|$)")


def sanitize_name(name: str) -> str:
    return _NAME_STRIP_RE.sub("", str(name))


def strip_tags(value: str) -> str:
    """Remove HTML/XML tags from *value*; an unclosed tag runs to the end."""
    return _TAG_RE.sub("", str(value))


class VariableTable:
    """Mapping of wrapped placeholder tokens to their substitution text.

    Names are reduced to ``[-_a-zA-Z0-9]`` and wrapped with the delimiter
    pair, so ``bind("blue", "#00F")`` binds the token ``@blue`` with the
    default delimiters. Empty names or values are ignored.
    """

    def __init__(self, prefix: str = "@", suffix: str = "") -> None:
        self._prefix = prefix
        self._suffix = suffix
        self._values: dict[str, str] = {}
        self._pattern: re.Pattern[str] | None = None

    @property
    def delimiters(self) -> tuple[str, str]:
        return self._prefix, self._suffix

    def bind(self, name: str | Mapping[str, object], value: object = None) -> VariableTable:
        if isinstance(name, Mapping):
            for key, val in name.items():
                self.bind(key, val)
            return self

        clean_name = sanitize_name(name)
        clean_value = strip_tags(value).strip() if value is not None else ""
        if not clean_name or not clean_value:
            return self

        self._values[clean_name] = clean_value
        self._pattern = None
        return self

    def set_delimiters(self, prefix: str = "[", suffix: str = "]") -> VariableTable:
        """Change the wrapping characters. Existing bindings are re-wrapped."""
        prefix = _DELIMITER_STRIP_RE.sub("", prefix or "")
        suffix = _DELIMITER_STRIP_RE.sub("", suffix or "")
        if prefix:
            self._prefix = prefix
        if suffix:
            self._suffix = suffix
        self._pattern = None
        return self

    def token(self, name: str) -> str:
        return f"{self._prefix}{sanitize_name(name)}{self._suffix}"

    def tokens(self) -> dict[str, str]:
        """Wrapped token -> value, in binding order."""
        return {self.token(name): value for name, value in self._values.items()}

    def get(self, name: str) -> str | None:
        return self._values.get(sanitize_name(name))

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and sanitize_name(name) in self._values

    def substitute(self, text: str) -> str:
        """Replace every bound token in a single left-to-right pass.

        Matching is literal and case-sensitive. Longer tokens are tried
        first so ``@blueDark`` is not clobbered by ``@blue``; replacement
        text is never rescanned.
        """
        if not self._values:
            return text
        tokens = self.tokens()
        if self._pattern is None:
            ordered = sorted(tokens, key=len, reverse=True)
            self._pattern = re.compile("|".join(re.escape(t) for t in ordered))
        return self._pattern.sub(lambda m: tokens[m.group(0)], text)


class VariableSubstitutionTransform:
    """Apply a VariableTable to stylesheet text."""

    def __init__(self, table: VariableTable) -> None:
        self.table = table

    def apply(self, text: str) -> str:
        return self.table.substitute(text)
