"""Base protocol for stylesheet text transforms."""

from __future__ import annotations

from typing import Protocol


class Transform(Protocol):
    """A text-to-text transformation step."""

    def apply(self, text: str) -> str: ...
