"""Compression result: minified text plus the ratio shown in its banner."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompressionResult:
    """Outcome of minifying one stylesheet. Never persisted."""

    name: str
    input_length: int
    output: str
    ratio: float  # percent saved, 3 decimal places

    @property
    def banner(self) -> str:
        return f"/* {self.name} ({self.ratio}%) */"

    def render(self) -> str:
        """Minified text with the banner comment on its own first line."""
        return f"{self.banner}\n{self.output}"
