"""Stylesheet references: normalised names resolved against a root directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterable

from stylepress.errors import UnsafePathError


def normalize_name(name: str) -> str:
    """Normalise a stylesheet name the way it was given on the query string.

    ``"main"`` becomes ``"main.css"``, ``"/sub/style.css/"`` becomes
    ``"sub/style.css"``. Backslashes are treated as path separators.
    """
    name = name.strip().replace("\\", "/")
    suffix = PurePosixPath(name).suffix
    if suffix.lower() != ".css":
        name = name.strip(".") + ".css"
    return name.strip("/")


def split_names(stylesheets: str | Iterable[str] | None) -> list[str]:
    """Accept a comma separated string or an iterable of names."""
    if not stylesheets:
        return []
    if isinstance(stylesheets, str):
        stylesheets = stylesheets.split(",")
    return [normalize_name(s) for s in stylesheets if s and s.strip()]


def resolve_within(root: Path, name: str) -> Path:
    """Join *name* onto *root*, refusing anything that lands outside it."""
    pure = PurePosixPath(name)
    if pure.is_absolute() or ".." in pure.parts or ":" in name:
        raise UnsafePathError(name)
    root = root.resolve()
    candidate = (root / pure).resolve()
    try:
        candidate.relative_to(root)
    except ValueError as exc:
        raise UnsafePathError(name, cause=exc) from exc
    return candidate


@dataclass(frozen=True)
class StylesheetRef:
    """A configured stylesheet: its relative name and absolute source path."""

    name: str
    source: Path

    @classmethod
    def create(cls, name: str, base_path: str | Path) -> StylesheetRef:
        name = normalize_name(name)
        return cls(name=name, source=resolve_within(Path(base_path), name))

    def source_mtime(self) -> float | None:
        """Modification time of the source file, or None when it is missing."""
        try:
            return self.source.stat().st_mtime
        except FileNotFoundError:
            return None
