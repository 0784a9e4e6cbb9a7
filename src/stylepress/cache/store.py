"""Stylesheet cache: compressed output on disk, fresh while the source is unchanged.

A cache file's mtime records the source mtime seen at compression time, so
an entry is fresh iff ``cache mtime >= source mtime``.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from stylepress.errors import CacheMissError, CacheWriteError
from stylepress.model.stylesheet import StylesheetRef, resolve_within

logger = logging.getLogger("stylepress.cache")

_DIR_MODE = 0o777


@dataclass(frozen=True)
class CacheEntry:
    name: str
    path: Path
    mtime_ns: int
    size: int


class StylesheetCache:
    """Filesystem-backed mapping of stylesheet name to compressed text."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def path_for(self, ref: StylesheetRef | str) -> Path:
        name = ref.name if isinstance(ref, StylesheetRef) else ref
        return resolve_within(self.root, name)

    # --- lookup ----------------------------------------------------------

    def entry(self, ref: StylesheetRef | str) -> CacheEntry | None:
        path = self.path_for(ref)
        try:
            st = path.stat()
        except FileNotFoundError:
            return None
        if not stat.S_ISREG(st.st_mode):
            return None
        name = ref.name if isinstance(ref, StylesheetRef) else ref
        return CacheEntry(name=name, path=path, mtime_ns=st.st_mtime_ns, size=st.st_size)

    def has(self, ref: StylesheetRef | str) -> bool:
        return self.entry(ref) is not None

    def is_fresh(self, ref: StylesheetRef) -> bool:
        """True iff an entry exists and is at least as new as the live source."""
        entry = self.entry(ref)
        if entry is None:
            return False
        try:
            source_mtime_ns = ref.source.stat().st_mtime_ns
        except FileNotFoundError:
            return False
        return entry.mtime_ns >= source_mtime_ns

    def read(self, ref: StylesheetRef | str) -> str:
        path = self.path_for(ref)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise CacheMissError(f"No cache entry for {path.name}", cause=exc) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise CacheMissError(f"Cache entry for {path.name} is unreadable", cause=exc) from exc

    # --- persistence -----------------------------------------------------

    def write(
        self,
        ref: StylesheetRef | str,
        content: str,
        source_mtime_ns: int | None = None,
    ) -> Path:
        """Persist *content*, replacing any previous entry atomically.

        When *source_mtime_ns* is given it becomes the entry's mtime, so a
        source edited while compressing still reads as newer than the cache.
        """
        path = self.path_for(ref)
        try:
            self._ensure_dir(path.parent)
            fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                    fh.write(content)
                os.chmod(tmp, 0o644)
                if source_mtime_ns is not None:
                    os.utime(tmp, ns=(source_mtime_ns, source_mtime_ns))
                os.replace(tmp, path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise CacheWriteError(f"Could not write cache file {path}: {exc}", cause=exc) from exc
        logger.debug("Cached %s (%d chars)", path, len(content))
        return path

    def clear(self) -> int:
        """Delete every cached file under the root. Returns the count removed."""
        if not self.root.is_dir():
            return 0
        removed = 0
        for path in sorted(self.root.rglob("*"), reverse=True):
            if path.is_file():
                path.unlink()
                removed += 1
            elif path.is_dir() and not any(path.iterdir()):
                path.rmdir()
        return removed

    @staticmethod
    def _ensure_dir(directory: Path) -> None:
        # Concurrent processes may race to create the same directory.
        directory.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
        if not os.access(directory, os.W_OK):
            logger.info("Cache directory %s not writable; resetting permissions", directory)
            os.chmod(directory, _DIR_MODE)
