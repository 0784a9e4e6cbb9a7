"""Parse report: what happened to each stylesheet during one parse() call."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SheetStatus(Enum):
    CACHED = "cached"            # fresh cache entry served
    COMPRESSED = "compressed"    # recompressed from source
    STALE_CACHE = "stale_cache"  # source gone, orphaned cache entry served
    SKIPPED = "skipped"          # nothing to serve
    FAILED = "failed"            # function evaluation failed


@dataclass
class SheetOutcome:
    name: str
    status: SheetStatus
    source_mtime: float | None = None
    ratio: float | None = None
    error: str = ""

    @property
    def served(self) -> bool:
        """True if this stylesheet contributed text to the response."""
        return self.status in (
            SheetStatus.CACHED,
            SheetStatus.COMPRESSED,
            SheetStatus.STALE_CACHE,
        )


@dataclass
class ParseReport:
    """Ordered outcomes of a single parse() call."""

    outcomes: list[SheetOutcome] = field(default_factory=list)

    def add(self, outcome: SheetOutcome) -> None:
        self.outcomes.append(outcome)

    def by_status(self, status: SheetStatus) -> list[str]:
        return [o.name for o in self.outcomes if o.status is status]

    @property
    def last_modified(self) -> float | None:
        """Newest source mtime among the served stylesheets."""
        times = [o.source_mtime for o in self.outcomes if o.served and o.source_mtime]
        return max(times) if times else None
