"""HTTP caching headers for served stylesheets."""

from __future__ import annotations

import time
from email.utils import formatdate

ONE_DAY = 86400


def stylesheet_headers(last_modified: float | None = None, max_age: int = ONE_DAY) -> dict[str, str]:
    """Headers letting browsers keep the compressed stylesheet for *max_age* seconds."""
    now = time.time()
    return {
        "Date": formatdate(last_modified if last_modified is not None else now, usegmt=True),
        "Expires": formatdate(now + max_age, usegmt=True),
        "Cache-Control": f"max-age={max_age}, must-revalidate",
        "Pragma": "cache",
    }


def no_cache_headers() -> dict[str, str]:
    """Headers forcing the browser to refetch on every request."""
    return {
        "Expires": "Mon, 26 Jul 1997 05:00:00 GMT",
        "Last-Modified": formatdate(time.time(), usegmt=True),
        "Cache-Control": "no-store, no-cache, must-revalidate, post-check=0, pre-check=0",
        "Pragma": "no-cache",
    }
