"""Error hierarchy for stylepress."""
from __future__ import annotations


class StylepressError(Exception):
    """Base error for all stylepress errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class NotConfiguredError(StylepressError):
    """The pipeline was created without any stylesheets."""


class UnsafePathError(StylepressError):
    """A stylesheet name would resolve outside its root directory."""

    def __init__(self, name: str, **kwargs) -> None:
        super().__init__(f"Stylesheet name {name!r} escapes its root", **kwargs)
        self.name = name


class SourceMissingError(StylepressError):
    """A stylesheet has neither a usable cache entry nor a readable source file."""

    def __init__(self, name: str, **kwargs) -> None:
        cause = kwargs.get("cause")
        if cause is None or isinstance(cause, FileNotFoundError):
            message = f"Stylesheet {name!r} does not exist"
        else:
            message = f"Stylesheet {name!r} cannot be read: {cause}"
        super().__init__(message, **kwargs)
        self.name = name


# ---------------------------------------------------------------------------
# Function dispatch
# ---------------------------------------------------------------------------


class UnknownFunctionError(StylepressError):
    """An inline function call names nothing the host registered."""

    def __init__(self, function: str, *, stylesheet: str = "", **kwargs) -> None:
        where = f" in {stylesheet}" if stylesheet else ""
        super().__init__(f"Function {function} does not exist{where}", **kwargs)
        self.function = function
        self.stylesheet = stylesheet


class FunctionCallError(StylepressError):
    """A host function raised while being evaluated."""

    def __init__(self, function: str, *, stylesheet: str = "", **kwargs) -> None:
        where = f" in {stylesheet}" if stylesheet else ""
        super().__init__(f"Function {function} failed{where}", **kwargs)
        self.function = function
        self.stylesheet = stylesheet


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------


class CacheMissError(StylepressError):
    """No cache entry exists for the requested stylesheet."""


class CacheWriteError(StylepressError):
    """Creating the cache directory or writing a cache file failed."""
