"""Compression pipeline: load, expand, minify and cache a list of stylesheets."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Mapping

from stylepress.cache.store import StylesheetCache
from stylepress.config import CompressionConfig, FunctionPolicy
from stylepress.errors import (
    CacheMissError,
    CacheWriteError,
    FunctionCallError,
    NotConfiguredError,
    SourceMissingError,
    UnknownFunctionError,
)
from stylepress.functions.registry import FunctionResolver
from stylepress.model.report import ParseReport, SheetOutcome, SheetStatus
from stylepress.model.result import CompressionResult
from stylepress.model.stylesheet import StylesheetRef, split_names
from stylepress.transforms import apply_transforms
from stylepress.transforms.functions import FunctionDispatcher
from stylepress.transforms.minify import Minifier
from stylepress.transforms.variables import VariableSubstitutionTransform, VariableTable

SEPARATOR = "\n\n"


class CompressionPipeline:
    """Turns configured stylesheets into one compressed response.

    For each stylesheet, in order: a fresh cache entry is served as-is;
    otherwise the source is run through function dispatch, then variable
    substitution, then the minifier, and the result is cached. Variables
    are not expanded before functions are dispatched, so a variable may
    appear as a function argument only in its literal token form.

    A pipeline created without stylesheets is inert: ``bind`` does nothing
    and ``parse`` returns an empty string.
    """

    def __init__(
        self,
        stylesheets: str | Iterable[str] | None = None,
        *,
        config: CompressionConfig | None = None,
        functions: FunctionResolver | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or CompressionConfig()
        self._log = logger or logging.getLogger("stylepress.pipeline")
        self._names = split_names(stylesheets)
        self.variables = VariableTable(self.config.var_prefix, self.config.var_suffix)
        self.dispatcher = FunctionDispatcher(
            functions,
            sigil=self.config.function_sigil,
            policy=self.config.function_policy,
            logger=self._log,
        )
        self.minifier = Minifier()
        self.last_report = ParseReport()

        if not self._names:
            self._log.warning("No stylesheets configured; nothing will be parsed")
        self.set_path(self.config.base_path, self.config.cache_dir)

    # --- configuration ---------------------------------------------------

    @property
    def is_configured(self) -> bool:
        return bool(self._names)

    def require_configured(self) -> CompressionPipeline:
        """Fail fast instead of running inert."""
        if not self._names:
            raise NotConfiguredError("No stylesheets were supplied")
        return self

    @property
    def stylesheets(self) -> list[StylesheetRef]:
        return list(self._refs)

    def set_path(self, path: str | Path | None = None, cache_dir: str = "_cache") -> CompressionPipeline:
        """Point the pipeline at a stylesheet directory and its cache subdirectory."""
        base = Path(path) if path else Path.cwd()
        self.config = replace(self.config, base_path=str(base), cache_dir=cache_dir)
        self._refs = [StylesheetRef.create(name, base) for name in self._names]
        self.cache = StylesheetCache(base / cache_dir)
        return self

    def set_caching(self, enable: bool = True) -> CompressionPipeline:
        self.config = replace(self.config, caching=bool(enable))
        return self

    def set_delimiters(self, prefix: str = "[", suffix: str = "]") -> CompressionPipeline:
        self.variables.set_delimiters(prefix, suffix)
        prefix, suffix = self.variables.delimiters
        self.config = replace(self.config, var_prefix=prefix, var_suffix=suffix)
        return self

    def bind(self, name: str | Mapping[str, object], value: object = None) -> CompressionPipeline:
        if not self._names:
            return self
        self.variables.bind(name, value)
        return self

    # --- processing ------------------------------------------------------

    def compress(self, ref: StylesheetRef) -> CompressionResult:
        """Compress one stylesheet from source. Does not touch the cache."""
        try:
            stylesheet = ref.source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceMissingError(ref.name, cause=exc) from exc
        stylesheet = apply_transforms(
            stylesheet,
            [
                self.dispatcher.for_stylesheet(ref.name),
                VariableSubstitutionTransform(self.variables),
            ],
        )
        result = self.minifier.compress(ref.name, stylesheet)
        self._log.debug("Compressed %s (%s%%)", ref.name, result.ratio)
        return result

    def parse(self) -> str:
        """Process every configured stylesheet and return the joined output."""
        report = ParseReport()
        self.last_report = report
        if not self._names:
            return ""

        response: list[str] = []
        for ref in self._refs:
            outcome, output = self._process(ref)
            report.add(outcome)
            if output is not None:
                response.append(output + SEPARATOR)

        self._log.info(
            "Parsed %d stylesheet(s): %d cached, %d compressed, %d skipped, %d failed",
            len(self._refs),
            len(report.by_status(SheetStatus.CACHED)),
            len(report.by_status(SheetStatus.COMPRESSED)),
            len(report.by_status(SheetStatus.SKIPPED)),
            len(report.by_status(SheetStatus.FAILED)),
        )
        return "".join(response)

    def _process(self, ref: StylesheetRef) -> tuple[SheetOutcome, str | None]:
        caching = self.config.caching
        source_mtime = ref.source_mtime()

        if caching and self.cache.is_fresh(ref):
            try:
                output = self.cache.read(ref)
            except CacheMissError:
                # Removed or unreadable since the freshness check.
                self._log.warning("Cache entry for %s unusable; recompressing", ref.name)
            else:
                return SheetOutcome(ref.name, SheetStatus.CACHED, source_mtime), output

        if source_mtime is None:
            return self._missing_source(ref)

        try:
            mtime_ns = ref.source.stat().st_mtime_ns
            result = self.compress(ref)
        except OSError as exc:
            return self._missing_source(ref, SourceMissingError(ref.name, cause=exc))
        except SourceMissingError as exc:
            return self._missing_source(ref, exc)
        except (UnknownFunctionError, FunctionCallError) as exc:
            if self.config.function_policy is FunctionPolicy.ABORT:
                raise
            self._log.error("Skipping %s: %s", ref.name, exc)
            return SheetOutcome(ref.name, SheetStatus.FAILED, source_mtime, error=str(exc)), None

        output = result.render()
        outcome = SheetOutcome(ref.name, SheetStatus.COMPRESSED, source_mtime, ratio=result.ratio)
        if caching:
            try:
                self.cache.write(ref, output, source_mtime_ns=mtime_ns)
            except CacheWriteError as exc:
                self._log.warning("Serving %s uncached: %s", ref.name, exc)
        return outcome, output

    def _missing_source(
        self, ref: StylesheetRef, error: SourceMissingError | None = None
    ) -> tuple[SheetOutcome, str | None]:
        if self.config.caching and self.cache.has(ref):
            self._log.warning("Source for %s is unavailable; serving its last cached copy", ref.name)
            try:
                return SheetOutcome(ref.name, SheetStatus.STALE_CACHE), self.cache.read(ref)
            except CacheMissError:
                pass

        error = error or SourceMissingError(ref.name)
        if self.config.strict:
            raise error
        self._log.warning("Skipping %s: %s", ref.name, error)
        return SheetOutcome(ref.name, SheetStatus.SKIPPED, error=str(error)), None
