"""CLI commands: stylepress status / clear-cache -- inspect and reset the cache."""

from __future__ import annotations

from pathlib import Path

import click

from stylepress.cache.store import StylesheetCache
from stylepress.cli.options import path_options
from stylepress.errors import UnsafePathError
from stylepress.model.stylesheet import StylesheetRef, split_names


def _state(cache: StylesheetCache, ref: StylesheetRef) -> str:
    has_source = ref.source.is_file()
    if not cache.has(ref):
        return "uncached" if has_source else "missing"
    if not has_source:
        return "orphaned"
    return "fresh" if cache.is_fresh(ref) else "stale"


@click.command()
@click.argument("stylesheets", nargs=-1, required=True)
@path_options
def status(stylesheets: tuple[str, ...], base_path: str, cache_dir: str) -> None:
    """Show whether each stylesheet's cache entry is fresh."""
    cache = StylesheetCache(Path(base_path) / cache_dir)
    for name in split_names(",".join(stylesheets)):
        try:
            ref = StylesheetRef.create(name, base_path)
        except UnsafePathError as exc:
            raise click.BadParameter(str(exc), param_hint="STYLESHEETS") from exc
        click.echo(f"{ref.name}: {_state(cache, ref)}")


@click.command("clear-cache")
@path_options
def clear_cache(base_path: str, cache_dir: str) -> None:
    """Delete every cached stylesheet."""
    removed = StylesheetCache(Path(base_path) / cache_dir).clear()
    click.echo(f"Removed {removed} cached file(s)")
