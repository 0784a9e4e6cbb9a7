"""Options and helpers shared by several CLI commands."""

from __future__ import annotations

import importlib

import click

from stylepress.functions.registry import FunctionResolver, registry_from_module


def path_options(fn):
    """Add --path and --cache-dir to a command."""
    fn = click.option(
        "--cache-dir",
        default="_cache",
        show_default=True,
        help="Cache subdirectory, relative to --path",
    )(fn)
    fn = click.option(
        "--path",
        "base_path",
        default=".",
        show_default=True,
        type=click.Path(file_okay=False),
        help="Directory holding the stylesheets",
    )(fn)
    return fn


def parse_variables(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn ``("blue=#00F", ...)`` into a mapping. Later pairs win."""
    variables: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected NAME=VALUE, got {pair!r}", param_hint="--var")
        variables[name.strip()] = value
    return variables


def load_functions(spec: str | None) -> FunctionResolver | None:
    """Load host functions from ``module`` or ``module:attribute``.

    A bare module exposes its public top-level functions. ``module:attribute``
    must name an object with a ``resolve(name)`` method, such as a
    FunctionRegistry.
    """
    if not spec:
        return None
    module_name, _, attr = spec.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(str(exc), param_hint="--functions") from exc
    if not attr:
        return registry_from_module(module)
    resolver = getattr(module, attr, None)
    if resolver is None or not callable(getattr(resolver, "resolve", None)):
        raise click.BadParameter(
            f"{spec} is not a function registry", param_hint="--functions"
        )
    return resolver
