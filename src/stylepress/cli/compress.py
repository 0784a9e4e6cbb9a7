"""CLI command: stylepress compress -- write compressed stylesheets to a file."""

from __future__ import annotations

import sys

import click

from stylepress.cli.options import load_functions, parse_variables, path_options
from stylepress.config import CompressionConfig, FunctionPolicy
from stylepress.errors import StylepressError
from stylepress.model.report import SheetStatus
from stylepress.pipeline.compression import CompressionPipeline


@click.command()
@click.argument("stylesheets", nargs=-1, required=True)
@path_options
@click.option("--cache/--no-cache", default=True, help="Read and write the cache")
@click.option("--var", "variables", multiple=True, metavar="NAME=VALUE", help="Bind a variable")
@click.option(
    "--delimiters",
    nargs=2,
    default=None,
    metavar="PREFIX SUFFIX",
    help="Wrap variable names with PREFIX/SUFFIX instead of a leading @",
)
@click.option("--sigil", default="@", show_default=True, help="Prefix marking inline function calls")
@click.option("--functions", "functions_spec", default=None, help="module or module:registry with host functions")
@click.option(
    "--on-unknown",
    type=click.Choice([p.value for p in FunctionPolicy]),
    default=FunctionPolicy.FAIL.value,
    show_default=True,
    help="What to do with calls to unregistered functions",
)
@click.option("--strict", is_flag=True, help="Fail when a stylesheet source is missing or unreadable")
@click.option("-o", "--output", type=click.File("w", encoding="utf-8"), default="-", help="Output file")
def compress(
    stylesheets: tuple[str, ...],
    base_path: str,
    cache_dir: str,
    cache: bool,
    variables: tuple[str, ...],
    delimiters: tuple[str, str] | None,
    sigil: str,
    functions_spec: str | None,
    on_unknown: str,
    strict: bool,
    output,
) -> None:
    """Compress STYLESHEETS (names or comma separated lists) in order."""
    names = [name for arg in stylesheets for name in arg.split(",")]
    config = CompressionConfig(
        base_path=base_path,
        cache_dir=cache_dir,
        caching=cache,
        function_sigil=sigil,
        function_policy=FunctionPolicy(on_unknown),
        strict=strict,
    )

    try:
        pipeline = CompressionPipeline(names, config=config, functions=load_functions(functions_spec))
        if delimiters:
            pipeline.set_delimiters(*delimiters)
        pipeline.bind(parse_variables(variables))
        text = pipeline.parse()
    except StylepressError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    output.write(text)

    report = pipeline.last_report
    for outcome in report.outcomes:
        line = f"  {outcome.name}: {outcome.status.value}"
        if outcome.ratio is not None:
            line += f" ({outcome.ratio}%)"
        if outcome.error:
            line += f" - {outcome.error}"
        click.echo(line, err=True)

    if report.by_status(SheetStatus.FAILED) or report.by_status(SheetStatus.SKIPPED):
        sys.exit(1)
