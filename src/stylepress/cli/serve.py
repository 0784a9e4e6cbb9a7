"""CLI command: stylepress serve -- serve compressed stylesheets over HTTP."""

from __future__ import annotations

import click

from stylepress.cli.options import load_functions, parse_variables, path_options
from stylepress.config import CompressionConfig


@click.command()
@path_options
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--cache/--no-cache", default=True, help="Read and write the cache")
@click.option("--var", "variables", multiple=True, metavar="NAME=VALUE", help="Bind a variable")
@click.option("--functions", "functions_spec", default=None, help="module or module:registry with host functions")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(
    base_path: str,
    cache_dir: str,
    host: str,
    port: int,
    cache: bool,
    variables: tuple[str, ...],
    functions_spec: str | None,
    debug: bool,
) -> None:
    """Start a web server answering ?load=a.css,b.css requests."""
    from stylepress.web.app import create_app

    config = CompressionConfig(base_path=base_path, cache_dir=cache_dir, caching=cache)
    app = create_app(
        config=config,
        functions=load_functions(functions_spec),
        variables=parse_variables(variables),
    )
    click.echo(f"Serving stylesheets from {base_path} on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
