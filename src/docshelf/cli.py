"""CLI interface for Docshelf.

Command-line tool for serving, checking and searching a documentation tree.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from docshelf.config import Config
from docshelf.core.errors import ConfigurationError, InvalidQueryError
from docshelf.core.types import URLPath

DOCS_URL_PREFIX = "/docs"

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docshelf.toml)",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def cli(verbose: bool) -> None:
    """Docshelf - Markdown documentation served from a directory."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@config_option
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
) -> None:
    """Start the documentation server."""
    from docshelf.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        source_dir=source_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    click.echo(f"Route mappings: {len(config.route_mapping)}")

    try:
        run_server(config)
    except ConfigurationError as e:
        _fail(str(e))


@cli.command()
@config_option
@click.option(
    "--route",
    "route_ids",
    multiple=True,
    help="Route name to check for overlapping patterns (repeatable)",
)
def check(config_path: Path | None, route_ids: tuple[str, ...]) -> None:
    """Validate the route mapping against the document tree."""
    from docshelf.core.routes import RouteMapping, validate_route_mapping

    config = _load_config(config_path)
    source_dir = config.docs.source_dir

    problems: list[str] = []
    if not source_dir.is_dir():
        problems.append(f"Document root {source_dir} is not a directory")
    problems.extend(validate_route_mapping(config.route_mapping, source_dir))

    if problems:
        for problem in problems:
            click.echo(click.style(f"  - {problem}", fg="red"), err=True)
        _fail(f"{len(problems)} configuration problem(s) found")

    if route_ids:
        mapping = RouteMapping(config.route_mapping, _url_for)
        for route_id, patterns in mapping.ambiguous_routes(route_ids).items():
            click.echo(
                click.style(
                    f"Warning: route '{route_id}' matches {len(patterns)} patterns: "
                    + ", ".join(patterns),
                    fg="yellow",
                ),
            )

    click.echo(
        click.style(
            f"Configuration OK ({len(config.route_mapping)} route mappings)",
            fg="green",
        ),
    )


@cli.command()
@click.argument("query")
@config_option
def search(query: str, config_path: Path | None) -> None:
    """Search the documentation for QUERY."""
    from docshelf.core.documents import DocumentFactory
    from docshelf.core.search import SearchEngine, validate_query

    config = _load_config(config_path)
    try:
        query = validate_query(query)
    except InvalidQueryError as e:
        _fail(str(e))

    engine = SearchEngine(DocumentFactory(config.docs.source_dir, _url_for))
    documents = engine.search(query)
    if not documents:
        click.echo("No documents found.")
        return

    for document in documents:
        click.echo(f"{document.title}\t{document.path}")


@cli.command("resolve-route")
@click.argument("route_id")
@config_option
def resolve_route(route_id: str, config_path: Path | None) -> None:
    """Print the documentation URI mapped to ROUTE_ID."""
    from docshelf.core.routes import RouteMapping

    config = _load_config(config_path)
    try:
        mapping = RouteMapping(config.route_mapping, _url_for)
    except ConfigurationError as e:
        _fail(str(e))

    uri = mapping.resolve_route(route_id)
    if uri is None:
        _fail(f"No documentation mapped for route '{route_id}'")

    click.echo(uri)


def _url_for(key: str) -> URLPath:
    """Format a path key the way the server's page route does."""
    return URLPath(f"{DOCS_URL_PREFIX}/{key}")


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (OSError, ValueError) as e:
        _fail(str(e))


def _fail(message: str) -> NoReturn:
    """Print an error and exit with status 1.

    Raises:
        SystemExit: Always
    """
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
