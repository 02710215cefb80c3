"""CLI interface for patterndocs.

Serve the design-pattern browser and inspect its catalog and routing.
"""

import json
import logging
import sys
from pathlib import Path

import click

from patterndocs.config import Config
from patterndocs.core.catalog import DESIGN_PATTERNS
from patterndocs.core.dispatcher import View, match_route
from patterndocs.core.viewer import DIRECTION_PARAM, TOPIC_PARAM, NavigationSelection

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="patterndocs")
def cli() -> None:
    """patterndocs - browse design-pattern articles."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover patterndocs.toml)",
)
@click.option(
    "--root-dir",
    "-r",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation root containing assets/ (overrides config)",
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
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose (debug) logging",
)
@click.option(
    "--live-reload/--no-live-reload",
    default=None,
    help="Enable/disable live reload (overrides config, default: enabled)",
)
def serve(
    config_path: Path | None,
    root_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
    live_reload: bool | None,
) -> None:
    """Start the documentation server."""
    from patterndocs.server import run_server

    _configure_logging(verbose)

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        root_dir=root_dir,
        live_reload_enabled=live_reload,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Documentation root: {config.docs.root_dir}")
    if config.live_reload.enabled:
        click.echo("Live reload: enabled")
    else:
        click.echo("Live reload: disabled")

    run_server(config)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print the catalog as JSON")
def topics(as_json: bool) -> None:
    """List the design-pattern topics by category."""
    if as_json:
        data = {"categories": [category.to_dict() for category in DESIGN_PATTERNS]}
        click.echo(json.dumps(data, indent=2))
        return

    for category in DESIGN_PATTERNS:
        click.echo(click.style(category.name, bold=True))
        for pattern in category.patterns:
            click.echo(f"  {pattern.name:<26}{pattern.url}")


@cli.command()
@click.argument("url")
def resolve(url: str) -> None:
    """Show which view URL activates and what it would render.

    Example: patterndocs resolve "/observer?dir=rtl"
    """
    match = match_route(url)
    if match is None:
        click.echo(click.style(f"Error: no route matches {url}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"View: {match.view.value}")
    if match.view is View.CATALOG:
        click.echo(f"Categories: {len(DESIGN_PATTERNS)}")
        return

    selection = NavigationSelection(
        topic=match.path_params[TOPIC_PARAM],
        direction=match.query_params.get(DIRECTION_PARAM),
    )
    click.echo(f"Topic: {selection.topic}")
    click.echo(f"Document: {selection.document_path}")
    click.echo(f"Direction: {selection.direction if selection.direction is not None else '(none)'}")


if __name__ == "__main__":
    cli()
