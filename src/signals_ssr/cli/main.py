"""Main CLI entry point."""

import importlib
import json
import logging
import os
import sys
from typing import Any, Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from signals_ssr import __version__
from signals_ssr.core.exceptions import RenderError

console = Console()

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_OPTIONS_TABLE_BOX = None
click.rich_click.STYLE_COMMANDS_TABLE_BOX = None
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.ERRORS_SUGGESTION = "Try running 'signals-ssr --help' for more information."

DEFAULT_TARGET = "signals_ssr.demo.app:App"


def import_target(target: str) -> Any:
    """Import a View or Component from string (e.g. 'components.app:App')."""
    if ":" not in target:
        raise click.BadParameter("Target must be in format 'module:attr'", param_hint="TARGET")

    module_name, attr = target.split(":", 1)

    # Allow importing modules from the current project
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(
            f"Could not import module '{module_name}': {e}", param_hint="TARGET"
        )

    try:
        return getattr(module, attr)
    except AttributeError:
        raise click.BadParameter(
            f"Attribute '{attr}' not found in module '{module_name}'",
            param_hint="TARGET",
        )


def _parse_props(raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Props must be valid JSON: {e}", param_hint="--props")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


@click.group(
    help=f"""
[bold white on cyan] signals-ssr [/] [bold cyan]v{__version__}[/] Server rendering with hydration markers.

Run [bold cyan]signals-ssr render[/] to print the HTML of a component.
Run [bold cyan]signals-ssr run[/] to serve it over HTTP.
"""
)
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    _setup_logging(verbose)


@cli.command()
@click.argument("target", required=False, default=DEFAULT_TARGET)
@click.option("--props", "props_json", default=None, help="Component props as a JSON object")
def render(target: str, props_json: Optional[str]) -> None:
    """Render a View or Component to HTML on stdout."""
    from signals_ssr.ssr.render import render_to_string

    obj = import_target(target)
    props = _parse_props(props_json)

    if target == DEFAULT_TARGET:
        from signals_ssr.demo.app import AppProps

        props = AppProps(**(props or {"client": False}))

    try:
        html = render_to_string(obj, props)
    except RenderError as e:
        console.print(f"[bold red]Render failed[/] ({e.kind.value}): {escape(e.message)}")
        sys.exit(1)

    click.echo(html)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=8080, type=int, help="Port to bind to")
@click.option("--env-file", default=None, help="Environment configuration file")
@click.option("--debug", is_flag=True, help="Enable Starlette debug mode")
def run(host: str, port: int, env_file: Optional[str], debug: bool) -> None:
    """Serve the server-rendered demo App using Uvicorn."""
    import uvicorn

    from signals_ssr.config import Settings
    from signals_ssr.server.app import create_app

    settings = Settings.from_env(env_file)
    app = create_app(settings=settings, debug=debug or None)

    console.print(
        f"🚀 Listening on [link=http://{host}:{port}]http://{host}:{port}[/link]"
    )
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    cli()
