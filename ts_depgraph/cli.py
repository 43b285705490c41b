"""Click CLI with graph, cycles, and serve subcommands."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from ts_depgraph import __version__
from ts_depgraph.analysis.cycles import find_cycles
from ts_depgraph.analysis.graph_models import DependencyGraph
from ts_depgraph.config import AppConfig, load_config
from ts_depgraph.diagnostics import logging_sink
from ts_depgraph.errors import RootDirectoryError
from ts_depgraph.pipeline import build_graph


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build(
    root: Path | None,
    config_path: Path | None,
    exclude: tuple[str, ...],
    include: tuple[str, ...],
    extensions: tuple[str, ...],
    short_names: bool,
    verbose: bool,
) -> DependencyGraph:
    _setup_logging(verbose)
    app_config = load_config(config_path)
    if include:
        app_config.include_patterns = list(app_config.include_patterns) + list(include)
    if extensions:
        app_config.extensions = [e if e.startswith(".") else f".{e}" for e in extensions]

    config = app_config.to_graph_config(
        root_dir=root,
        extra_excludes=exclude,
        show_full_path=False if short_names else None,
        verbose=verbose,
    )
    try:
        return build_graph(config, sink=logging_sink)
    except RootDirectoryError as e:
        raise click.ClickException(str(e))


def _graph_options(f):
    f = click.option("--verbose", "-v", is_flag=True, help="Log resolution diagnostics")(f)
    f = click.option("--short-names", is_flag=True, help="Label nodes by file name only")(f)
    f = click.option("--ext", "extensions", multiple=True, help="File extension to scan (repeatable, ordered)")(f)
    f = click.option("--include", "-i", multiple=True, help="Regex a file must match (repeatable)")(f)
    f = click.option("--exclude", "-x", multiple=True, help="Regex of files to drop (repeatable)")(f)
    f = click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False, path_type=Path),
                     help="Config JSON (defaults to $DEPENDENCY_GRAPH_CONFIG or ./config.json)")(f)
    f = click.argument("root", type=click.Path(path_type=Path), required=False)(f)
    return f


@click.group()
@click.version_option(version=__version__)
def cli():
    """ts-depgraph: file-level dependency graphs for TypeScript/JavaScript."""


@cli.command()
@_graph_options
@click.option("--json", "as_json", is_flag=True, help="Print the graph as JSON")
def graph(root, config_path, exclude, include, extensions, short_names, verbose, as_json):
    """Build the dependency graph for ROOT and print it."""
    result = _build(root, config_path, exclude, include, extensions, short_names, verbose)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if not result.nodes:
        click.echo("No source files found.")
        return

    circular = {e.pair for e in result.circular_edges}
    for node in result.nodes.values():
        click.echo(click.style(node.name, fg="cyan"))
        for target in node.imports:
            marker = click.style(" (circular)", fg="red") if (node.id, target) in circular else ""
            click.echo(f"  -> {target}{marker}")
        for specifier in node.unresolved:
            click.echo(click.style(f"  ?? {specifier}", dim=True))

    click.echo(
        f"\n{len(result.nodes)} file(s), {len(result.edges)} dependenc"
        f"{'y' if len(result.edges) == 1 else 'ies'}, {len(circular)} circular"
    )


@cli.command()
@_graph_options
@click.option("--fail-on-cycles", is_flag=True, help="Exit with status 1 when cycles exist")
def cycles(root, config_path, exclude, include, extensions, short_names, verbose, fail_on_cycles):
    """List import cycles under ROOT."""
    result = _build(root, config_path, exclude, include, extensions, short_names, verbose)
    found = find_cycles(result)

    if not found:
        click.echo("No circular dependencies found.")
        return

    click.echo(f"Found {len(found)} cycle(s):\n")
    for cycle in found:
        click.echo("  " + click.style(" -> ".join(cycle), fg="red"))
    click.echo(f"\n{len(result.circular_edges)} circular edge(s)")

    if fail_on_cycles:
        raise SystemExit(1)


@cli.command()
@click.argument("root", type=click.Path(path_type=Path), required=False)
@click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Config JSON (defaults to $DEPENDENCY_GRAPH_CONFIG or ./config.json)")
@click.option("--port", "-p", type=int, default=None, help="Port number (default from config)")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(root: Path | None, config_path: Path | None, port: int | None, host: str):
    """Start the graph web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'ts-depgraph[web]'"
        )

    from ts_depgraph.web import create_app

    _setup_logging(False)
    app_config: AppConfig = load_config(config_path)
    if root:
        app_config.default_root_dir = root.expanduser().resolve()
    port = port or app_config.port

    click.echo(f"Dependency graph server running at http://{host}:{port}")
    click.echo(f"Default directory: {app_config.default_root_dir}")
    uvicorn.run(create_app(app_config), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
