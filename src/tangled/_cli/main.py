import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from tangled import __version__
from tangled._graph import DependencyGraph
from tangled._parser import GraphInputError, parse_graph_from_file, parse_graph_from_stream
from tangled._render import OutputFormat, get_renderer

from .config import ConfigError, get_config

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)

STDIO_NAME = "-"


def _configure_logging(*, verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"tangled {__version__}")
        raise typer.Exit


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    return typer.Exit(code=1)


def _load_graph(graph_file: str | None) -> DependencyGraph:
    """Parse the graph from a file, or from standard input when no file is given."""
    try:
        if graph_file is None or graph_file == STDIO_NAME:
            logger.debug("Reading dependency graph from standard input")
            return parse_graph_from_stream(sys.stdin)
        return parse_graph_from_file(Path(graph_file))
    except (GraphInputError, OSError, UnicodeDecodeError) as e:
        raise _fail(f"failed to parse graph file: {e}") from e


@app.command()
def render(  # noqa: PLR0913
    graph_file: Annotated[
        str | None,
        typer.Argument(help="Path to 'go mod graph' output (omit or use '-' to read standard input)"),
    ] = None,
    *,
    output_format: Annotated[
        str | None,
        typer.Option(
            "-f",
            "--format",
            help="Output format: text, html, mermaid, dot (aliases: plaintext, tree, d3, mmd, graphviz)",
        ),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option("-o", "--output", help="Output file (omit or use '-' to write standard output)"),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option("--title", help="Title of the HTML page (defaults to the input file name)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Enable verbose output"),
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit"),
    ] = None,
) -> None:
    """Visualize Go module dependency graphs.

    Parses the output of 'go mod graph' and renders it as a plaintext tree,
    an interactive HTML/D3 page, a MermaidJS flowchart or a GraphViz DOT digraph.

    Examples:
        go mod graph | tangled
        tangled deps.graph
        tangled -f html -o deps.html deps.graph
        tangled -f mermaid -o deps.mmd deps.graph

    """
    _configure_logging(verbose=verbose)

    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    # Resolve format: CLI > config > default
    if output_format is not None:
        try:
            effective_format = OutputFormat.parse(output_format)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="'-f' / '--format'") from e
    else:
        effective_format = config.format or OutputFormat.TEXT

    # Resolve output: CLI > config > standard output
    destination: Path | None
    if output is not None:
        destination = None if output == STDIO_NAME else Path(output)
    else:
        destination = config.output

    if title is None:
        title = config.title
    if title is None and graph_file is not None and graph_file != STDIO_NAME:
        title = Path(graph_file).name

    # Parse fully before touching the output so a bad input never leaves partial output
    graph = _load_graph(graph_file)
    logger.debug(f"Root module: {graph.root} ({len(graph)} dependencies, {len(graph.all_modules())} modules)")

    renderer = get_renderer(effective_format, title=title)
    logger.debug(f"Rendering {effective_format} output to {destination or 'standard output'}")

    if destination is None:
        try:
            renderer.render(graph, sys.stdout)
        except OSError as e:
            raise _fail(f"failed to write standard output: {e}") from e
        return

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8") as f:
            renderer.render(graph, f)
    except OSError as e:
        raise _fail(f"failed to write {destination}: {e}") from e

    err_console.print(f"[green]✓ Generated {effective_format} output in {escape(str(destination))}[/green]")


def main() -> None:
    app()
