"""Command-line interface for statecanvas."""

import sys

import click

from .output.formatter import format_snapshot, format_validation_result
from .schema.errors import SnapshotLoadError, SnapshotValidationError
from .utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _fail_on_load_error(e: Exception) -> None:
    """Report a load/schema error and exit with code 2."""
    if isinstance(e, SnapshotValidationError):
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
    else:
        click.echo(f"Error loading file: {e}", err=True)
    sys.exit(2)


@click.group()
@click.version_option(package_name="statecanvas")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Log level for diagnostics written to stderr",
)
def main(log_level: str):
    """statecanvas: finite-state automaton diagrams to TikZ."""
    configure_logging(level=log_level)


@main.command()
@click.argument("snapshot_file", type=click.Path(exists=True))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    help="YAML file with export parameters",
)
@click.option(
    "--initial/--no-initial",
    "mark_initial",
    default=None,
    help="Mark the first state as initial",
)
@click.option("--max-width", type=float, help="Target width in cm")
@click.option("--max-height", type=float, help="Target height in cm")
@click.option("--node-distance", type=float, help="TikZ node distance in cm")
@click.option("--shorten", type=float, help="Arrow shortening in pt")
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the code to a file instead of stdout",
)
def export(
    snapshot_file: str,
    config_file: str | None,
    mark_initial: bool | None,
    max_width: float | None,
    max_height: float | None,
    node_distance: float | None,
    shorten: float | None,
    output_file: str | None,
):
    """Export a diagram snapshot as TikZ code.

    SNAPSHOT_FILE is a YAML or JSON file with `nodes` and `edges`.

    Exit codes:
      0 - Success
      2 - File, schema or parameter error
    """
    from pathlib import Path

    from pydantic import ValidationError

    from .codegen.tikz import generate_tikz
    from .graph.diagram_graph import DiagramGraph
    from .schema.loader import load_export_params, load_snapshot
    from .schema.models import ExportParams

    try:
        snapshot = load_snapshot(snapshot_file)
        params = load_export_params(config_file) if config_file else ExportParams()
    except (SnapshotLoadError, SnapshotValidationError) as e:
        _fail_on_load_error(e)

    overrides = {
        "mark_initial": mark_initial,
        "max_width": max_width,
        "max_height": max_height,
        "node_distance": node_distance,
        "shorten": shorten,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        try:
            params = ExportParams.model_validate({**params.model_dump(), **overrides})
        except ValidationError as e:
            click.echo(f"Invalid export parameters: {e}", err=True)
            sys.exit(2)

    # the graph drops dangling or duplicate entries before export
    graph = DiagramGraph.from_snapshot(snapshot)
    code = generate_tikz(graph.nodes, graph.edges, params)

    if output_file:
        Path(output_file).write_text(code + "\n", encoding="utf-8")
        logger.info("export_written", path=output_file, nodes=len(graph))
        click.echo(f"Generated: {output_file}")
    else:
        click.echo(code)
    sys.exit(0)


@main.command()
@click.argument("snapshot_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def check(snapshot_file: str, output_format: str, strict: bool):
    """Check a diagram snapshot for structural problems.

    Exit codes:
      0 - Check passed
      1 - Errors found (or warnings, with --strict)
      2 - File or schema error
    """
    from .validators.runner import validate_snapshot_file

    try:
        result = validate_snapshot_file(snapshot_file)
    except (SnapshotLoadError, SnapshotValidationError) as e:
        _fail_on_load_error(e)

    click.echo(format_validation_result(result, output_format))  # type: ignore

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("snapshot_file")
@click.argument("events_file", type=click.Path(exists=True))
def replay(snapshot_file: str, events_file: str):
    """Replay recorded input events on a diagram and print the result.

    SNAPSHOT_FILE is the starting diagram, or '-' to start empty.
    EVENTS_FILE is a YAML list of events such as
    `{type: double_click, x: 100, y: 80}` or `{type: key, key: Enter}`.

    Exit codes:
      0 - Success
      2 - File or schema error
    """
    from .editor.replay import apply_events
    from .editor.session import EditorSession
    from .schema.loader import load_events, load_snapshot

    try:
        snapshot = None if snapshot_file == "-" else load_snapshot(snapshot_file)
        events = load_events(events_file)
    except (SnapshotLoadError, SnapshotValidationError) as e:
        _fail_on_load_error(e)

    session = apply_events(EditorSession.from_snapshot(snapshot), events)
    logger.info("replay_finished", events=len(events), mode=type(session.mode).__name__)

    click.echo(format_snapshot(session.graph.snapshot()), nl=False)
    sys.exit(0)


if __name__ == "__main__":
    main()
