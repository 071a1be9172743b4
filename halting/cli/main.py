"""
Command-line interface for Halting.

Runs the halting problem demonstration and shows its configuration.
"""

import json
import logging
import sys
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from halting import __version__
from halting.config import HaltingConfig, get_config
from halting.core.registry import RegistryConfigurationError, build_registry
from halting.core.sink import CapturingSink, ConsoleSink, OutputSink
from halting.models.assessment import OutputStyle
from halting.services.assessment_service import AssessmentService, summarize_results

app = typer.Typer(
    name="halting",
    help="Halting - A demonstration of the Halting Problem",
    add_completion=False
)
console = Console()
logger = logging.getLogger(__name__)


def _load_config() -> HaltingConfig:
    try:
        return get_config()
    except ValidationError as e:
        console.print(f"[red]✗[/red] Invalid configuration: {e}")
        raise typer.Exit(1)


def _effective_config(
    grid_size: Optional[int] = None,
    distinguished_index: Optional[int] = None,
    assessor_test: Optional[bool] = None,
    no_assessor: bool = False,
) -> HaltingConfig:
    """
    Load configuration from the environment with command-line overrides applied.

    Validation runs once, on the merged values.
    """
    updates = {}
    if grid_size is not None:
        updates["grid_size"] = grid_size
    if distinguished_index is not None:
        updates["distinguished_index"] = distinguished_index
    if assessor_test is not None:
        updates["assessor_test"] = assessor_test
    if no_assessor:
        updates["include_assessor"] = False
    try:
        effective = HaltingConfig(**updates)
    except ValidationError as e:
        console.print(f"[red]✗[/red] Invalid configuration: {e}")
        raise typer.Exit(1)

    _configure_logging(effective)
    logger.debug(f"Effective configuration: {effective.model_dump()}")
    return effective


def _configure_logging(config: HaltingConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _wait_for_acknowledgement() -> None:
    """Block until the user presses Enter, unless stdin is not interactive."""
    if not sys.stdin.isatty():
        return
    typer.prompt("", default="", show_default=False, prompt_suffix="")


def _build_service(config: HaltingConfig, sink: OutputSink) -> AssessmentService:
    try:
        registry = build_registry(
            size=config.grid_size,
            distinguished_index=config.distinguished_index,
            include_assessor=config.include_assessor
        )
    except RegistryConfigurationError as e:
        console.print(f"[red]✗[/red] Invalid configuration: {e}")
        raise typer.Exit(1)
    return AssessmentService(registry, sink, assessor_test=config.assessor_test)


def _run_demonstration(
    config: HaltingConfig,
    output_format: str = "lines",
    pause: bool = True
) -> None:
    fmt = output_format.lower()
    if fmt not in {"lines", "json"}:
        raise typer.BadParameter("format must be either 'lines' or 'json'")

    if fmt == "json":
        service = _build_service(config, CapturingSink())
        results = service.run_grid()
        payload = {
            "grid_size": config.grid_size,
            "distinguished_index": config.distinguished_index,
            "assessor_test": config.assessor_test,
            "summary": summarize_results(results),
            "results": [result.to_dict() for result in results],
        }
        typer.echo(json.dumps(payload, indent=2, default=str))
        return

    sink = ConsoleSink(console=Console(width=config.buffer_width, highlight=False))
    service = _build_service(config, sink)
    service.run_grid()

    if pause:
        sink.write("Press any key to exit.", OutputStyle.PLAIN)
        _wait_for_acknowledgement()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """
    Simulate a halting assessor applied to a grid of computations.

    With no command, runs the demonstration using the configured defaults.
    """
    if ctx.invoked_subcommand is None:
        config = _load_config()
        _configure_logging(config)
        _run_demonstration(config)


@app.command()
def run(
    grid_size: Optional[int] = typer.Option(
        None, "--grid-size", "-n", min=1, help="Size of the computation / natural number range"
    ),
    distinguished_index: Optional[int] = typer.Option(
        None, "--distinguished-index", "-d", help="Registry slot holding the assessor"
    ),
    assessor_test: Optional[bool] = typer.Option(
        None,
        "--assessor-test/--no-assessor-test",
        help="Enable the specialised test for the self-referential cell",
    ),
    no_assessor: bool = typer.Option(
        False, "--no-assessor", help="Build the registry without the assessor entry"
    ),
    output_format: str = typer.Option(
        "lines", "--format", "-f", help="Output format: lines (default) or json"
    ),
    no_pause: bool = typer.Option(
        False, "--no-pause", help="Exit without waiting for a key press"
    ),
):
    """
    Run the demonstration, printing one line per assessment.
    """
    config = _effective_config(grid_size, distinguished_index, assessor_test, no_assessor)
    _run_demonstration(config, output_format=output_format, pause=not no_pause)


@app.command()
def grid(
    grid_size: Optional[int] = typer.Option(
        None, "--grid-size", "-n", min=1, help="Size of the computation / natural number range"
    ),
    distinguished_index: Optional[int] = typer.Option(
        None, "--distinguished-index", "-d", help="Registry slot holding the assessor"
    ),
    assessor_test: Optional[bool] = typer.Option(
        None,
        "--assessor-test/--no-assessor-test",
        help="Enable the specialised test for the self-referential cell",
    ),
    no_assessor: bool = typer.Option(
        False, "--no-assessor", help="Build the registry without the assessor entry"
    ),
):
    """
    Show the verdicts as a matrix of computation index by natural number.

    H marks cells where the assessor halts, L cells where it loops.
    The self-referential cell is starred.
    """
    config = _effective_config(grid_size, distinguished_index, assessor_test, no_assessor)
    service = _build_service(config, CapturingSink())
    results = service.run_grid()

    table = Table(title="Assessor Verdicts")
    table.add_column("q \\ n", style="bold")
    for n in range(1, config.grid_size + 1):
        table.add_column(str(n), justify="center")

    for q in range(1, config.grid_size + 1):
        row = results[(q - 1) * config.grid_size:q * config.grid_size]
        cells = []
        for result in row:
            mark = "H" if result.known_never_halts else "L"
            colour = "green" if result.known_never_halts else "cyan"
            if result.self_referential:
                mark += "*"
            cells.append(f"[{colour}]{mark}[/{colour}]")
        table.add_row(str(q), *cells)

    console.print(table)

    summary = summarize_results(results)
    console.print(
        f"{summary['known_never_halts']} known never to halt, "
        f"{summary['not_known']} not known, of {summary['total']} assessments."
    )
    for label in summary["self_referential"]:
        console.print(f"Self-referential cell: [bold]{label}[/bold]")


@app.command()
def config():
    """Show current configuration."""
    config = _load_config()

    table = Table(title="Halting Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Grid Size", str(config.grid_size))
    table.add_row("Distinguished Index", str(config.distinguished_index))
    table.add_row("Include Assessor", str(config.include_assessor))
    table.add_row("Assessor Test", str(config.assessor_test))
    table.add_row("Log Level", config.log_level)
    table.add_row("Buffer Width", str(config.buffer_width))

    console.print(table)


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold blue]Halting[/bold blue] v{__version__}")
    console.print("A demonstration of the Halting Problem")


if __name__ == "__main__":
    app()
