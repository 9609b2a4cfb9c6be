"""Hourglass CLI - convert between duration strings and minutes."""

import logging
import sys
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hourglass import __version__
from hourglass.cli.utils import parse_format_option
from hourglass.domain.models import ClockFormat, UnitListFormat
from hourglass.infrastructure.config import ConfigManager
from hourglass.infrastructure.exceptions import HourglassError
from hourglass.infrastructure.logger import setup_logging
from hourglass.services.duration_service import DurationService

app = typer.Typer(
    name="hourglass",
    help="Convert between duration strings and minutes",
    no_args_is_help=True,
)

console = Console()


# ===== Helper Functions =====
def _get_service() -> DurationService:
    """Load configuration, set up logging and build the duration service."""
    config_manager = ConfigManager()
    setup_logging()
    config = config_manager.load_config()
    logging.getLogger().setLevel(config.log_level.upper())
    return config_manager.build_service()


def _parse_format(value: str | None) -> ClockFormat | UnitListFormat | None:
    if value is None:
        return None
    try:
        return parse_format_option(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _fail(error: HourglassError) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


# ===== Version =====
@app.command()
def version() -> None:
    """Show Hourglass version."""
    console.print(f"[bold]Hourglass[/bold] version [cyan]{__version__}[/cyan]")


# ===== Conversion =====
@app.command()
def parse(
    durations: list[str] = typer.Argument(..., help="Duration strings, e.g. '1h 30min'"),
    canonical: bool = typer.Option(
        False, "--canonical", help="Resolve units against min/h/d only"
    ),
) -> None:
    """Convert duration strings to minutes."""
    service = _get_service()
    for duration in durations:
        try:
            minutes = service.to_minutes(duration, canonical=canonical)
        except HourglassError as e:
            _fail(e)
        console.print(f"{escape(duration)}\t[cyan]{minutes}[/cyan]")


@app.command("format")
def format_minutes(
    minutes: float = typer.Argument(..., help="Duration in minutes"),
    fmt: str | None = typer.Option(
        None, "--format", "-f", help="Format tokens, e.g. 'h:mm' or 'd,h!,min!'"
    ),
    canonical: bool = typer.Option(
        False, "--canonical", help="Resolve units against min/h/d only"
    ),
) -> None:
    """Render minutes as a duration string."""
    service = _get_service()
    spec = _parse_format(fmt)
    try:
        console.print(service.from_minutes(minutes, spec, canonical=canonical))
    except HourglassError as e:
        _fail(e)


@app.command("sum")
def sum_durations(
    durations: list[str] = typer.Argument(..., help="Duration strings to add up"),
    fmt: str | None = typer.Option(
        None, "--format", "-f", help="Format tokens, e.g. 'h:mm' or 'd,h!,min!'"
    ),
) -> None:
    """Add up duration strings and show the total."""
    service = _get_service()
    spec = _parse_format(fmt)
    try:
        total = service.sum_durations(durations)
        console.print(service.from_minutes(total, spec))
    except HourglassError as e:
        _fail(e)


# ===== Inspection =====
@app.command()
def check(
    values: list[str] = typer.Argument(..., help="Strings to test"),
) -> None:
    """Show which strings are recognized durations."""
    service = _get_service()
    table = Table(title="Durations")
    table.add_column("Value", style="cyan")
    table.add_column("Duration")
    for value in values:
        ok = service.is_duration(value)
        table.add_row(escape(value), "[green]yes[/green]" if ok else "[red]no[/red]")
    console.print(table)


@app.command()
def classify(
    values: list[str] = typer.Argument(..., help="Duration strings"),
) -> None:
    """Report whether a batch uses h:mm, h:mm:ss or unit notation."""
    service = _get_service()
    console.print(service.classify_clock_style(values).value)


@app.command()
def units() -> None:
    """List the active unit table."""
    service = _get_service()
    table = Table(title="Units")
    table.add_column("Symbol", style="cyan")
    table.add_column("Minutes", justify="right")
    for unit in service.units.units:
        table.add_row(unit.symbol, f"{unit.modifier:g}")
    console.print(table)


# ===== Main Entry Point =====
def main() -> None:
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)
    except HourglassError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
