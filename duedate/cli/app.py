"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Optional, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain.exceptions import DueDateError
from ..domain.models import STANDARD_CALENDAR
from ..services.due_date import DueDateService

app = typer.Typer(
    name="duedate",
    help="Calculate task due dates within working hours",
    add_completion=False
)

console = Console()

ISO_WEEKDAY_NAMES = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday"
}


def _load_config_or_exit(config_file: Optional[Path]) -> AppConfig:
    try:
        return load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True
    )


@app.command(context_settings={"ignore_unknown_options": True})
def calculate(
    start: Annotated[str, typer.Argument(help="Submit date, e.g. '2024-05-15 12:00' or '2024-05-28 2:12PM'")],
    turnaround: Annotated[int, typer.Argument(help="Turnaround time in work-hours")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./duedate.yaml")] = None,
):
    """
    Calculate the due date for a task.

    Examples:

        duedate calculate "2024-05-15 12:00" 40

        duedate calculate "2024-05-28 2:12PM" 16
    """
    config = _load_config_or_exit(config_file)
    _configure_logging(config)

    service = DueDateService()

    try:
        due_date = service.calculate_due_date(start, turnaround)
    except DueDateError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if config.show_weekday:
        weekday = ISO_WEEKDAY_NAMES[due_date.day_of_week]
        console.print(f"[bold green]Due date:[/bold green] {due_date} ({weekday})")
    else:
        console.print(f"[bold green]Due date:[/bold green] {due_date}")


@app.command()
def calendar():
    """
    Show the work calendar used for calculations.
    """
    work_calendar = STANDARD_CALENDAR

    table = Table(
        title="Work calendar",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Day", style="bold yellow")
    table.add_column("Working hours", style="dim")

    for iso_day, name in ISO_WEEKDAY_NAMES.items():
        if iso_day in work_calendar.work_weekdays:
            hours = (
                f"{work_calendar.start_time:%H:%M} - {work_calendar.end_time:%H:%M} "
                f"({work_calendar.hours_per_day}h)"
            )
        else:
            hours = "-"
        table.add_row(name, hours)

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]duedate[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
