"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain.exceptions import BookingError, ConfigError, InvalidDayError
from ..domain.models import format_time_12h
from ..services.booking_service import BookingService

app = typer.Typer(
    name="slotbooker",
    help="View a day's appointment slots and book them",
    add_completion=False
)

console = Console()
err_console = Console(stderr=True)

SESSION_HELP = (
    "Commands:\n"
    "  book HH:MM     book a slot from the grid\n"
    "  admin H:MM     pre-book a slot by typed 24-hour time\n"
    "  day YYYY-MM-DD switch the selected day (clears bookings)\n"
    "  list           show the slot grid\n"
    "  help           show this help\n"
    "  quit           leave the session"
)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Appointment slot booking.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _load_config_or_exit(config_file: Optional[Path]) -> AppConfig:
    try:
        return load_config(config_file)
    except (FileNotFoundError, ConfigError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)


def _build_service(config: AppConfig, day: Optional[str]) -> BookingService:
    try:
        return BookingService(
            working_hours=config.working_hours.to_working_hours(),
            day=day,
            timezone=config.timezone,
        )
    except InvalidDayError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)


def _print_header(service: BookingService) -> None:
    wh = service.working_hours
    console.print(
        f"[bold cyan]Appointments for {service.day.format('dddd, MMMM D, YYYY')}[/bold cyan]"
    )
    console.print(
        f"Available from {format_time_12h(wh.start_hour % 24, 0)} to {format_time_12h(wh.end_hour % 24, 0)}"
        f" ({wh.slot_duration_minutes}-minute slots)\n"
    )


def _render_grid(service: BookingService) -> None:
    table = Table(
        title="Time Slots",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Slot", style="dim")
    table.add_column("Time", style="bold")
    table.add_column("Status")

    for slot, booked in service.grid():
        status = "[grey50]Booked[/grey50]" if booked else "[green]Available[/green]"
        table.add_row(slot.id, slot.display_label, status)

    console.print(table)

    summary = service.summary()
    if summary.booked_count:
        console.print(
            f"\n[bold]Booked Appointments ({summary.booked_count})[/bold]: "
            + ", ".join(summary.booked_labels),
            soft_wrap=True,
        )
    console.print(f"{summary.available_count} of {summary.total_slots} slot(s) available\n")


def _attempt(action, argument: str) -> None:
    """Run one booking call and print its outcome."""
    try:
        result = action(argument)
    except BookingError as e:
        console.print(f"[yellow]✗ {escape(str(e))}[/yellow]", soft_wrap=True)
        return

    console.print(f"[green]✓ {escape(result.message)}[/green]", soft_wrap=True)


@app.command()
def slots(
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    day: Annotated[Optional[str], typer.Option("--day", help="Day to show (YYYY-MM-DD). Defaults to today.")] = None,
    book: Annotated[Optional[List[str]], typer.Option("--book", "-b", help="Slot id to book (HH:MM). Repeatable.")] = None,
    admin: Annotated[Optional[List[str]], typer.Option("--admin", "-a", help="Admin pre-booking time (H:MM). Repeatable.")] = None,
):
    """
    Show the slot grid for a day, optionally booking slots first.

    Examples:

        slotbooker slots
        slotbooker slots --day 2024-11-25 --book 09:00 --book 10:30
        slotbooker slots --admin 14:00
    """
    config = _load_config_or_exit(config_file)
    service = _build_service(config, day)

    _print_header(service)

    # admin pre-bookings first, the way an admin prepares a day
    for raw_time in admin or []:
        _attempt(service.admin_book, raw_time)
    for slot_id in book or []:
        _attempt(service.book, slot_id)

    _render_grid(service)


@app.command()
def session(
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    day: Annotated[Optional[str], typer.Option("--day", help="Initial day (YYYY-MM-DD). Defaults to today.")] = None,
):
    """
    Interactive booking session. Bookings live only as long as the session.
    """
    config = _load_config_or_exit(config_file)
    service = _build_service(config, day)

    _print_header(service)
    console.print(SESSION_HELP + "\n")

    while True:
        try:
            line = typer.prompt("slotbooker", prompt_suffix="> ").strip()
        except (typer.Abort, EOFError):
            # end of input ends the session like quit
            console.print()
            break
        if not line:
            continue

        command, _, argument = line.partition(" ")
        command = command.lower()
        argument = argument.strip()

        if command in ("quit", "exit", "q"):
            break
        elif command == "help":
            console.print(SESSION_HELP)
        elif command == "list":
            _render_grid(service)
        elif command == "book":
            _attempt(service.book, argument)
        elif command == "admin":
            _attempt(service.admin_book, argument)
        elif command == "day":
            try:
                service.select_day(argument)
            except InvalidDayError as e:
                console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
                continue
            _print_header(service)
        else:
            console.print(f"[yellow]Unknown command: {escape(command)}[/yellow] (type 'help')")

    summary = service.summary()
    console.print(f"Session ended with {summary.booked_count} booking(s).")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]slotbooker[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
