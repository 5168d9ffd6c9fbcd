"""
Console output formatting using Rich.
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vacation_calculator.data.schemas import ByDateRange, Holiday, PayRequest, PayResult


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize the console formatter.

        Args:
            console: Console to print to. A new one is created if omitted.
        """
        self.console = console or Console()

    def print_result(self, request: PayRequest, result: PayResult) -> None:
        """
        Print a vacation pay calculation result.

        Args:
            request: The request the result was calculated for.
            result: PayResult to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Vacation Pay Calculation[/bold blue]")
        self.console.print()

        input_table = Table(show_header=False, box=None)
        input_table.add_column("Label", style="cyan", width=24)
        input_table.add_column("Value", style="white")

        input_table.add_row("Average Salary:", f"{request.average_salary:,.2f}")
        period = request.period
        if isinstance(period, ByDateRange):
            input_table.add_row(
                "Period:",
                f"{period.start_date.strftime('%d.%m.%Y')} - {period.end_date.strftime('%d.%m.%Y')}",
            )
        else:
            input_table.add_row("Vacation Days:", str(period.days))

        self.console.print(Panel(input_table, title="[bold]Input[/bold]"))

        calc_table = Table(show_header=False, box=None)
        calc_table.add_column("Label", style="cyan", width=24)
        calc_table.add_column("Value", style="white", justify="right", width=16)

        calc_table.add_row("Average Daily Earnings:", f"{result.average_daily_earnings:,.2f}")
        if result.calendar_days is not None:
            calc_table.add_row("Calendar Days:", str(result.calendar_days))
            calc_table.add_row("Holidays:", f"- {result.holidays_count}")
        calc_table.add_row("Payable Days:", str(result.payable_days))
        calc_table.add_row("", "─" * 15)
        calc_table.add_row(
            Text("Vacation Pay:", style="bold green"),
            Text(f"{result.vacation_pay:,.2f}", style="bold green"),
        )

        self.console.print(Panel(calc_table, title="[bold]Calculation[/bold]"))
        self.console.print(f"[dim]{result.calculation_details}[/dim]")

        if result.holidays:
            self.print_holidays(result.holidays, title="Excluded Holidays")
        self.console.print()

    def print_holidays(self, holidays: List[Holiday], title: str = "Holidays") -> None:
        """
        Print a table of holidays.

        Args:
            holidays: List of holidays to display.
            title: Table title.
        """
        if not holidays:
            self.console.print("[dim]No holidays found for this period.[/dim]")
            return

        holiday_table = Table(title=f"[bold]{title}[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=12)
        holiday_table.add_column("Name", style="white")

        for holiday in holidays:
            holiday_table.add_row(
                holiday.holiday_date.strftime("%d.%m.%Y"),
                holiday.holiday_date.strftime("%A"),
                holiday.name,
            )

        self.console.print(holiday_table)

    def print_holidays_for_year(self, year: int, holidays: List[Holiday]) -> None:
        """Print all fixed holidays of a year."""
        self.console.print()
        self.console.rule(f"[bold blue]Holidays {year}[/bold blue]")
        self.console.print()
        self.print_holidays(holidays, title=f"Non-working Holidays {year}")
        self.console.print()

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
