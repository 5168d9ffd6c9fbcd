"""
CLI interface for the vacation pay calculator.
"""

import logging
import sys
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

import click

from vacation_calculator import __version__
from vacation_calculator.config.manager import ConfigManager
from vacation_calculator.core.holiday_calendar import HolidayCalendar
from vacation_calculator.core.pay_calculator import PayCalculator
from vacation_calculator.data.schemas import PayRequest
from vacation_calculator.output.exporter import ResultExporter
from vacation_calculator.output.formatter import ConsoleFormatter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse date string in various formats."""
    formats = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {date_str}. Use YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY"
    )


def parse_salary(salary_str: str) -> Decimal:
    """Parse a positive monetary amount without going through float."""
    try:
        salary = Decimal(salary_str.strip().replace(",", "."))
    except InvalidOperation:
        raise ValueError(f"Invalid salary: {salary_str}")
    if not salary.is_finite() or salary <= 0:
        raise ValueError("Average salary must be greater than 0")
    return salary


def setup_logging(level: str, verbose: bool = False) -> None:
    """Configure root logging for CLI commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@click.group()
@click.version_option(version=__version__, prog_name="vacation-calc")
def main():
    """Vacation Pay Calculator - Calculate vacation pay with fixed holidays excluded."""
    pass


@main.command()
@click.option(
    "--salary", "-s",
    required=True,
    help="Average monthly salary for the last 12 months",
)
@click.option(
    "--days", "-d",
    type=click.IntRange(min=1),
    help="Number of vacation days",
)
@click.option(
    "--start",
    help="Start date (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)",
)
@click.option(
    "--end",
    help="End date (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path (optional)",
)
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "csv", "both", "console"]),
    default=None,
    help="Output format (default: from config or console)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
def calculate(salary, days, start, end, output, format, config, verbose):
    """Calculate vacation pay for a day count or a date range."""
    formatter = ConsoleFormatter()

    try:
        cfg = ConfigManager(config).load_config()
        setup_logging(cfg.log_level, verbose)

        format = format or cfg.output_format
        average_salary = parse_salary(salary)

        start_date = parse_date(start) if start else None
        end_date = parse_date(end) if end else None

        request = PayRequest.from_fields(
            average_salary=average_salary,
            vacation_days=days,
            start_date=start_date,
            end_date=end_date,
        )

        calculator = PayCalculator(HolidayCalendar())
        result = calculator.calculate(request)

        if format == "console":
            formatter.print_result(request, result)
        else:
            exporter = ResultExporter(output_directory=cfg.output_directory)

            if format == "json":
                path = exporter.export_json(request, result, output)
                formatter.print_success(f"Result saved to {path}")
            elif format == "csv":
                path = exporter.export_csv(request, result, output)
                formatter.print_success(f"Result saved to {path}")
            else:  # both
                formatter.print_result(request, result)
                json_path, csv_path = exporter.export_both(request, result)
                formatter.print_success(f"Results saved to:\n  - {json_path}\n  - {csv_path}")

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception("Detailed error:")
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(1)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output CSV file path (optional)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def holidays(year, output, config):
    """List the fixed non-working holidays for a year."""
    formatter = ConsoleFormatter()

    try:
        if year is None:
            year = date.today().year

        cfg = ConfigManager(config).load_config()
        setup_logging(cfg.log_level)

        holiday_list = HolidayCalendar().holidays_for_year(year)
        formatter.print_holidays_for_year(year, holiday_list)

        if output:
            exporter = ResultExporter(output_directory=cfg.output_directory)
            path = exporter.export_holidays_csv(holiday_list, output)
            formatter.print_success(f"Holidays saved to {path}")

    except Exception as e:
        formatter.print_error(f"Error: {e}")
        sys.exit(1)


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8080)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        cfg = ConfigManager(config).load_config()
        setup_logging(cfg.log_level)

        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(
            "vacation_calculator.api:app",
            host=api_host,
            port=api_port,
            reload=False,
        )

    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
