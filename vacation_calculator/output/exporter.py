"""
Export functionality for vacation pay results.
"""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from vacation_calculator.data.schemas import ByDateRange, Holiday, PayRequest, PayResult


class ResultExporter:
    """Exports vacation pay results to JSON and CSV files."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _resolve_path(self, output_path: Optional[str], prefix: str, extension: str) -> Path:
        """Use the given path or build a timestamped one in the output directory."""
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path

        output_dir = Path(self.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime(self.timestamp_format)
        return output_dir / f"{prefix}_{timestamp}.{extension}"

    def export_json(
        self, request: PayRequest, result: PayResult, output_path: Optional[str] = None
    ) -> str:
        """
        Export a result to a JSON file.

        Args:
            request: Request the result belongs to.
            result: PayResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "vacation_pay", "json")

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self.result_to_dict(request, result), f, indent=2, ensure_ascii=False)

        return str(file_path)

    def export_csv(
        self, request: PayRequest, result: PayResult, output_path: Optional[str] = None
    ) -> str:
        """
        Export a result to a CSV file.

        Args:
            request: Request the result belongs to.
            result: PayResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "vacation_pay", "csv")
        row = self._flatten(request, result)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "Average Salary",
                "Vacation Days",
                "Start Date",
                "End Date",
                "Calendar Days",
                "Holidays Count",
                "Payable Days",
                "Average Daily Earnings",
                "Vacation Pay",
                "Calculation Details",
            ])
            writer.writerow(row)

        return str(file_path)

    def export_both(self, request: PayRequest, result: PayResult) -> Tuple[str, str]:
        """
        Export a result to both JSON and CSV.

        Returns:
            Tuple of (json_path, csv_path).
        """
        json_path = self.export_json(request, result)
        csv_path = self.export_csv(request, result)
        return json_path, csv_path

    def export_holidays_csv(
        self, holidays: List[Holiday], output_path: Optional[str] = None
    ) -> str:
        """
        Export a holiday list to a CSV file.

        Args:
            holidays: List of holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "holidays", "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Date", "Name"])
            for holiday in holidays:
                writer.writerow([holiday.holiday_date.isoformat(), holiday.name])

        return str(file_path)

    def result_to_dict(self, request: PayRequest, result: PayResult) -> dict:
        """
        Convert a request/result pair to a JSON-serializable dictionary.

        Monetary amounts are kept as strings so the two fractional digits survive.
        """
        period = request.period
        if isinstance(period, ByDateRange):
            period_dict = {
                "mode": period.mode,
                "start_date": period.start_date.isoformat(),
                "end_date": period.end_date.isoformat(),
            }
        else:
            period_dict = {"mode": period.mode, "vacation_days": period.days}

        return {
            "request": {
                "average_salary": str(request.average_salary),
                "period": period_dict,
            },
            "calculation": {
                "average_daily_earnings": str(result.average_daily_earnings),
                "calendar_days": result.calendar_days,
                "holidays_count": result.holidays_count,
                "excluded_holidays": [
                    {"date": h.holiday_date.isoformat(), "name": h.name}
                    for h in result.holidays
                ],
                "payable_days": result.payable_days,
                "vacation_pay": str(result.vacation_pay),
                "calculation_details": result.calculation_details,
            },
            "metadata": {
                "exported_at": datetime.now().isoformat(),
            },
        }

    def _flatten(self, request: PayRequest, result: PayResult) -> list:
        period = request.period
        if isinstance(period, ByDateRange):
            days, start, end = "", period.start_date.isoformat(), period.end_date.isoformat()
        else:
            days, start, end = period.days, "", ""

        return [
            str(request.average_salary),
            days,
            start,
            end,
            "" if result.calendar_days is None else result.calendar_days,
            result.holidays_count,
            result.payable_days,
            str(result.average_daily_earnings),
            str(result.vacation_pay),
            result.calculation_details,
        ]
