"""
Output formatting and export functionality.
"""

from vacation_calculator.output.exporter import ResultExporter
from vacation_calculator.output.formatter import ConsoleFormatter

__all__ = ["ConsoleFormatter", "ResultExporter"]
