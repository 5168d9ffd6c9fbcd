"""
Configuration loading for the vacation pay calculator.
"""

from vacation_calculator.config.manager import ConfigManager

__all__ = ["ConfigManager"]
