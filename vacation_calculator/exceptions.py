"""
Exception hierarchy for vacation pay calculation.

All errors are caller-input errors: deterministic and never retried.
They subclass ``ValueError`` so transports can map them to client errors.
"""

from typing import Optional

MODE_CONFLICT_MESSAGE = "Either vacationDays or both startDate and endDate must be provided"
DATE_ORDER_MESSAGE = "Start date must be before or equal to end date"


class VacationCalculatorError(ValueError):
    """Base class for all calculator errors."""

    default_message = "Invalid vacation pay input"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return self.args[0]


class VacationRequestError(VacationCalculatorError):
    """A pay request was rejected during validation."""


class ModeConflictError(VacationRequestError):
    """Neither or both of the day count and the date pair were supplied."""

    default_message = MODE_CONFLICT_MESSAGE


class InvalidDateOrderError(VacationRequestError):
    """The start date of a request falls after its end date."""

    default_message = DATE_ORDER_MESSAGE


class InvalidRangeError(VacationCalculatorError):
    """A holiday lookup was given a start date after its end date."""

    default_message = DATE_ORDER_MESSAGE
