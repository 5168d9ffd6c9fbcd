"""
Data models for the vacation pay calculator using Pydantic.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vacation_calculator.exceptions import ModeConflictError


class ByDayCount(BaseModel):
    """Vacation length given directly as a number of days."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["days"] = "days"
    days: int = Field(..., gt=0, description="Number of vacation days")


class ByDateRange(BaseModel):
    """Vacation given as an inclusive calendar date range."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["dates"] = "dates"
    start_date: date = Field(..., description="First day of the vacation")
    end_date: date = Field(..., description="Last day of the vacation")

    @property
    def calendar_days(self) -> int:
        """Total calendar days in the range, both ends included."""
        return (self.end_date - self.start_date).days + 1


PayPeriod = Annotated[Union[ByDayCount, ByDateRange], Field(discriminator="mode")]


class PayRequest(BaseModel):
    """Request model for a vacation pay calculation."""

    model_config = ConfigDict(frozen=True)

    average_salary: Decimal = Field(
        ..., gt=0, description="Average monthly salary for the last 12 months"
    )
    period: PayPeriod = Field(..., description="Vacation length: day count or date range")

    @classmethod
    def from_fields(
        cls,
        average_salary: Decimal,
        vacation_days: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> "PayRequest":
        """
        Build a request from the loose transport fields.

        Exactly one of ``vacation_days`` or the ``start_date``/``end_date``
        pair must be given.

        Raises:
            ModeConflictError: If neither or both selection modes are present.
        """
        has_days = vacation_days is not None
        has_dates = start_date is not None and end_date is not None
        if has_days == has_dates:
            raise ModeConflictError()

        if has_days:
            period: Union[ByDayCount, ByDateRange] = ByDayCount(days=vacation_days)
        else:
            period = ByDateRange(start_date=start_date, end_date=end_date)

        return cls(average_salary=average_salary, period=period)


class Holiday(BaseModel):
    """A fixed non-working holiday materialized for a given year."""

    holiday_date: date = Field(..., description="Date of the holiday")
    name: str = Field(..., description="English name of the holiday")


class PayResult(BaseModel):
    """Result of a vacation pay calculation."""

    model_config = ConfigDict(frozen=True)

    vacation_pay: Decimal = Field(..., description="Vacation pay, two fractional digits")
    payable_days: int = Field(..., ge=0, description="Days counted toward vacation pay")
    calculation_details: str = Field(..., description="Human-readable explanation")
    average_daily_earnings: Decimal = Field(..., description="Rounded average daily earnings")
    calendar_days: Optional[int] = Field(
        default=None, ge=1, description="Calendar days in the range (date mode only)"
    )
    holidays_count: int = Field(default=0, ge=0, description="Holidays excluded from the range")
    holidays: List[Holiday] = Field(
        default_factory=list, description="Holidays excluded from the range, in date order"
    )


class Config(BaseModel):
    """Configuration for the vacation pay calculator."""

    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8080, ge=1, le=65535, description="API server port")
    output_format: str = Field(
        default="console", description="Default result format: console, json, csv or both"
    )
    output_directory: str = Field(default="results", description="Directory for output files")
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Restrict the result format to the supported values."""
        if v not in ("console", "json", "csv", "both"):
            raise ValueError("output_format must be one of: console, json, csv, both")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level
