"""
FastAPI REST API for the vacation pay calculator.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from vacation_calculator import __version__
from vacation_calculator.config.manager import ConfigManager
from vacation_calculator.core.holiday_calendar import HolidayCalendar
from vacation_calculator.core.pay_calculator import PayCalculator
from vacation_calculator.data.schemas import PayRequest
from vacation_calculator.exceptions import VacationCalculatorError
from vacation_calculator.output.html import (
    render_error_page,
    render_form_page,
    render_result_page,
)

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
holiday_calendar = HolidayCalendar()
calculator = PayCalculator(holiday_calendar)


# API Models
class CalculateResponse(BaseModel):
    """Response model for vacation pay calculation."""

    vacationPay: Decimal
    payableDays: int
    calculationDetails: str


class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    date: date
    name: str


# FastAPI app
app = FastAPI(
    title="Vacation Pay Calculator API",
    description=(
        "Calculate vacation pay from the average monthly salary and either a number "
        "of vacation days or a date range with fixed non-working holidays excluded."
    ),
    version=__version__,
    contact={"name": "Vacation Calculator Team", "email": "support@example.com"},
    license_info={
        "name": "Apache 2.0",
        "url": "https://www.apache.org/licenses/LICENSE-2.0.html",
    },
)


def _error_body(request: Request, message: str, **extra) -> dict:
    body = {
        "status": 400,
        "message": message,
        "timestamp": datetime.now().isoformat(),
        "path": request.url.path,
    }
    body.update(extra)
    return body


@app.exception_handler(VacationCalculatorError)
async def handle_calculator_error(request: Request, exc: VacationCalculatorError):
    """Map rejected calculation requests to 400 responses."""
    logger.warning(f"Invalid vacation request: {exc.message}")
    return JSONResponse(status_code=400, content=_error_body(request, exc.message))


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Map query parameter parse and constraint failures to 400 responses."""
    logger.warning(f"Validation failed: {exc.errors()}")
    field_errors = {}
    for error in exc.errors():
        field = str(error["loc"][-1]) if error.get("loc") else "request"
        field_errors.setdefault(field, error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=400,
        content=_error_body(request, "Validation failed", errors=field_errors),
    )


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    """Hide unexpected failures behind a generic 500 response."""
    logger.exception("Unexpected error occurred")
    body = _error_body(request, "An unexpected error occurred. Please try again later.")
    body["status"] = 500
    return JSONResponse(status_code=500, content=body)


@app.get("/", response_class=HTMLResponse)
async def form():
    """HTML form for browser use."""
    return render_form_page()


@app.get("/calculate", response_model=CalculateResponse)
async def calculate_vacation_pay(
    average_salary: Decimal = Query(
        ..., alias="averageSalary", gt=0,
        description="Average monthly salary for the last 12 months",
    ),
    vacation_days: Optional[int] = Query(
        None, alias="vacationDays", gt=0, description="Number of vacation days",
    ),
    start_date: Optional[date] = Query(
        None, alias="startDate", description="Vacation start date (YYYY-MM-DD)",
    ),
    end_date: Optional[date] = Query(
        None, alias="endDate", description="Vacation end date (YYYY-MM-DD)",
    ),
):
    """
    Calculate vacation pay.

    Provide either:
    - vacationDays: number of vacation days
    - startDate and endDate: inclusive date range, fixed holidays are excluded

    Example: GET /calculate?averageSalary=100000&vacationDays=28
    """
    logger.info(
        f"Received vacation pay calculation request: averageSalary={average_salary}, "
        f"vacationDays={vacation_days}, startDate={start_date}, endDate={end_date}"
    )

    request = PayRequest.from_fields(average_salary, vacation_days, start_date, end_date)
    result = calculator.calculate(request)

    logger.info(f"Calculated vacation pay: {result.vacation_pay} for {result.payable_days} days")

    return CalculateResponse(
        vacationPay=result.vacation_pay,
        payableDays=result.payable_days,
        calculationDetails=result.calculation_details,
    )


@app.get("/calculate/view", response_class=HTMLResponse)
async def calculate_view(
    averageSalary: Optional[str] = None,
    vacationDays: Optional[str] = None,
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
):
    """Calculate vacation pay from the HTML form and render the result page."""
    form_values = {
        "salary": averageSalary,
        "days": vacationDays,
        "start": startDate,
        "end": endDate,
    }

    try:
        request = _parse_form(averageSalary, vacationDays, startDate, endDate)
        result = calculator.calculate(request)
    except ValueError as e:
        logger.warning(f"Invalid form submission: {e}")
        return HTMLResponse(render_error_page(str(e), **form_values), status_code=400)

    logger.info(f"Calculated vacation pay: {result.vacation_pay} for {result.payable_days} days")
    return render_result_page(result, **form_values)


@app.get("/holidays/{year}", response_model=List[HolidayResponse])
async def get_holidays(year: int):
    """
    Get all fixed non-working holidays for a year.

    Args:
        year: Year (e.g., 2024, 2025)
    """
    if year < 1900 or year > 2100:
        raise HTTPException(
            status_code=400,
            detail="Year must be between 1900 and 2100",
        )

    return [
        HolidayResponse(date=h.holiday_date, name=h.name)
        for h in holiday_calendar.holidays_for_year(year)
    ]


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


def _parse_form(
    salary: Optional[str],
    days: Optional[str],
    start: Optional[str],
    end: Optional[str],
) -> PayRequest:
    """
    Parse raw form strings into a PayRequest. Empty fields count as absent.

    Raises:
        ValueError: If a field cannot be parsed or the request is rejected.
    """
    salary = (salary or "").strip()
    if not salary:
        raise ValueError("Average salary is required")
    try:
        average_salary = Decimal(salary)
    except InvalidOperation:
        raise ValueError("Average salary must be a number")
    if not average_salary.is_finite() or average_salary <= 0:
        raise ValueError("Average salary must be greater than 0")

    vacation_days = None
    if days and days.strip():
        try:
            vacation_days = int(days.strip())
        except ValueError:
            raise ValueError("Vacation days must be a whole number")
        if vacation_days <= 0:
            raise ValueError("Vacation days must be positive")

    start_date = _parse_form_date("startDate", start)
    end_date = _parse_form_date("endDate", end)

    return PayRequest.from_fields(average_salary, vacation_days, start_date, end_date)


def _parse_form_date(name: str, value: Optional[str]) -> Optional[date]:
    if not value or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(f"Parameter '{name}' must be a valid date in YYYY-MM-DD format")
