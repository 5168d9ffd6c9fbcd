"""
HTML pages for the browser form of the API.
"""

from html import escape
from typing import Optional

from vacation_calculator.data.schemas import PayResult

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; max-width: 36em; margin: 2em auto; }}
label {{ display: block; margin-top: 0.8em; }}
.error {{ color: #b00020; }}
.amount {{ font-size: 1.6em; font-weight: bold; }}
</style>
</head>
<body>
<h1>{title}</h1>
{body}
</body>
</html>
"""

_FORM = """<form action="/calculate/view" method="get">
<label>Average monthly salary
<input type="number" name="averageSalary" step="0.01" min="0.01" required value="{salary}"></label>
<label>Vacation days
<input type="number" name="vacationDays" min="1" value="{days}"></label>
<p>or</p>
<label>Start date <input type="date" name="startDate" value="{start}"></label>
<label>End date <input type="date" name="endDate" value="{end}"></label>
<p><button type="submit">Calculate</button></p>
</form>
"""


def _form(
    salary: Optional[str] = None,
    days: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> str:
    return _FORM.format(
        salary=escape(salary or ""),
        days=escape(days or ""),
        start=escape(start or ""),
        end=escape(end or ""),
    )


def render_form_page() -> str:
    """Render the empty calculation form."""
    return _PAGE.format(title="Vacation Pay Calculator", body=_form())


def render_result_page(result: PayResult, **form_values: Optional[str]) -> str:
    """Render a calculation result above a pre-filled form."""
    body = (
        f'<p class="amount">{escape(str(result.vacation_pay))}</p>\n'
        f"<p>Payable days: {result.payable_days}</p>\n"
        f"<p>{escape(result.calculation_details)}</p>\n"
        + _form(**form_values)
    )
    return _PAGE.format(title="Vacation Pay", body=body)


def render_error_page(message: str, **form_values: Optional[str]) -> str:
    """Render an error message above a pre-filled form."""
    body = f'<p class="error">{escape(message)}</p>\n' + _form(**form_values)
    return _PAGE.format(title="Vacation Pay Calculator", body=body)
