"""
Tests for the FastAPI endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from vacation_calculator.api import app


@pytest.fixture
def client():
    """Create a test client for the API."""
    return TestClient(app)


class TestCalculateEndpoint:
    """Tests for GET /calculate."""

    def test_by_vacation_days(self, client):
        """Day-count mode returns the amount as a two-digit decimal string."""
        response = client.get("/calculate", params={"averageSalary": "100000", "vacationDays": 28})

        assert response.status_code == 200
        assert response.json() == {
            "vacationPay": "95563.16",
            "payableDays": 28,
            "calculationDetails": "Based on 28 vacation days",
        }

    def test_by_dates(self, client):
        """Date mode excludes fixed holidays."""
        response = client.get(
            "/calculate",
            params={"averageSalary": "100000", "startDate": "2024-05-01", "endDate": "2024-05-10"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["vacationPay"] == "27303.76"
        assert data["payableDays"] == 8
        assert "10 calendar days excluding 2 holiday(s)" in data["calculationDetails"]

    def test_zero_amount_keeps_scale(self, client):
        """A rounded-to-zero amount is still rendered with two digits."""
        response = client.get("/calculate", params={"averageSalary": "0.01", "vacationDays": 1})

        assert response.status_code == 200
        assert response.json()["vacationPay"] == "0.00"

    def test_large_salary(self, client):
        """Salaries wider than 28 digits are calculated, not rejected with 500."""
        response = client.get(
            "/calculate", params={"averageSalary": "293" + "0" * 27, "vacationDays": 28}
        )

        assert response.status_code == 200
        assert response.json()["vacationPay"] == "280000000000000000000000000000.00"

    def test_mode_conflict(self, client):
        """Days and dates together are rejected with 400."""
        response = client.get(
            "/calculate",
            params={
                "averageSalary": "100000",
                "vacationDays": 5,
                "startDate": "2024-06-01",
                "endDate": "2024-06-05",
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == 400
        assert body["message"] == "Either vacationDays or both startDate and endDate must be provided"
        assert body["path"] == "/calculate"

    def test_missing_mode(self, client):
        """Salary alone is rejected with 400."""
        response = client.get("/calculate", params={"averageSalary": "100000"})

        assert response.status_code == 400
        assert "Either vacationDays" in response.json()["message"]

    def test_reversed_dates(self, client):
        """Start after end is rejected with 400."""
        response = client.get(
            "/calculate",
            params={"averageSalary": "100000", "startDate": "2024-05-10", "endDate": "2024-05-01"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Start date must be before or equal to end date"

    def test_invalid_date_format(self, client):
        """An unparseable date is a field-level validation error."""
        response = client.get(
            "/calculate",
            params={"averageSalary": "100000", "startDate": "01.05.2024", "endDate": "2024-05-10"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert "startDate" in body["errors"]

    def test_non_positive_salary(self, client):
        """Salary must be greater than zero."""
        response = client.get("/calculate", params={"averageSalary": "0", "vacationDays": 5})

        assert response.status_code == 400
        assert "averageSalary" in response.json()["errors"]

    def test_missing_salary(self, client):
        """Salary is required."""
        response = client.get("/calculate", params={"vacationDays": 5})

        assert response.status_code == 400
        assert "averageSalary" in response.json()["errors"]


class TestHtmlForm:
    """Tests for the browser form."""

    def test_form_page(self, client):
        """The root page is an HTML form."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'name="averageSalary"' in response.text

    def test_view_result(self, client):
        """Empty fields are ignored and the result is rendered."""
        response = client.get(
            "/calculate/view",
            params={"averageSalary": "100000", "vacationDays": "28", "startDate": "", "endDate": ""},
        )

        assert response.status_code == 200
        assert "95563.16" in response.text
        assert "Based on 28 vacation days" in response.text

    def test_view_error(self, client):
        """Rejected input is shown on the page with a 400 status."""
        response = client.get(
            "/calculate/view",
            params={"averageSalary": "100000", "vacationDays": "", "startDate": "", "endDate": ""},
        )

        assert response.status_code == 400
        assert "Either vacationDays or both startDate and endDate must be provided" in response.text

    def test_view_bad_salary(self, client):
        """A non-numeric salary is reported without a server error."""
        response = client.get("/calculate/view", params={"averageSalary": "abc", "vacationDays": "3"})

        assert response.status_code == 400
        assert "Average salary must be a number" in response.text


class TestOtherEndpoints:
    """Tests for holiday listing and health check."""

    def test_holidays_for_year(self, client):
        """All fixed holidays of the year are listed."""
        response = client.get("/holidays/2025")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 14
        assert data[0] == {"date": "2025-01-01", "name": "New Year Holidays"}

    def test_holidays_year_out_of_range(self, client):
        """Years outside 1900-2100 are rejected."""
        response = client.get("/holidays/1800")

        assert response.status_code == 400

    def test_health(self, client):
        """Health check reports status and version."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "1.0.0"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
