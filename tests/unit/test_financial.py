"""Unit tests for roi_engine.core.financial module."""

import pytest

from roi_engine.core.financial import (
    calculate_annual_payment,
    calculate_monthly_payment,
    generate_annual_amortization_schedule,
)


class TestCalculateMonthlyPayment:
    """Tests for calculate_monthly_payment function."""

    def test_standard_loan(self):
        """240k over 30 years at 6% is the textbook ~1438.92/month."""
        pmt = calculate_monthly_payment(240000, 0.06, 360)
        assert pmt == pytest.approx(1438.92, abs=0.01)

    def test_zero_principal(self):
        assert calculate_monthly_payment(0, 0.06, 360) == 0.0

    def test_negative_principal(self):
        """Down payment above price means there is no loan."""
        assert calculate_monthly_payment(-5000, 0.06, 360) == 0.0

    def test_zero_duration(self):
        """Zero-month term must not divide by zero."""
        assert calculate_monthly_payment(100000, 0.06, 0) == 0.0
        assert calculate_monthly_payment(100000, 0.0, 0) == 0.0

    def test_zero_rate(self):
        """Zero interest rate is straight-line repayment."""
        assert calculate_monthly_payment(120000, 0.0, 120) == 1000.0

    def test_one_month_loan(self):
        """1-month loan is principal plus one month of interest."""
        assert calculate_monthly_payment(10000, 0.12, 1) == pytest.approx(10100, abs=0.01)

    def test_short_term_costs_more(self):
        assert calculate_monthly_payment(200000, 0.035, 180) > calculate_monthly_payment(200000, 0.035, 300)


class TestCalculateAnnualPayment:
    def test_twelve_monthly_payments(self):
        monthly = calculate_monthly_payment(240000, 0.06, 360)
        assert calculate_annual_payment(240000, 0.06, 30) == pytest.approx(monthly * 12)

    def test_zero_rate(self):
        assert calculate_annual_payment(240000, 0.0, 30) == pytest.approx(8000.0)

    def test_zero_duration(self):
        assert calculate_annual_payment(240000, 0.0, 0) == 0.0


class TestGenerateAnnualAmortizationSchedule:
    def test_schedule_length_follows_horizon(self):
        schedule = generate_annual_amortization_schedule(240000, 0.06, 30, 10)
        assert schedule["year"] == list(range(1, 11))
        for key in ("payment", "interest", "principal", "balance"):
            assert len(schedule[key]) == 10

    def test_first_year_uses_annual_interest(self):
        schedule = generate_annual_amortization_schedule(240000, 0.06, 30, 1)
        annual_payment = calculate_annual_payment(240000, 0.06, 30)
        assert schedule["interest"][0] == pytest.approx(14400.0)
        assert schedule["principal"][0] == pytest.approx(annual_payment - 14400.0)
        assert schedule["balance"][0] == pytest.approx(240000 - (annual_payment - 14400.0))

    def test_payments_stop_after_term(self):
        schedule = generate_annual_amortization_schedule(100000, 0.0, 5, 8)
        assert schedule["payment"][:5] == [pytest.approx(20000.0)] * 5
        assert schedule["payment"][5:] == [0.0, 0.0, 0.0]
        assert schedule["balance"][4:] == [pytest.approx(0.0, abs=1e-6)] * 4

    def test_balance_never_negative(self):
        schedule = generate_annual_amortization_schedule(50000, 0.08, 10, 15)
        assert min(schedule["balance"]) >= 0.0

    def test_no_loan(self):
        schedule = generate_annual_amortization_schedule(0, 0.06, 30, 3)
        assert schedule["annual_payment"] == 0.0
        assert schedule["payment"] == [0.0, 0.0, 0.0]
        assert schedule["balance"] == [0, 0, 0]

    def test_zero_years(self):
        schedule = generate_annual_amortization_schedule(240000, 0.06, 30, 0)
        assert schedule["year"] == []
        assert schedule["balance"] == []
