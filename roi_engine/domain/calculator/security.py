"""Security (stock / fund) projection.

Deterministic annual compounding. The one-time fee comes off the initial
investment at year 0 and the expense ratio drags the return every year.
Reinvested dividends compound with the principal; otherwise they pile up
as cash that earns nothing.
"""

from __future__ import annotations

from roi_engine.domain.models.params import SecurityParams


def project_security(params: SecurityParams, years: int) -> list[float]:
    """Project end-of-year portfolio value for years 0..years.

    Args:
        params: Security parameters
        years: Number of years to project

    Returns:
        List of ``years + 1`` values, index 0 being the value after the fee
    """
    starting_value = params.initial_investment - params.one_time_fee
    values = [starting_value]

    growth_rate = params.annual_return - params.expense_ratio
    if params.reinvest_dividends:
        growth_rate += params.dividend_yield

    compounded = starting_value
    dividend_cash = 0.0

    for _ in range(1, years + 1):
        if not params.reinvest_dividends:
            # Paid on the balance held through the year, before this year's growth
            dividend_cash += compounded * params.dividend_yield
        compounded = compounded * (1 + growth_rate)
        values.append(compounded + dividend_cash)

    return values
