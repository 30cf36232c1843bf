"""Financial calculation functions.

Loan and amortization helpers for leveraged property projections.
Rates are decimals (0.065 for 6.5%).
"""

from __future__ import annotations

from typing import Any

import numpy_financial as npf


def calculate_monthly_payment(
    principal: float,
    annual_rate: float,
    duration_months: int,
) -> float:
    """Calculate the level monthly loan payment (principal + interest).

    Args:
        principal: Loan amount
        annual_rate: Annual interest rate as a decimal (e.g., 0.065)
        duration_months: Loan term in months

    Returns:
        Monthly payment amount
    """
    if principal <= 0 or duration_months <= 0:
        return 0.0

    monthly_rate = annual_rate / 12.0

    if monthly_rate == 0:
        return principal / duration_months

    return float(-npf.pmt(monthly_rate, duration_months, principal))


def calculate_annual_payment(
    principal: float,
    annual_rate: float,
    duration_years: int,
) -> float:
    """Annualized level payment: the monthly payment times twelve.

    The figure is fixed for the whole life of the loan.
    """
    return calculate_monthly_payment(principal, annual_rate, duration_years * 12) * 12


def generate_annual_amortization_schedule(
    principal: float,
    annual_rate: float,
    duration_years: int,
    years: int,
) -> dict[str, Any]:
    """Generate a year-by-year loan schedule over a projection horizon.

    The annual payment comes from the monthly level-payment formula, but
    interest is charged once a year on the opening balance. This mirrors
    how the rental projection books the loan, so the balance does not land
    on exactly zero at term; whatever remains simply stops being paid down
    once the term is over.

    Args:
        principal: Loan amount
        annual_rate: Annual interest rate as a decimal
        duration_years: Loan term in years
        years: Projection horizon in years

    Returns:
        Dict with keys:
        - year: List of years 1..years
        - payment: Payment made during each year
        - interest: Interest portion
        - principal: Principal portion
        - balance: Balance at the end of each year
        - annual_payment: Fixed annual payment while the loan is running

        A non-positive principal (down payment at or above the price) is
        carried unchanged as the balance and never paid.
    """
    annual_payment = calculate_annual_payment(principal, annual_rate, duration_years)

    payments: list[float] = []
    interests: list[float] = []
    principals: list[float] = []
    balances: list[float] = []

    balance = principal
    for year in range(1, years + 1):
        payment = 0.0
        interest = 0.0
        principal_paid = 0.0
        if year <= duration_years and principal > 0:
            payment = annual_payment
            interest = balance * annual_rate
            principal_paid = min(annual_payment - interest, balance)
            balance = max(balance - principal_paid, 0.0)

        payments.append(payment)
        interests.append(interest)
        principals.append(principal_paid)
        balances.append(balance)

    return {
        "year": list(range(1, years + 1)),
        "payment": payments,
        "interest": interests,
        "principal": principals,
        "balance": balances,
        "annual_payment": annual_payment,
    }
