"""Rental property projection.

Year-by-year model of a leveraged rental:

1. The property appreciates first; that year's expenses use the new value.
2. The fixed annual mortgage payment (monthly level payment x 12) is made
   while the loan runs; interest is charged on the opening balance.
3. Rent net of vacancy, minus the mortgage payment and expenses, lands in a
   cumulative cash pile that earns no return.
4. Equity is value minus remaining balance minus selling costs. Selling costs
   are charged every year: each point is a liquidation value.

Total value = equity + cumulative cash flow. Year 0 is the down payment.

No refinancing, income tax or tax deductions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from roi_engine.core.financial import generate_annual_amortization_schedule
from roi_engine.domain.models.params import RentalPropertyParams


@dataclass(frozen=True)
class RentalYear:
    """Single projected year of a rental property."""

    year: int
    property_value: float
    mortgage_balance: float
    mortgage_payment: float
    interest_paid: float
    principal_paid: float
    expenses: float
    rental_income: float
    net_cash_flow: float
    cumulative_cash_flow: float
    selling_costs: float
    equity: float

    @property
    def total_value(self) -> float:
        return self.equity + self.cumulative_cash_flow

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "property_value": self.property_value,
            "mortgage_balance": self.mortgage_balance,
            "mortgage_payment": self.mortgage_payment,
            "interest_paid": self.interest_paid,
            "principal_paid": self.principal_paid,
            "expenses": self.expenses,
            "rental_income": self.rental_income,
            "net_cash_flow": self.net_cash_flow,
            "cumulative_cash_flow": self.cumulative_cash_flow,
            "selling_costs": self.selling_costs,
            "equity": self.equity,
            "total_value": self.total_value,
        }


def project_rental_breakdown(params: RentalPropertyParams, years: int) -> list[RentalYear]:
    """Detailed projection for years 1..years.

    Args:
        params: Rental property parameters
        years: Number of years to project

    Returns:
        One ``RentalYear`` per projected year (year 0 is not included)
    """
    mortgage_amount = params.purchase_price - params.down_payment
    schedule = generate_annual_amortization_schedule(
        mortgage_amount,
        params.mortgage_rate,
        params.mortgage_duration,
        years,
    )

    annual_rent = params.monthly_rental_income * 12 * (1 - params.vacancy_rate)
    value_based_cost_rate = params.maintenance_cost_percent + params.property_tax_rate

    rows: list[RentalYear] = []
    property_value = params.purchase_price
    cumulative_cash_flow = 0.0

    for i in range(years):
        property_value = property_value * (1 + params.annual_appreciation)

        payment = schedule["payment"][i]
        balance = schedule["balance"][i]

        expenses = property_value * value_based_cost_rate + params.insurance_cost
        net_cash_flow = annual_rent - payment - expenses
        cumulative_cash_flow += net_cash_flow

        selling_costs = property_value * params.selling_cost_percent
        equity = property_value - balance - selling_costs

        rows.append(
            RentalYear(
                year=i + 1,
                property_value=property_value,
                mortgage_balance=balance,
                mortgage_payment=payment,
                interest_paid=schedule["interest"][i],
                principal_paid=schedule["principal"][i],
                expenses=expenses,
                rental_income=annual_rent,
                net_cash_flow=net_cash_flow,
                cumulative_cash_flow=cumulative_cash_flow,
                selling_costs=selling_costs,
                equity=equity,
            )
        )

    return rows


def project_rental(params: RentalPropertyParams, years: int) -> list[float]:
    """Project total value (equity + cumulative cash flow) for years 0..years."""
    values = [params.down_payment]
    values.extend(row.total_value for row in project_rental_breakdown(params, years))
    return values
