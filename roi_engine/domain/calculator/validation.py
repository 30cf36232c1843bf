"""Parameter validation.

Each validator returns every violated bound as a ``FieldError`` (empty list
when the record is valid) and never raises. Validation is independent of the
projectors: an invalid record can still be projected, and the caller decides
whether to block, warn or display.

The horizon cap is a plain argument; the portfolio service resolves it from
settings before calling.
"""

from __future__ import annotations

from typing import Callable

from roi_engine.domain.models.field_error import FieldError
from roi_engine.domain.models.params import (
    FixedIncomeParams,
    InvestmentParams,
    PreciousMetalParams,
    RentalPropertyParams,
    SecurityParams,
)

MAX_HORIZON_YEARS = 100


class _Checker:
    """Accumulates field errors for one record."""

    def __init__(self) -> None:
        self.errors: list[FieldError] = []

    def add(self, field: str, message: str) -> None:
        self.errors.append(FieldError(field=field, message=message))

    def non_negative(self, field: str, value: float, label: str) -> None:
        if value < 0:
            self.add(field, f"{label} must be non-negative")

    def at_most_full(self, field: str, value: float, label: str) -> None:
        if value > 1:
            self.add(field, f"{label} cannot exceed 100%")

    def fraction(self, field: str, value: float, label: str) -> None:
        self.non_negative(field, value, label)
        self.at_most_full(field, value, label)

    def growth_rate(self, field: str, value: float, label: str) -> None:
        if value < -1:
            self.add(field, f"{label} cannot be less than -100%")

    def whole_positive(self, field: str, value: float, label: str) -> None:
        # Both messages may fire, e.g. for -1.5
        if value <= 0:
            self.add(field, f"{label} must be greater than 0")
        if not float(value).is_integer():
            self.add(field, f"{label} must be a whole number")

    def horizon(self, value: float, max_years: int) -> None:
        self.whole_positive("time_horizon", value, "Time horizon")
        if value > max_years:
            self.add("time_horizon", f"Time horizon cannot exceed {max_years} years")


def validate_security_params(params: SecurityParams, max_horizon: int = MAX_HORIZON_YEARS) -> list[FieldError]:
    """Validate security parameters."""
    check = _Checker()

    check.non_negative("initial_investment", params.initial_investment, "Initial investment")
    check.growth_rate("annual_return", params.annual_return, "Annual return")
    check.horizon(params.time_horizon, max_horizon)
    check.fraction("expense_ratio", params.expense_ratio, "Expense ratio")
    check.non_negative("one_time_fee", params.one_time_fee, "One-time fee")
    if params.one_time_fee > params.initial_investment:
        check.add("one_time_fee", "One-time fee cannot exceed initial investment")
    check.fraction("dividend_yield", params.dividend_yield, "Dividend yield")

    return check.errors


def validate_rental_params(params: RentalPropertyParams, max_horizon: int = MAX_HORIZON_YEARS) -> list[FieldError]:
    """Validate rental property parameters."""
    check = _Checker()

    check.non_negative("purchase_price", params.purchase_price, "Purchase price")
    check.non_negative("down_payment", params.down_payment, "Down payment")
    if params.down_payment > params.purchase_price:
        check.add("down_payment", "Down payment cannot exceed purchase price")
    check.fraction("mortgage_rate", params.mortgage_rate, "Mortgage rate")
    check.whole_positive("mortgage_duration", params.mortgage_duration, "Mortgage duration")
    check.non_negative("monthly_rental_income", params.monthly_rental_income, "Monthly rental income")
    check.growth_rate("annual_appreciation", params.annual_appreciation, "Annual appreciation")
    check.horizon(params.time_horizon, max_horizon)
    check.fraction("maintenance_cost_percent", params.maintenance_cost_percent, "Maintenance cost")
    check.non_negative("insurance_cost", params.insurance_cost, "Insurance cost")
    check.fraction("property_tax_rate", params.property_tax_rate, "Property tax rate")
    check.fraction("vacancy_rate", params.vacancy_rate, "Vacancy rate")
    check.fraction("selling_cost_percent", params.selling_cost_percent, "Selling cost")

    return check.errors


def validate_precious_metal_params(
    params: PreciousMetalParams, max_horizon: int = MAX_HORIZON_YEARS
) -> list[FieldError]:
    """Validate precious metal parameters."""
    check = _Checker()

    check.non_negative("initial_investment", params.initial_investment, "Initial investment")
    check.growth_rate("annual_price_increase", params.annual_price_increase, "Annual price increase")
    check.horizon(params.time_horizon, max_horizon)
    check.fraction("transaction_fee_percent", params.transaction_fee_percent, "Transaction fee")

    return check.errors


def validate_fixed_income_params(
    params: FixedIncomeParams, max_horizon: int = MAX_HORIZON_YEARS
) -> list[FieldError]:
    """Validate fixed-income parameters."""
    check = _Checker()

    check.non_negative("principal", params.principal, "Principal")
    check.growth_rate("annual_yield", params.annual_yield, "Annual yield")
    check.whole_positive("maturity_years", params.maturity_years, "Maturity")
    check.horizon(params.time_horizon, max_horizon)

    return check.errors


_VALIDATORS: dict[type, Callable[..., list[FieldError]]] = {
    SecurityParams: validate_security_params,
    RentalPropertyParams: validate_rental_params,
    PreciousMetalParams: validate_precious_metal_params,
    FixedIncomeParams: validate_fixed_income_params,
}


def validate_params(params: InvestmentParams, max_horizon: int = MAX_HORIZON_YEARS) -> list[FieldError]:
    """Validate any parameter record, dispatching on its type.

    An unrecognised record yields a single error on the ``params`` field.
    """
    validator = _VALIDATORS.get(type(params))
    if validator is None:
        return [FieldError(field="params", message=f"Unsupported parameter type {type(params).__name__}")]
    return validator(params, max_horizon)
