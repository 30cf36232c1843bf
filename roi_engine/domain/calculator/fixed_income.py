"""Fixed-income projection (T-bills, notes, bonds, CDs).

Two interest regimes crossed with two maturity policies:

- simple, held:        principal * (1 + y * min(t, M))
- simple, rolled over: principal * (1 + y*M)^(t // M) * (1 + y * (t % M))
- annual, held:        principal * (1 + y)^min(t, M)
- annual, rolled over: principal * (1 + y)^t

Held instruments flatline once matured. Under annual compounding a
rollover at the same rate is indistinguishable from never maturing.
Powers go through numpy so a negative base with a fractional exponent
gives nan rather than a complex number.
"""

from __future__ import annotations

import numpy as np

from roi_engine.domain.models.params import CompoundingMethod, FixedIncomeParams


def _power(base: float, exponent: float) -> float:
    with np.errstate(invalid="ignore"):
        return float(np.power(float(base), float(exponent)))


def _simple_value(principal: float, rate: float, maturity: float, year: int, reinvest: bool) -> float:
    if maturity <= 0:
        return principal * (1 + rate * year)
    if not reinvest:
        return principal * (1 + rate * min(year, maturity))

    completed_cycles = year // maturity
    remainder = year % maturity
    cycle_multiplier = 1 + rate * maturity
    return principal * _power(cycle_multiplier, completed_cycles) * (1 + rate * remainder)


def _annual_value(principal: float, rate: float, maturity: float, year: int, reinvest: bool) -> float:
    if reinvest or maturity <= 0:
        return principal * _power(1 + rate, year)
    return principal * _power(1 + rate, min(year, maturity))


def project_fixed_income(params: FixedIncomeParams, years: int) -> list[float]:
    """Project instrument value for years 0..years.

    A non-positive maturity is treated as an instrument that never matures.
    """
    value_at = _simple_value if params.compounding_method == CompoundingMethod.SIMPLE else _annual_value

    values = [params.principal]
    for year in range(1, years + 1):
        values.append(
            value_at(
                params.principal,
                params.annual_yield,
                params.maturity_years,
                year,
                params.reinvest_at_maturity,
            )
        )
    return values
