"""Precious metal projection.

Constant annual price growth with no storage cost. Every projected year is
shown net of the dealer fee ("value if sold now"); year 0 is the purchase
cost and carries no fee.
"""

from __future__ import annotations

import numpy as np

from roi_engine.domain.models.params import PreciousMetalParams


def project_precious_metal(params: PreciousMetalParams, years: int) -> list[float]:
    """Project net liquidation value for years 0..years."""
    initial = params.initial_investment
    if years <= 0:
        return [initial]

    elapsed = np.arange(1, years + 1, dtype=float)
    gross = initial * np.power(1 + params.annual_price_increase, elapsed)
    net = gross * (1 - params.transaction_fee_percent)

    return [initial, *net.tolist()]
