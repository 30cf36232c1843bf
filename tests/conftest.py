"""Pytest fixtures for roi_engine tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from roi_engine.core.settings import get_settings  # noqa: E402
from roi_engine.domain.models import (  # noqa: E402
    CompoundingMethod,
    FixedIncomeParams,
    PreciousMetalParams,
    RentalPropertyParams,
    SecurityParams,
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; drop the cache so monkeypatched env vars apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def security_params() -> SecurityParams:
    """Plain compounding security with no fees or dividends."""
    return SecurityParams(
        name="Index Fund",
        initial_investment=10000,
        annual_return=0.07,
        time_horizon=30,
        expense_ratio=0.0,
        one_time_fee=0.0,
        dividend_yield=0.0,
        reinvest_dividends=True,
    )


@pytest.fixture
def rental_params() -> RentalPropertyParams:
    """Leveraged rental with expenses zeroed so cash flow is rent minus mortgage."""
    return RentalPropertyParams(
        name="Duplex",
        purchase_price=300000,
        down_payment=60000,
        mortgage_rate=0.06,
        mortgage_duration=30,
        monthly_rental_income=2000,
        annual_appreciation=0.03,
        time_horizon=30,
        maintenance_cost_percent=0.0,
        insurance_cost=0.0,
        property_tax_rate=0.0,
        vacancy_rate=0.0,
        selling_cost_percent=0.0,
    )


@pytest.fixture
def metal_params() -> PreciousMetalParams:
    return PreciousMetalParams(
        name="Gold Bullion",
        initial_investment=10000,
        annual_price_increase=0.05,
        time_horizon=10,
        transaction_fee_percent=0.0,
    )


@pytest.fixture
def fixed_income_params() -> FixedIncomeParams:
    return FixedIncomeParams(
        name="5-Year CD",
        principal=10000,
        annual_yield=0.05,
        maturity_years=5,
        compounding_method=CompoundingMethod.ANNUAL,
        reinvest_at_maturity=False,
        time_horizon=10,
    )
