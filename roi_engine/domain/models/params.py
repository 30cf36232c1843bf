"""Investment parameter records.

One flat, immutable record per asset class. Records hold types only: bounds
are checked by ``roi_engine.domain.calculator.validation`` so that an
out-of-range value can still be built, projected and reported field by field.

Field names are snake_case; camelCase aliases (``initialInvestment``) are
accepted so payloads coming from a web client validate as-is.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class AssetKind(str, Enum):
    """Closed set of supported asset classes."""

    SECURITY = "security"
    RENTAL_PROPERTY = "rental-property"
    PRECIOUS_METAL = "precious-metal"
    FIXED_INCOME = "fixed-income"

    @property
    def label(self) -> str:
        """Human readable name used for default entry names."""
        return {
            AssetKind.SECURITY: "Security",
            AssetKind.RENTAL_PROPERTY: "Rental Property",
            AssetKind.PRECIOUS_METAL: "Precious Metal",
            AssetKind.FIXED_INCOME: "Fixed Income",
        }[self]


class CompoundingMethod(str, Enum):
    """Interest regime for fixed-income instruments."""

    SIMPLE = "simple"
    ANNUAL = "annual"


class SecurityParams(BaseModel):
    """Stock, index fund or ETF held for the whole horizon."""

    model_config = _RECORD_CONFIG

    name: str = Field(default="", description="Display name")
    initial_investment: float = Field(..., description="Lump sum invested at year 0")
    annual_return: float = Field(..., description="Expected annual return (0.07 for 7%)")
    time_horizon: int | float = Field(..., description="Horizon in years")
    expense_ratio: float = Field(default=0.0, description="Annual expense ratio")
    one_time_fee: float = Field(default=0.0, description="Purchase fee deducted at year 0")
    dividend_yield: float = Field(default=0.0, description="Annual dividend yield")
    reinvest_dividends: bool = Field(default=True, description="Compound dividends into principal")


class RentalPropertyParams(BaseModel):
    """Mortgaged residential rental property.

    Rent and insurance are fixed dollar amounts; maintenance, property tax
    and selling costs scale with the current property value.
    """

    model_config = _RECORD_CONFIG

    name: str = Field(default="", description="Display name")
    purchase_price: float = Field(..., description="Total purchase price")
    down_payment: float = Field(..., description="Cash paid upfront")
    mortgage_rate: float = Field(..., description="Annual mortgage rate (0.065 for 6.5%)")
    mortgage_duration: int | float = Field(..., description="Mortgage term in years")
    monthly_rental_income: float = Field(default=0.0, description="Gross monthly rent")
    annual_appreciation: float = Field(default=0.0, description="Annual property value growth")
    time_horizon: int | float = Field(..., description="Horizon in years")
    maintenance_cost_percent: float = Field(default=0.0, description="Annual maintenance, share of value")
    insurance_cost: float = Field(default=0.0, description="Annual insurance premium")
    property_tax_rate: float = Field(default=0.0, description="Annual property tax, share of value")
    vacancy_rate: float = Field(default=0.0, description="Share of the year the unit is empty")
    selling_cost_percent: float = Field(default=0.0, description="Exit cost, share of value")


class PreciousMetalParams(BaseModel):
    """Physical gold, silver or platinum."""

    model_config = _RECORD_CONFIG

    name: str = Field(default="", description="Display name")
    initial_investment: float = Field(..., description="Purchase cost at year 0")
    annual_price_increase: float = Field(..., description="Annual spot price growth")
    time_horizon: int | float = Field(..., description="Horizon in years")
    transaction_fee_percent: float = Field(default=0.0, description="Dealer spread charged on sale")


class FixedIncomeParams(BaseModel):
    """Treasury bill, note, bond or CD."""

    model_config = _RECORD_CONFIG

    name: str = Field(default="", description="Display name")
    principal: float = Field(..., description="Amount invested at year 0")
    annual_yield: float = Field(..., description="Annual yield (0.045 for 4.5%)")
    maturity_years: int | float = Field(..., description="Term until maturity in years")
    compounding_method: CompoundingMethod = Field(default=CompoundingMethod.ANNUAL)
    reinvest_at_maturity: bool = Field(default=False, description="Roll matured value into a new term")
    time_horizon: int | float = Field(..., description="Horizon in years")


InvestmentParams = Union[SecurityParams, RentalPropertyParams, PreciousMetalParams, FixedIncomeParams]

PARAMS_BY_KIND: dict[AssetKind, type[BaseModel]] = {
    AssetKind.SECURITY: SecurityParams,
    AssetKind.RENTAL_PROPERTY: RentalPropertyParams,
    AssetKind.PRECIOUS_METAL: PreciousMetalParams,
    AssetKind.FIXED_INCOME: FixedIncomeParams,
}


# Starting values for a freshly added entry
DEFAULT_SECURITY_PARAMS = SecurityParams(
    initial_investment=10000,
    annual_return=0.07,
    time_horizon=30,
    expense_ratio=0.001,
    one_time_fee=0,
    dividend_yield=0,
    reinvest_dividends=True,
)

DEFAULT_RENTAL_PARAMS = RentalPropertyParams(
    purchase_price=300000,
    down_payment=60000,
    mortgage_rate=0.065,
    mortgage_duration=30,
    monthly_rental_income=2000,
    annual_appreciation=0.03,
    time_horizon=30,
    maintenance_cost_percent=0.01,
    insurance_cost=1500,
    property_tax_rate=0.012,
    vacancy_rate=0.05,
    selling_cost_percent=0.06,
)

DEFAULT_PRECIOUS_METAL_PARAMS = PreciousMetalParams(
    initial_investment=10000,
    annual_price_increase=0.05,
    time_horizon=30,
    transaction_fee_percent=0.02,
)

DEFAULT_FIXED_INCOME_PARAMS = FixedIncomeParams(
    principal=10000,
    annual_yield=0.045,
    maturity_years=5,
    compounding_method=CompoundingMethod.ANNUAL,
    reinvest_at_maturity=False,
    time_horizon=30,
)

DEFAULT_PARAMS: dict[AssetKind, InvestmentParams] = {
    AssetKind.SECURITY: DEFAULT_SECURITY_PARAMS,
    AssetKind.RENTAL_PROPERTY: DEFAULT_RENTAL_PARAMS,
    AssetKind.PRECIOUS_METAL: DEFAULT_PRECIOUS_METAL_PARAMS,
    AssetKind.FIXED_INCOME: DEFAULT_FIXED_INCOME_PARAMS,
}
