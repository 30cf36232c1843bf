"""Data models for roi_engine."""

from .field_error import FieldError
from .params import (
    DEFAULT_FIXED_INCOME_PARAMS,
    DEFAULT_PARAMS,
    DEFAULT_PRECIOUS_METAL_PARAMS,
    DEFAULT_RENTAL_PARAMS,
    DEFAULT_SECURITY_PARAMS,
    PARAMS_BY_KIND,
    AssetKind,
    CompoundingMethod,
    FixedIncomeParams,
    InvestmentParams,
    PreciousMetalParams,
    RentalPropertyParams,
    SecurityParams,
)

__all__ = [
    "AssetKind",
    "CompoundingMethod",
    "FieldError",
    "FixedIncomeParams",
    "InvestmentParams",
    "PreciousMetalParams",
    "RentalPropertyParams",
    "SecurityParams",
    "PARAMS_BY_KIND",
    "DEFAULT_PARAMS",
    "DEFAULT_SECURITY_PARAMS",
    "DEFAULT_RENTAL_PARAMS",
    "DEFAULT_PRECIOUS_METAL_PARAMS",
    "DEFAULT_FIXED_INCOME_PARAMS",
]
