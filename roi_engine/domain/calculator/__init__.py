"""Projection and validation functions, one set per asset class."""

from .fixed_income import project_fixed_income
from .precious_metal import project_precious_metal
from .rental import RentalYear, project_rental, project_rental_breakdown
from .security import project_security
from .validation import (
    validate_fixed_income_params,
    validate_params,
    validate_precious_metal_params,
    validate_rental_params,
    validate_security_params,
)

__all__ = [
    "project_security",
    "project_rental",
    "project_rental_breakdown",
    "project_precious_metal",
    "project_fixed_income",
    "RentalYear",
    "validate_params",
    "validate_security_params",
    "validate_rental_params",
    "validate_precious_metal_params",
    "validate_fixed_income_params",
]
