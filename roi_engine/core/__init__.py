"""Core loan math, settings, logging and exceptions."""

from .exceptions import (
    EntryNotFoundError,
    ExportError,
    InvalidParameterError,
    RoiEngineError,
    UnknownAssetKindError,
)
from .financial import (
    calculate_annual_payment,
    calculate_monthly_payment,
    generate_annual_amortization_schedule,
)

__all__ = [
    "calculate_monthly_payment",
    "calculate_annual_payment",
    "generate_annual_amortization_schedule",
    # Exceptions
    "RoiEngineError",
    "UnknownAssetKindError",
    "InvalidParameterError",
    "EntryNotFoundError",
    "ExportError",
]
