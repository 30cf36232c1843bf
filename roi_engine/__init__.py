"""
roi_engine - Investment value projection engine

Deterministic year-by-year liquidation values for four asset classes, for
display on a comparison chart.

Modules:
    - domain.models: Pydantic parameter records per asset class
    - domain.calculator: Projection functions and validators
    - application.services: Portfolio composition and export
    - core: Loan math, settings, logging and exceptions
"""

__version__ = "1.4.0"
