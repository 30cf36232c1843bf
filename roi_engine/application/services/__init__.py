"""Application services."""

from .exporter import ResultExporter
from .portfolio import (
    COMBINED_NAME,
    ChartData,
    ChartSeries,
    IdGenerator,
    InvestmentEntry,
    Portfolio,
    annualized_return_pct,
    build_chart_data,
    combined_values,
    deflate,
    project_entry,
    to_frame,
)

__all__ = [
    "COMBINED_NAME",
    "ChartData",
    "ChartSeries",
    "IdGenerator",
    "InvestmentEntry",
    "Portfolio",
    "ResultExporter",
    "annualized_return_pct",
    "build_chart_data",
    "combined_values",
    "deflate",
    "project_entry",
    "to_frame",
]
