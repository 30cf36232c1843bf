"""Export services for projection results.

Writes chart data to JSON and tabulated projections to CSV.
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Any

import pandas as pd

from roi_engine.application.services.portfolio import ChartData
from roi_engine.core.exceptions import ExportError
from roi_engine.core.logging import get_logger
from roi_engine.core.settings import get_settings
from roi_engine.domain.calculator import project_rental_breakdown
from roi_engine.domain.models import RentalPropertyParams

log = get_logger(__name__)


class ResultExporter:
    """Handles exporting of projection results."""

    def __init__(self, output_dir: str | None = None):
        """Initialize exporter.

        Args:
            output_dir: Directory where results will be saved
                (``ROI_EXPORT_DIR`` setting when omitted).
        """
        self.output_dir = output_dir or get_settings().export_dir
        self._ensure_dir()

    def _ensure_dir(self) -> None:
        if os.path.isdir(self.output_dir):
            return
        try:
            os.makedirs(self.output_dir)
            log.info("created_output_directory", path=self.output_dir)
        except OSError as e:
            log.error("output_directory_creation_failed", path=self.output_dir, error=str(e))
            raise ExportError(f"Cannot create export directory '{self.output_dir}': {e}") from e

    def _path(self, prefix: str, extension: str) -> str:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        return os.path.join(self.output_dir, f"{prefix}_{timestamp}.{extension}")

    def save_json(
        self,
        chart: ChartData,
        prefix: str = "projection",
        metadata: dict[str, Any] | None = None,
    ) -> str:
        """Save chart series to a JSON file.

        Args:
            chart: Projected series.
            prefix: Filename prefix.
            metadata: Extra metadata to include (e.g. the settings used).

        Returns:
            Path to the saved file.
        """
        filepath = self._path(prefix, "json")
        payload = {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                "count": len(chart.series),
                **(metadata or {}),
            },
            **chart.to_dict(),
        }

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            log.error("results_save_failed", path=filepath, error=str(e))
            raise ExportError(f"Cannot write '{filepath}': {e}") from e

        log.info("results_saved", path=filepath, count=len(chart.series))
        return filepath

    def save_csv(self, frame: pd.DataFrame, prefix: str = "projection") -> str:
        """Save a year-indexed projection table (see ``portfolio.to_frame``) to CSV."""
        filepath = self._path(prefix, "csv")
        try:
            frame.to_csv(filepath, encoding="utf-8")
        except OSError as e:
            log.error("results_save_failed", path=filepath, error=str(e))
            raise ExportError(f"Cannot write '{filepath}': {e}") from e

        log.info("table_saved", path=filepath, rows=len(frame))
        return filepath

    def save_rental_breakdown(
        self,
        params: RentalPropertyParams,
        years: int | None = None,
        prefix: str = "rental_breakdown",
    ) -> str:
        """Save the year-by-year rental cash flow and equity detail to CSV."""
        horizon = int(params.time_horizon) if years is None else years
        rows = project_rental_breakdown(params, horizon)
        frame = pd.DataFrame([row.to_dict() for row in rows])
        if not frame.empty:
            frame = frame.set_index("year")
        return self.save_csv(frame, prefix=prefix)
