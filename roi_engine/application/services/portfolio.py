"""Portfolio composition service.

Routes each investment entry to the projector for its asset kind, keeps
invalid entries off the chart, and derives the numbers a comparison chart
needs: per-entry series, a combined portfolio series, annualized returns
and inflation-adjusted values. Nothing here renders anything.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Sequence

import numpy as np
import pandas as pd

from roi_engine.core.exceptions import (
    EntryNotFoundError,
    InvalidParameterError,
    UnknownAssetKindError,
)
from roi_engine.core.logging import get_logger
from roi_engine.core.settings import get_settings
from roi_engine.domain.calculator import (
    project_fixed_income,
    project_precious_metal,
    project_rental,
    project_security,
    validate_params,
)
from roi_engine.domain.models import (
    DEFAULT_PARAMS,
    PARAMS_BY_KIND,
    AssetKind,
    FieldError,
    FixedIncomeParams,
    InvestmentParams,
    PreciousMetalParams,
    RentalPropertyParams,
    SecurityParams,
)

log = get_logger(__name__)

COMBINED_NAME = "Combined Portfolio"
UNTITLED_NAME = "Untitled"

Projector = Callable[[Any, int], list[float]]

PROJECTORS: dict[AssetKind, Projector] = {
    AssetKind.SECURITY: project_security,
    AssetKind.RENTAL_PROPERTY: project_rental,
    AssetKind.PRECIOUS_METAL: project_precious_metal,
    AssetKind.FIXED_INCOME: project_fixed_income,
}


def resolve_kind(kind: AssetKind | str) -> AssetKind:
    """Coerce a kind name ("rental-property") into an ``AssetKind``."""
    try:
        return AssetKind(kind)
    except ValueError:
        raise UnknownAssetKindError(kind) from None


class IdGenerator:
    """Process-scoped entry identifier source (``inv-1``, ``inv-2``, ...).

    Owned by whoever builds the portfolio, so two portfolios (or two test
    cases) never share a sequence.
    """

    def __init__(self, prefix: str = "inv", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


@dataclass(frozen=True)
class InvestmentEntry:
    """An identified parameter record of a known asset kind."""

    id: str
    kind: AssetKind
    params: InvestmentParams

    def __post_init__(self) -> None:
        kind = resolve_kind(self.kind)
        object.__setattr__(self, "kind", kind)
        expected = PARAMS_BY_KIND[kind]
        if not isinstance(self.params, expected):
            raise InvalidParameterError(
                "params",
                type(self.params).__name__,
                f"expected {expected.__name__} for {kind.value}",
            )

    @property
    def name(self) -> str:
        return self.params.name


def project_entry(entry: InvestmentEntry, years: int | None = None) -> list[float]:
    """Project an entry over ``years`` (defaults to its own horizon)."""
    projector = PROJECTORS.get(entry.kind)
    if projector is None:
        raise UnknownAssetKindError(entry.kind)
    horizon = int(entry.params.time_horizon) if years is None else years
    return projector(entry.params, horizon)


def initial_investment_of(entry: InvestmentEntry) -> float:
    """Cash put in at year 0, the base for annualized returns."""
    params = entry.params
    if isinstance(params, RentalPropertyParams):
        return params.down_payment
    if isinstance(params, FixedIncomeParams):
        return params.principal
    if isinstance(params, (SecurityParams, PreciousMetalParams)):
        return params.initial_investment
    raise UnknownAssetKindError(entry.kind)


@dataclass
class ChartSeries:
    """One line on the comparison chart."""

    name: str
    values: list[float]
    initial_investment: float


@dataclass
class ChartData:
    """All series plus the longest horizon among them."""

    series: list[ChartSeries] = field(default_factory=list)
    years: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "years": self.years,
            "series": [
                {"name": s.name, "initial_investment": s.initial_investment, "values": s.values}
                for s in self.series
            ],
        }


def build_chart_data(entries: Iterable[InvestmentEntry], max_horizon: int | None = None) -> ChartData:
    """Project every valid entry over its own horizon.

    Entries with any validation error are left out of the chart. The horizon
    cap defaults to the ``ROI_MAX_HORIZON_YEARS`` setting.
    """
    if max_horizon is None:
        max_horizon = get_settings().max_horizon_years

    series: list[ChartSeries] = []
    skipped: list[str] = []
    years = 0

    for entry in entries:
        if validate_params(entry.params, max_horizon):
            skipped.append(entry.id)
            continue
        horizon = int(entry.params.time_horizon)
        years = max(years, horizon)
        series.append(
            ChartSeries(
                name=entry.name.strip() or UNTITLED_NAME,
                values=project_entry(entry, horizon),
                initial_investment=initial_investment_of(entry),
            )
        )

    log.debug("chart_data_built", series=len(series), skipped=skipped, years=years)
    return ChartData(series=series, years=years)


def combined_values(series: Sequence[ChartSeries], years: int) -> list[float]:
    """Sum all series year by year over 0..years.

    A series that ends before ``years`` keeps contributing its last value.
    """
    total = np.zeros(years + 1)
    for s in series:
        if not s.values:
            continue
        values = np.asarray(s.values, dtype=float)
        if len(values) < years + 1:
            values = np.pad(values, (0, years + 1 - len(values)), mode="edge")
        total += values[: years + 1]
    return total.tolist()


def combined_initial_investment(series: Sequence[ChartSeries]) -> float:
    return float(sum(s.initial_investment for s in series))


def deflate(value: float, year: int, rate: float) -> float:
    """Express a year-``year`` value in year-0 money."""
    if year == 0:
        return value
    return value / (1 + rate) ** year


def annualized_return_pct(
    value: float,
    initial_investment: float,
    year: int,
    base_value: float | None = None,
    cap: float | None = None,
) -> float:
    """Compound annual growth rate in percent, clamped to [-100, cap].

    With no money put in, the rate is pinned to +cap or -cap depending on
    whether ``value`` ended above ``base_value`` (the year-0 value).
    ``year`` must be at least 1.
    """
    if cap is None:
        cap = get_settings().max_annualized_rate_pct

    if initial_investment <= 0:
        base = 0.0 if base_value is None else base_value
        return cap if value > base else -cap

    ratio = value / initial_investment
    if ratio <= 0:
        return -100.0

    rate = (ratio ** (1 / year) - 1) * 100
    return max(-100.0, min(rate, cap))


def to_frame(
    chart: ChartData,
    inflation_rate: float | None = None,
    annualized: bool = False,
    include_combined: bool = True,
) -> pd.DataFrame:
    """Tabulate the chart as a year-indexed DataFrame.

    Args:
        chart: Output of ``build_chart_data``
        inflation_rate: Deflate every value to year-0 money when set
        annualized: Show annualized return % instead of value (starts at year 1)
        include_combined: Add the combined portfolio column

    Returns:
        DataFrame with one column per series; a series shorter than the chart
        is NaN past its horizon.
    """
    start = 1 if annualized else 0

    def adjust(value: float, year: int) -> float:
        return deflate(value, year, inflation_rate) if inflation_rate is not None else value

    columns: dict[str, list[float]] = {}
    for s in chart.series:
        column = []
        for year in range(start, chart.years + 1):
            if year >= len(s.values):
                column.append(np.nan)
                continue
            adjusted = adjust(s.values[year], year)
            if annualized:
                column.append(
                    annualized_return_pct(adjusted, s.initial_investment, year, adjust(s.values[0], 0))
                )
            else:
                column.append(round(adjusted, 2))
        columns[s.name] = column

    if include_combined and chart.series:
        combined = combined_values(chart.series, chart.years)
        initial = combined_initial_investment(chart.series)
        column = []
        for year in range(start, chart.years + 1):
            adjusted = adjust(combined[year], year)
            if annualized:
                column.append(annualized_return_pct(adjusted, initial, year, adjust(combined[0], 0)))
            else:
                column.append(round(adjusted, 2))
        columns[COMBINED_NAME] = column

    frame = pd.DataFrame(columns, index=pd.RangeIndex(start, chart.years + 1, name="year"))
    return frame


class Portfolio:
    """Ordered collection of investment entries.

    Args:
        id_generator: Source of entry identifiers; a fresh ``IdGenerator``
            when omitted.
        max_horizon: Horizon cap used for validation (settings default).
    """

    def __init__(self, id_generator: Callable[[], str] | None = None, max_horizon: int | None = None):
        self._next_id = id_generator or IdGenerator()
        self.max_horizon = get_settings().max_horizon_years if max_horizon is None else max_horizon
        self._entries: dict[str, InvestmentEntry] = {}
        self._added_per_kind: dict[AssetKind, int] = {kind: 0 for kind in AssetKind}

    @property
    def entries(self) -> list[InvestmentEntry]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, kind: AssetKind | str, params: InvestmentParams | None = None) -> InvestmentEntry:
        """Add an entry, starting from the kind's defaults when no params are given.

        Default entries are named "<Kind> #n", n counting additions of that kind.
        """
        kind = resolve_kind(kind)
        self._added_per_kind[kind] += 1
        if params is None:
            params = DEFAULT_PARAMS[kind].model_copy(
                update={"name": f"{kind.label} #{self._added_per_kind[kind]}"}
            )

        entry = InvestmentEntry(id=self._next_id(), kind=kind, params=params)
        self._entries[entry.id] = entry
        log.info("entry_added", entry_id=entry.id, kind=kind.value, name=entry.name)
        return entry

    def get(self, entry_id: str) -> InvestmentEntry:
        try:
            return self._entries[entry_id]
        except KeyError:
            raise EntryNotFoundError(f"No entry with id '{entry_id}'") from None

    def update(self, entry_id: str, params: InvestmentParams) -> InvestmentEntry:
        """Replace an entry's parameters, keeping its id and kind."""
        current = self.get(entry_id)
        entry = InvestmentEntry(id=current.id, kind=current.kind, params=params)
        self._entries[entry_id] = entry
        log.debug("entry_updated", entry_id=entry_id)
        return entry

    def remove(self, entry_id: str) -> None:
        self.get(entry_id)
        del self._entries[entry_id]
        log.info("entry_removed", entry_id=entry_id)

    def errors(self, entry_id: str) -> list[FieldError]:
        return validate_params(self.get(entry_id).params, self.max_horizon)

    def valid_entries(self) -> list[InvestmentEntry]:
        return [e for e in self._entries.values() if not validate_params(e.params, self.max_horizon)]

    def duplicate_name_warning(self, entry_id: str) -> str | None:
        """Warn when another entry has the same name (trimmed, case-insensitive)."""
        entry = self.get(entry_id)
        name = entry.name.strip().lower()
        if not name:
            return None
        for other in self._entries.values():
            if other.id != entry_id and other.name.strip().lower() == name:
                return "Another investment has the same name"
        return None

    def chart_data(self) -> ChartData:
        return build_chart_data(self._entries.values(), self.max_horizon)
