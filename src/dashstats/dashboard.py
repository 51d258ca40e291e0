"""Dashboard state as an explicit value and the chart data derived from it.

A :class:`DashboardState` holds the loaded records and the active category
filter.  Selecting or resetting a category yields a new state, and
:func:`build_view` turns a state into everything the product dashboard
plots.  Rendering is left to the caller.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field, replace

from .aggregate import aggregate
from .correlation import paired_values
from .distribution import histogram
from .grouping import count_by, filter_by
from .records import Record, ensure_records
from .stats import HistogramBin


@dataclass(frozen=True)
class DashboardState:
    records: tuple[Record, ...]
    category_field: str = "main_category"
    active_category: Hashable | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", tuple(ensure_records(self.records)))

    def select(self, category: Hashable) -> DashboardState:
        return replace(self, active_category=category)

    def reset(self) -> DashboardState:
        return replace(self, active_category=None)

    def visible(self) -> list[Record]:
        """Records passing the active category filter."""
        return filter_by(self.records, self.category_field, self.active_category)


@dataclass(frozen=True)
class ViewConfig:
    """Field names read by :func:`build_view`."""

    measure: str = "discount_percentage"
    scatter_x: str = "rating"
    scatter_y: str = "rating_count"
    histogram_field: str = "rating"
    histogram_bins: int = 20
    histogram_range: tuple[float, float] | None = (1.0, 5.0)


@dataclass(frozen=True)
class DashboardView:
    title: str
    count: int
    category_counts: dict[Hashable, int]
    category_averages: dict[Hashable, float]
    scatter: list[tuple[float, float]] = field(default_factory=list)
    histogram: list[HistogramBin] = field(default_factory=list)


def build_view(state: DashboardState, config: ViewConfig = ViewConfig()) -> DashboardView:
    """Compute the chart data for *state*.

    Category counts always cover every record so the full category list stays
    selectable; every other figure uses only the visible records.
    """
    visible = state.visible()

    averages = aggregate(visible, state.category_field, {config.measure: "avg"})
    key = f"{config.measure}_avg"
    category_averages = dict(
        sorted(((k, float(v[key])) for k, v in averages.items()), key=lambda kv: -kv[1])
    )

    xs, ys = paired_values(visible, config.scatter_x, config.scatter_y)
    scatter = [(float(x), float(y)) for x, y in zip(xs, ys)]

    if state.active_category is None:
        title = "All Categories"
    else:
        title = f"Category: {state.active_category}"

    return DashboardView(
        title=title,
        count=len(visible),
        category_counts=count_by(state.records, state.category_field),
        category_averages=category_averages,
        scatter=scatter,
        histogram=histogram(
            visible,
            config.histogram_field,
            bins=config.histogram_bins,
            value_range=config.histogram_range,
        ),
    )
