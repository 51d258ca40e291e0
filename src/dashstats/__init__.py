"""Numbers behind an employee or product analytics dashboard.

Load a CSV with :func:`load_records`, then slice the resulting dicts with
:func:`group_by` and :func:`aggregate`, describe one field with :func:`stats`,
:func:`percentiles` or :func:`outliers`, and relate two fields with
:func:`correlation` or :func:`regression_between`.  Nothing here draws charts;
results are dicts, lists and frozen dataclasses a plotting layer can consume.
"""

from __future__ import annotations

from loguru import logger

from .aggregate import (
    aggregate,
    composite_score,
    department_metrics,
    geographic_metrics,
    work_life_balance_score,
    with_work_life_balance,
)
from .config import EMPLOYEE_SCHEMA, PRODUCT_SCHEMA, CompositeComponent, RecordSchema
from .correlation import correlation, linear_regression, regression_between
from .dashboard import DashboardState, DashboardView, build_view
from .distribution import histogram, outliers, percentiles, stats
from .grouping import MISSING_KEY, assign_bands, count_by, filter_by, group_by
from .ingest import load_records
from .insights import Insight, generate_insights
from .operations import Operation
from .records import normalize_records
from .stats import DistributionStats, HistogramBin, RegressionLine

logger.disable("dashstats")

__all__ = [
    "CompositeComponent",
    "DashboardState",
    "DashboardView",
    "DistributionStats",
    "EMPLOYEE_SCHEMA",
    "HistogramBin",
    "Insight",
    "MISSING_KEY",
    "Operation",
    "PRODUCT_SCHEMA",
    "RecordSchema",
    "RegressionLine",
    "aggregate",
    "assign_bands",
    "build_view",
    "composite_score",
    "correlation",
    "count_by",
    "department_metrics",
    "filter_by",
    "generate_insights",
    "geographic_metrics",
    "group_by",
    "histogram",
    "linear_regression",
    "load_records",
    "main",
    "normalize_records",
    "outliers",
    "percentiles",
    "regression_between",
    "stats",
    "with_work_life_balance",
    "work_life_balance_score",
]


def main() -> None:
    """Entry point for ``python -m dashstats`` used by the console script."""

    from .report import app

    app()
