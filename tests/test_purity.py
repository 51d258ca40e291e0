import copy

import pytest

from dashstats import (
    aggregate,
    assign_bands,
    composite_score,
    correlation,
    count_by,
    department_metrics,
    filter_by,
    generate_insights,
    group_by,
    histogram,
    linear_regression,
    outliers,
    percentiles,
    regression_between,
    stats,
    with_work_life_balance,
)
from dashstats.config import AGE_BANDS

ROWS = [
    {"department": "IT", "age": 29, "salary": 90_000, "satisfaction": 9, "productivity": 90, "stress_level": 3},
    {"department": "Sales", "age": 41, "salary": "40000", "satisfaction": 4, "productivity": 50, "stress_level": 8},
    {"department": "IT", "age": 35, "salary": 80_000, "satisfaction": 8, "productivity": 85, "stress_level": 4},
    {"department": None, "age": "?", "salary": 1_000_000, "satisfaction": None, "productivity": 10, "stress_level": 2},
]

AGGREGATES = {"IT": {"satisfaction_avg": 8.5, "productivity_avg": 87.5, "stress_level_avg": 3.5}}

POINTS = [(0, 0.0), (1, 1.5), (2, None), (3, 2.5)]

CALLS = {
    "stats": (stats, ROWS, ("salary",)),
    "percentiles": (percentiles, ROWS, ("salary",)),
    "outliers": (outliers, ROWS, ("salary",)),
    "histogram": (histogram, ROWS, ("salary", 5)),
    "correlation": (correlation, ROWS, ("satisfaction", "productivity")),
    "regression_between": (regression_between, ROWS, ("satisfaction", "productivity")),
    "linear_regression": (linear_regression, POINTS, ()),
    "group_by": (group_by, ROWS, ("department",)),
    "filter_by": (filter_by, ROWS, ("department", "IT")),
    "count_by": (count_by, ROWS, ("department",)),
    "aggregate": (aggregate, ROWS, ("department", {"salary": "max"})),
    "assign_bands": (assign_bands, ROWS, ("age", AGE_BANDS, "age_group")),
    "composite_score": (composite_score, AGGREGATES, ()),
    "department_metrics": (department_metrics, ROWS, ()),
    "with_work_life_balance": (with_work_life_balance, ROWS, ()),
    "generate_insights": (generate_insights, ROWS, ()),
}


@pytest.mark.parametrize("name", sorted(CALLS))
def test_repeated_calls_match_and_leave_input_untouched(name) -> None:
    fn, data, args = CALLS[name]
    data = copy.deepcopy(data)
    snapshot = copy.deepcopy(data)

    first = fn(data, *args)
    second = fn(data, *args)

    assert first == second
    assert data == snapshot
