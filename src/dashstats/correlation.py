"""Pearson correlation and ordinary least-squares line fits."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .records import Record, ensure_records, to_number
from .stats import RegressionLine


def paired_values(
    records: Iterable[Record],
    field_a: str,
    field_b: str,
) -> tuple[np.ndarray, np.ndarray]:
    """Values of two fields from records where both are numeric."""
    xs, ys = [], []
    for row in ensure_records(records):
        a = to_number(row.get(field_a))
        b = to_number(row.get(field_b))
        if a is not None and b is not None:
            xs.append(a)
            ys.append(b)
    return np.array(xs, dtype=float), np.array(ys, dtype=float)


def correlation(records: Iterable[Record], field_a: str, field_b: str) -> float:
    """Pearson correlation of two fields in ``[-1, 1]``.

    Returns ``0.0`` for fewer than two complete pairs or when either field
    is constant.
    """
    x, y = paired_values(records, field_a, field_b)
    n = x.size
    if n < 2 or np.ptp(x) == 0 or np.ptp(y) == 0:
        return 0.0

    sum_x, sum_y = x.sum(), y.sum()
    num = np.dot(x, y) - sum_x * sum_y / n
    var_x = np.dot(x, x) - sum_x * sum_x / n
    var_y = np.dot(y, y) - sum_y * sum_y / n
    den = np.sqrt(var_x * var_y) if var_x > 0 and var_y > 0 else 0.0
    if den == 0:
        return 0.0
    return float(np.clip(num / den, -1.0, 1.0))


def linear_regression(points: Iterable[tuple[float, float]]) -> RegressionLine:
    """Closed-form least-squares fit through ``(x, y)`` *points*.

    Points with a non-numeric coordinate are dropped.  An invalid
    :class:`RegressionLine` (zero slope and intercept) is returned for fewer
    than two remaining points or when every ``x`` is equal.
    """
    xs, ys = [], []
    for px, py in points:
        a = to_number(px)
        b = to_number(py)
        if a is not None and b is not None:
            xs.append(a)
            ys.append(b)
    x = np.array(xs, dtype=float)
    y = np.array(ys, dtype=float)
    n = x.size
    if n < 2:
        return RegressionLine()

    sum_x, sum_y = x.sum(), y.sum()
    den = n * np.dot(x, x) - sum_x * sum_x
    if den == 0 or np.ptp(x) == 0:
        return RegressionLine()

    slope = (n * np.dot(x, y) - sum_x * sum_y) / den
    intercept = (sum_y - slope * sum_x) / n
    return RegressionLine(slope=float(slope), intercept=float(intercept), valid=True)


def regression_between(records: Iterable[Record], field_x: str, field_y: str) -> RegressionLine:
    x, y = paired_values(records, field_x, field_y)
    return linear_regression(zip(x, y))
