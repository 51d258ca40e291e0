"""Distribution statistics over one numeric field.

All quantiles use the nearest-rank convention: they pick an existing
observation from the ascending-sorted values and never interpolate.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from .records import Record, ensure_records, numeric_values, to_number
from .stats import DistributionStats, HistogramBin

DEFAULT_PERCENTILES = (25, 50, 75, 95)


def stats(records: Iterable[Record], field: str) -> DistributionStats | None:
    """Summary statistics of *field*, or ``None`` without any numeric value."""
    values = np.sort(numeric_values(records, field))
    n = values.size
    if n == 0:
        return None

    lo = float(values[0])
    hi = float(values[-1])
    return DistributionStats(
        count=n,
        mean=float(np.mean(values)),
        median=float(values[n // 2]),
        min=lo,
        max=hi,
        std_dev=float(np.std(values, ddof=0)),
        range=hi - lo,
    )


def percentiles(
    records: Iterable[Record],
    field: str,
    ps: Sequence[float] = DEFAULT_PERCENTILES,
) -> dict[float, float]:
    """Nearest-rank percentiles of *field*.

    Parameters
    ----------
    records:
        Records to read *field* from.
    field:
        Numeric field.
    ps:
        Percentiles in ``[0, 100]``.

    Returns
    -------
    dict
        ``p`` to the value at index ``ceil(p / 100 * n) - 1`` of the sorted
        values, clamped to ``[0, n - 1]``.  Empty when *field* has no
        numeric value.
    """
    values = np.sort(numeric_values(records, field))
    n = values.size
    if n == 0:
        return {}

    result = {}
    for p in ps:
        idx = math.ceil((p / 100) * n) - 1
        result[p] = float(values[min(max(idx, 0), n - 1)])
    return result


def iqr_bounds(values: np.ndarray) -> tuple[float, float]:
    """Tukey fences ``[Q1 - 1.5 IQR, Q3 + 1.5 IQR]`` of non-empty *values*."""
    ordered = np.sort(values)
    n = ordered.size
    q1 = float(ordered[math.floor(n * 0.25)])
    q3 = float(ordered[math.floor(n * 0.75)])
    iqr = q3 - q1
    return q1 - 1.5 * iqr, q3 + 1.5 * iqr


def outliers(records: Iterable[Record], field: str) -> list[Record]:
    """Records whose *field* lies strictly outside the IQR fences."""
    rows = ensure_records(records)
    values = numeric_values(rows, field)
    if values.size == 0:
        return []

    lower, upper = iqr_bounds(values)
    flagged = []
    for row in rows:
        value = to_number(row.get(field))
        if value is not None and (value < lower or value > upper):
            flagged.append(row)
    return flagged


def histogram(
    records: Iterable[Record],
    field: str,
    bins: int = 20,
    value_range: tuple[float, float] | None = None,
) -> list[HistogramBin]:
    """Equal-width histogram of *field*; empty without numeric values."""
    values = numeric_values(records, field)
    if values.size == 0:
        return []
    counts, edges = np.histogram(values, bins=bins, range=value_range)
    return [
        HistogramBin(lower=float(edges[i]), upper=float(edges[i + 1]), count=int(counts[i]))
        for i in range(len(counts))
    ]
