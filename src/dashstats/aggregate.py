"""Per-group aggregation and derived scores.

:func:`aggregate` reduces each group produced by
:func:`dashstats.grouping.group_by` with the reducers registered in
:data:`dashstats.operations.OPERATIONS`.  The remaining helpers build the
department, geographic and work-life figures shown on the employee dashboard.
"""

from __future__ import annotations

import inspect
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Any, Dict, Union

import numpy as np

from .config import PERFORMANCE_COMPONENTS, CompositeComponent
from .grouping import group_by
from .operations import OPERATIONS, Operation
from .records import Record, ensure_records, numeric_values, to_number

AggregateResult = Dict[str, Union[int, float, None]]


def _run_operation(op: Operation, values: np.ndarray, empty_extremum: float | None) -> Any:
    """Execute the reducer of *op*, passing ``empty`` where it is accepted."""
    fn = OPERATIONS[op]
    if "empty" in inspect.signature(fn).parameters:
        return fn(values, empty=empty_extremum)
    return fn(values)


def aggregate(
    records: Iterable[Record],
    key_field: str,
    operations: Mapping[str, str | Operation],
    *,
    empty_extremum: float | None = 0.0,
) -> dict[Hashable, AggregateResult]:
    """Group *records* by *key_field* and reduce selected fields per group.

    Parameters
    ----------
    records:
        Records to aggregate.
    key_field:
        Categorical grouping field.
    operations:
        Field name to operation (``"avg"``, ``"sum"``, ``"min"``, ``"max"``
        or an :class:`~dashstats.operations.Operation`).
    empty_extremum:
        Value of ``min``/``max`` for a group without numeric values.  The
        default ``0.0`` matches the legacy dashboard output; ``None`` marks
        the absence explicitly.

    Returns
    -------
    dict
        Group key to ``{"count": n, "<field>_<op>": value, ...}``.
        Non-numeric values are ignored by every operation.
    """
    ops = {name: Operation.parse(op) for name, op in operations.items()}

    result: dict[Hashable, AggregateResult] = {}
    for key, group in group_by(records, key_field).items():
        row: AggregateResult = {"count": len(group)}
        for name, op in ops.items():
            values = numeric_values(group, name)
            row[f"{name}_{op.value}"] = _run_operation(op, values, empty_extremum)
        result[key] = row
    return result


def rescale(value: float, component: CompositeComponent) -> float:
    """Map *value* from the component's ``[low, high]`` range onto ``0-100``."""
    span = component.high - component.low
    if span == 0:
        raise ValueError(f"component {component.field!r} has an empty range")
    score = (value - component.low) / span * 100.0
    return 100.0 - score if component.invert else score


def composite_score(
    aggregates: Mapping[Hashable, Mapping[str, Any]],
    components: Sequence[CompositeComponent] = PERFORMANCE_COMPONENTS,
    name: str = "performance_score",
) -> dict[Hashable, AggregateResult]:
    """Add a weighted 0-100 score built from per-group averages.

    Each component reads ``<field>_avg`` from the group, rescales it with
    :func:`rescale` and contributes proportionally to its ``weight``.  The
    input mapping is left untouched; new group dicts are returned.
    """
    if not components:
        raise ValueError("at least one component is required")
    weights = np.array([c.weight for c in components], dtype=float)
    if np.any(weights < 0) or weights.sum() == 0:
        raise ValueError("component weights must be non-negative and not all zero")

    out: dict[Hashable, AggregateResult] = {}
    for key, metrics in aggregates.items():
        scores = np.array(
            [rescale(float(metrics.get(f"{c.field}_avg") or 0.0), c) for c in components]
        )
        row = dict(metrics)
        row[name] = float(np.dot(weights, scores) / weights.sum())
        out[key] = row
    return out


def department_metrics(
    records: Iterable[Record],
    department_field: str = "department",
) -> dict[Hashable, AggregateResult]:
    """Average pay, satisfaction, productivity, stress and tenure per department,
    plus the composite ``performance_score``."""
    departments = aggregate(
        records,
        department_field,
        {
            "salary": Operation.AVG,
            "satisfaction": Operation.AVG,
            "productivity": Operation.AVG,
            "stress_level": Operation.AVG,
            "experience_years": Operation.AVG,
        },
    )
    return composite_score(departments)


def geographic_metrics(
    records: Iterable[Record],
    zone_field: str = "zone",
    city_field: str = "city",
) -> dict[str, dict[Hashable, AggregateResult]]:
    rows = ensure_records(records)
    zones = aggregate(
        rows,
        zone_field,
        {"salary": "avg", "satisfaction": "avg", "productivity": "avg"},
    )
    cities = aggregate(rows, city_field, {"salary": "avg", "satisfaction": "avg"})
    return {"zones": zones, "cities": cities}


def work_life_balance_score(record: Record) -> float:
    """Score from 100 down, penalising overwork, little exercise or sleep and high stress.

    Missing or non-numeric inputs incur no penalty.  The result is clamped to
    ``[0, 100]``.
    """
    hours = to_number(record.get("weekly_hours"))
    exercise = to_number(record.get("exercise_hours"))
    sleep = to_number(record.get("sleep_hours"))
    stress = to_number(record.get("stress_level"))

    score = 100.0
    if hours is not None and hours > 45:
        score -= (hours - 45) * 2
    if exercise is not None and exercise < 3:
        score -= (3 - exercise) * 5
    if sleep is not None and sleep < 7:
        score -= (7 - sleep) * 10
    if stress is not None and stress > 7:
        score -= (stress - 7) * 5
    return float(np.clip(score, 0.0, 100.0))


def with_work_life_balance(
    records: Iterable[Record],
    target: str = "work_life_balance_score",
) -> list[dict[str, Any]]:
    """Copies of *records* carrying their :func:`work_life_balance_score`."""
    return [{**row, target: work_life_balance_score(row)} for row in ensure_records(records)]
