"""Record validation and numeric coercion.

Records are plain mappings from field name to value.  Every public function in
the package accepts any sequence of such mappings and never mutates them;
normalization returns fresh ``dict`` copies.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np

from .config import RecordSchema

Record = Mapping[str, Any]


def ensure_records(records: Iterable[Record]) -> list[Record]:
    """Return *records* as a list, rejecting inputs that are not record sequences."""
    if isinstance(records, (str, bytes, Mapping)):
        raise TypeError(
            f"expected a sequence of records, got {type(records).__name__}"
        )
    try:
        rows = list(records)
    except TypeError:
        raise TypeError(
            f"expected a sequence of records, got {type(records).__name__}"
        ) from None
    for row in rows:
        if not isinstance(row, Mapping):
            raise TypeError(f"record must be a mapping, got {type(row).__name__}")
    return rows


def to_number(value: Any) -> float | None:
    """Return *value* as a finite ``float`` or ``None`` when it is not numeric.

    Real numbers and numeric strings are accepted; booleans, blanks, ``NaN``
    and infinities are not.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def is_blank(value: Any) -> bool:
    """True for ``None``, ``NaN`` and empty or whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def numeric_values(records: Iterable[Record], field: str) -> np.ndarray:
    """Finite numeric values of *field*, in record order."""
    values = [to_number(row.get(field)) for row in ensure_records(records)]
    return np.array([v for v in values if v is not None], dtype=float)


def normalize_record(row: Record, schema: RecordSchema) -> dict[str, Any] | None:
    """Return a typed copy of *row*, or ``None`` when it fails validation."""
    if is_blank(row.get(schema.id_field)) or is_blank(row.get(schema.category_field)):
        return None

    record = dict(row)
    for name in schema.required_numeric:
        number = to_number(row.get(name))
        if number is None:
            return None
        record[name] = number
    for name in schema.optional_numeric:
        number = to_number(row.get(name))
        record[name] = 0.0 if number is None else number

    if any(record[name] <= 0 for name in schema.positive):
        return None
    return record


def normalize_records(raw: Iterable[Record], schema: RecordSchema) -> list[dict[str, Any]]:
    """Validate and coerce *raw* rows according to *schema*.

    Parameters
    ----------
    raw : Iterable[Mapping]
        Rows with string or numeric values, typically straight from a CSV
        reader.
    schema : RecordSchema
        Field requirements.  Rows missing the id or category, with a
        required numeric field that does not parse, or with a non-positive
        value in a ``positive`` field are dropped.  Unparseable optional
        numeric fields become ``0.0``.

    Returns
    -------
    list[dict]
        Normalized copies in input order; possibly shorter than *raw*.
    """
    normalized = []
    for row in ensure_records(raw):
        record = normalize_record(row, schema)
        if record is not None:
            normalized.append(record)
    return normalized
