"""Load CSV data into normalized records.

Column names are resolved once per file: each logical field maps to the first
of its accepted header names present in the file, compared case-insensitively.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import IO, Any

import pandas as pd
from loguru import logger

from .config import ColumnAliases, RecordSchema
from .records import normalize_records


def resolve_columns(header: Iterable[str], aliases: ColumnAliases) -> dict[str, str]:
    """Map logical field names to the matching column of *header*.

    Fields without any matching column are omitted.
    """
    lookup: dict[str, str] = {}
    for column in header:
        lookup.setdefault(str(column).strip().lower(), column)

    resolved = {}
    for logical, candidates in aliases.items():
        for candidate in candidates:
            column = lookup.get(candidate.strip().lower())
            if column is not None:
                resolved[logical] = column
                break
    return resolved


def frame_to_records(
    df: pd.DataFrame,
    schema: RecordSchema,
    aliases: ColumnAliases,
) -> list[dict[str, Any]]:
    """Rename *df* to logical field names and return raw (unnormalized) rows.

    Raises
    ------
    KeyError
        If a field the schema requires has no matching column.
    """
    resolved = resolve_columns(df.columns, aliases)
    for name in schema.required_fields:
        if name not in resolved and name not in df.columns:
            raise KeyError(f"no column found for required field {name!r}")

    renamed = df.rename(columns={src: logical for logical, src in resolved.items()})
    cleaned = renamed.astype(object).where(renamed.notna(), None)
    return cleaned.to_dict(orient="records")


def load_records(
    source: str | Path | IO[str],
    schema: RecordSchema,
    aliases: ColumnAliases,
) -> list[dict[str, Any]]:
    """Read a CSV file and return its valid, normalized records."""
    df = pd.read_csv(source, dtype=str, skipinitialspace=True)
    logger.debug("read {} rows, columns: {}", len(df), list(df.columns))

    raw = frame_to_records(df, schema, aliases)
    records = normalize_records(raw, schema)
    dropped = len(raw) - len(records)
    if dropped:
        logger.info("excluded {} of {} rows that failed validation", dropped, len(raw))
    logger.info("loaded {} records", len(records))
    return records
