"""Command line reports over a CSV of employee or product records."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import typer
from loguru import logger

from . import log
from .aggregate import aggregate, composite_score
from .config import PERFORMANCE_COMPONENTS, SCHEMAS
from .ingest import load_records
from .insights import generate_insights

app = typer.Typer(help="Grouped statistics for dashboard datasets.")


def to_frame(
    aggregates: Mapping[Hashable, Mapping[str, Any]],
    key_name: str = "group",
) -> pd.DataFrame:
    """Return *aggregates* as a tidy DataFrame with one row per group."""
    rows = [{key_name: key, **metrics} for key, metrics in aggregates.items()]
    return pd.DataFrame(rows, columns=_columns(aggregates, key_name))


def _columns(aggregates: Mapping[Hashable, Mapping[str, Any]], key_name: str) -> list[str]:
    columns = [key_name]
    for metrics in aggregates.values():
        for name in metrics:
            if name not in columns:
                columns.append(name)
    return columns


def _load(csv_path: Path, schema_name: str) -> list[dict[str, Any]]:
    if schema_name not in SCHEMAS:
        raise typer.BadParameter(
            f"unknown schema {schema_name!r}; choose from {', '.join(SCHEMAS)}"
        )
    schema, aliases = SCHEMAS[schema_name]
    try:
        return load_records(csv_path, schema, aliases)
    except KeyError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def setup(
    log_level: str = typer.Option("INFO", "--log-level", help="Loguru level for stderr."),
) -> None:
    log.configure(log_level)


@app.command()
def summary(
    csv_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Input CSV."),
    schema_name: str = typer.Option("employee", "--schema", help="employee or product."),
    group: Optional[str] = typer.Option(
        None, "--group", help="Grouping field; defaults to the schema's category."
    ),
    op: str = typer.Option("avg", "--op", help="avg, sum, min or max."),
    out: Optional[Path] = typer.Option(None, "--out", help="Write CSV here instead of stdout."),
) -> None:
    """
    Aggregate every numeric field of the schema per group.
    """
    records = _load(csv_path, schema_name)
    schema, _ = SCHEMAS[schema_name]
    key = group or schema.category_field

    try:
        result = aggregate(records, key, {name: op for name in schema.numeric_fields})
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    avg_fields = {f"{c.field}_avg" for c in PERFORMANCE_COMPONENTS}
    if result and all(avg_fields <= set(metrics) for metrics in result.values()):
        result = composite_score(result)

    frame = to_frame(result, key_name=key)
    if out is None:
        typer.echo(frame.to_csv(index=False), nl=False)
    else:
        frame.to_csv(out, index=False)
        logger.success("wrote {} groups to {}", len(frame), out)


@app.command()
def insights(
    csv_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Employee CSV."),
) -> None:
    """
    Print the dashboard insight cards for an employee dataset.
    """
    records = _load(csv_path, "employee")
    for card in generate_insights(records):
        typer.echo(f"{card.title}: {card.value}")
        typer.echo(f"  {card.message}")
