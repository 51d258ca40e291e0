"""Insight cards summarising an employee record collection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass

from .aggregate import department_metrics, with_work_life_balance
from .correlation import correlation
from .distribution import percentiles
from .records import Record, ensure_records, numeric_values


@dataclass(frozen=True)
class Insight:
    """One headline figure with a short explanation."""

    kind: str
    title: str
    message: str
    value: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def format_currency(value: float) -> str:
    return f"${value:,.0f}"


def generate_insights(records: Iterable[Record]) -> list[Insight]:
    """Department, salary, work-life and correlation insights for *records*."""
    rows = ensure_records(records)
    if not rows:
        return []

    insights = []

    departments = department_metrics(rows)
    if departments:
        def score(key):
            return departments[key]["performance_score"]

        best = max(departments, key=score)
        worst = min(departments, key=score)
        insights.append(
            Insight(
                kind="department",
                title="Department Performance",
                message=f"{best} has the highest performance score, while {worst} needs attention.",
                value=f"{departments[best]['performance_score']:.1f}",
            )
        )

    salaries = numeric_values(rows, "salary")
    avg_salary = float(salaries.mean()) if salaries.size else 0.0
    p25 = percentiles(rows, "salary", (25,)).get(25, 0.0)
    insights.append(
        Insight(
            kind="salary",
            title="Salary Distribution",
            message=(
                f"Average salary is {format_currency(avg_salary)}. "
                f"25% earn below {format_currency(p25)}."
            ),
            value=format_currency(avg_salary),
        )
    )

    balance = numeric_values(with_work_life_balance(rows), "work_life_balance_score")
    avg_balance = float(balance.mean())
    verdict = "Needs improvement." if avg_balance < 70 else "Good overall balance."
    insights.append(
        Insight(
            kind="worklife",
            title="Work-Life Balance",
            message=f"Average work-life balance score is {avg_balance:.1f}%. {verdict}",
            value=f"{avg_balance:.1f}%",
        )
    )

    corr = correlation(rows, "satisfaction", "productivity")
    strength = "Strong positive relationship." if corr > 0.5 else "Weak relationship."
    insights.append(
        Insight(
            kind="correlation",
            title="Satisfaction-Productivity Correlation",
            message=f"Correlation coefficient: {corr:.2f}. {strength}",
            value=f"{corr:.2f}",
        )
    )
    return insights
