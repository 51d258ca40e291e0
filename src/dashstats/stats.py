"""Data structures for summarising distributions and line fits."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class DistributionStats:
    """Immutable summary of one numeric field over a record collection.

    ``median`` is the upper median for an even count and ``std_dev`` the
    population standard deviation.
    """

    count: int
    mean: float
    median: float
    min: float
    max: float
    std_dev: float
    range: float

    def as_dict(self) -> dict[str, float]:
        """Return statistics as a plain dictionary."""

        return asdict(self)


@dataclass(frozen=True)
class RegressionLine:
    """Least-squares line ``y = slope * x + intercept``."""

    slope: float = 0.0
    intercept: float = 0.0
    valid: bool = False

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept

    def as_dict(self) -> dict[str, float | bool]:
        return asdict(self)


@dataclass(frozen=True)
class HistogramBin:
    """Count of values in ``[lower, upper)``; the last bin also holds ``upper``."""

    lower: float
    upper: float
    count: int
