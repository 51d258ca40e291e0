"""Static configuration for record schemas, column aliases and score weights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class RecordSchema:
    """Which fields a record must carry and how numeric fields are coerced.

    Parameters
    ----------
    id_field, category_field : str
        Identifying fields; a record missing either is dropped.
    required_numeric : tuple[str, ...]
        Fields that must parse as finite numbers or the record is dropped.
    optional_numeric : tuple[str, ...]
        Fields coerced to a number, defaulting to ``0`` when unparseable.
    positive : tuple[str, ...]
        Numeric fields that must be strictly greater than zero.
    """

    id_field: str
    category_field: str
    required_numeric: Tuple[str, ...] = ()
    optional_numeric: Tuple[str, ...] = ()
    positive: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        unknown = set(self.positive) - set(self.numeric_fields)
        if unknown:
            raise ValueError(f"positive fields must be numeric: {sorted(unknown)}")

    @property
    def numeric_fields(self) -> Tuple[str, ...]:
        return self.required_numeric + self.optional_numeric

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return (self.id_field, self.category_field) + self.required_numeric


@dataclass(frozen=True)
class CompositeComponent:
    """A per-group average rescaled from ``[low, high]`` to ``0-100``."""

    field: str
    low: float = 0.0
    high: float = 100.0
    invert: bool = False
    weight: float = 1.0


# Logical field name -> accepted CSV header names, first match wins.
ColumnAliases = Dict[str, Tuple[str, ...]]


@dataclass(frozen=True)
class Band:
    """Display label for values below ``upper`` and at or above the previous band."""

    label: str
    upper: float = float("inf")


# ---------------------------------------------------------------------------
# Employee dataset.

EMPLOYEE_SCHEMA = RecordSchema(
    id_field="employee_id",
    category_field="department",
    required_numeric=("salary", "satisfaction"),
    optional_numeric=(
        "age",
        "experience_years",
        "weekly_hours",
        "stress_level",
        "productivity",
        "exercise_hours",
        "sleep_hours",
    ),
)

EMPLOYEE_ALIASES: ColumnAliases = {
    "employee_id": ("employee_id", "empleado_id", "id"),
    "department": ("department", "departamento", "dept"),
    "salary": ("salary", "salario_anual", "annual_salary"),
    "satisfaction": ("satisfaction", "satisfaccion_laboral", "job_satisfaction"),
    "age": ("age", "edad"),
    "experience_years": ("experience_years", "experiencia_anos", "experience"),
    "weekly_hours": ("weekly_hours", "horas_semanales"),
    "stress_level": ("stress_level", "nivel_estres", "stress"),
    "productivity": ("productivity", "productividad_score", "productivity_score"),
    "exercise_hours": ("exercise_hours", "horas_ejercicio_semana"),
    "sleep_hours": ("sleep_hours", "horas_sueno_noche"),
    "zone": ("zone", "zona_geografica", "region"),
    "city": ("city", "ciudad"),
    "education": ("education", "nivel_educativo"),
    "work_mode": ("work_mode", "modalidad_trabajo", "modality"),
}

# Satisfaction and stress are on a 0-10 scale, productivity on 0-100.
PERFORMANCE_COMPONENTS: Tuple[CompositeComponent, ...] = (
    CompositeComponent("satisfaction", 0.0, 10.0),
    CompositeComponent("productivity", 0.0, 100.0),
    CompositeComponent("stress_level", 0.0, 10.0, invert=True),
)

AGE_BANDS: Tuple[Band, ...] = (
    Band("< 25", 25),
    Band("25-34", 35),
    Band("35-44", 45),
    Band("45-54", 55),
    Band("55+"),
)

SALARY_BANDS: Tuple[Band, ...] = (
    Band("< $50K", 50_000),
    Band("$50K-$75K", 75_000),
    Band("$75K-$100K", 100_000),
    Band("$100K-$150K", 150_000),
    Band("$150K+"),
)

# ---------------------------------------------------------------------------
# Product dataset.

PRODUCT_SCHEMA = RecordSchema(
    id_field="product_id",
    category_field="main_category",
    required_numeric=("actual_price", "discount_percentage", "rating", "rating_count"),
    positive=("actual_price", "discount_percentage", "rating", "rating_count"),
)

PRODUCT_ALIASES: ColumnAliases = {
    "product_id": ("product_id", "id", "sku"),
    "main_category": ("main_category", "category"),
    "actual_price": ("actual_price", "price"),
    "discount_percentage": ("discount_percentage", "discount"),
    "rating": ("rating", "stars"),
    "rating_count": ("rating_count", "reviews", "num_ratings"),
    "product_name": ("product_name", "name", "title"),
    "price_category": ("price_category",),
    "product_link": ("product_link", "url"),
}

SCHEMAS: Dict[str, Tuple[RecordSchema, ColumnAliases]] = {
    "employee": (EMPLOYEE_SCHEMA, EMPLOYEE_ALIASES),
    "product": (PRODUCT_SCHEMA, PRODUCT_ALIASES),
}


__all__ = [
    "AGE_BANDS",
    "Band",
    "ColumnAliases",
    "CompositeComponent",
    "EMPLOYEE_ALIASES",
    "EMPLOYEE_SCHEMA",
    "PERFORMANCE_COMPONENTS",
    "PRODUCT_ALIASES",
    "PRODUCT_SCHEMA",
    "RecordSchema",
    "SALARY_BANDS",
    "SCHEMAS",
]
