import pytest

from dashstats import EMPLOYEE_SCHEMA, PRODUCT_SCHEMA, RecordSchema, normalize_records
from dashstats.records import to_number


def employee(**overrides):
    row = {
        "employee_id": "E1",
        "department": "Sales",
        "salary": "55000",
        "satisfaction": "7",
        "age": "31",
        "stress_level": "",
    }
    row.update(overrides)
    return row


def test_normalize_coerces_numbers() -> None:
    (record,) = normalize_records([employee()], EMPLOYEE_SCHEMA)

    assert record["salary"] == 55000.0
    assert record["age"] == 31.0
    # optional numeric fields default to zero
    assert record["stress_level"] == 0.0
    assert record["sleep_hours"] == 0.0
    assert record["employee_id"] == "E1"


def test_normalize_drops_invalid_rows_in_order() -> None:
    raw = [
        employee(employee_id="E1"),
        employee(employee_id=""),
        employee(employee_id="E3", department=None),
        employee(employee_id="E4", salary="abc"),
        employee(employee_id="E5", satisfaction=float("nan")),
        employee(employee_id="E6"),
    ]
    out = normalize_records(raw, EMPLOYEE_SCHEMA)
    assert [r["employee_id"] for r in out] == ["E1", "E6"]


def test_normalize_does_not_mutate_input() -> None:
    raw = [employee()]
    normalize_records(raw, EMPLOYEE_SCHEMA)
    assert raw[0]["salary"] == "55000"


def test_positive_fields() -> None:
    base = {"product_id": "P1", "main_category": "Toys", "actual_price": "10",
            "discount_percentage": "5", "rating": "4.1", "rating_count": "12"}
    assert len(normalize_records([base], PRODUCT_SCHEMA)) == 1
    assert normalize_records([{**base, "rating": "0"}], PRODUCT_SCHEMA) == []


def test_schema_rejects_non_numeric_positive_field() -> None:
    with pytest.raises(ValueError):
        RecordSchema("id", "cat", required_numeric=("a",), positive=("b",))


@pytest.mark.parametrize("bad", ["not records", {"a": 1}, 42])
def test_structurally_invalid_input(bad) -> None:
    with pytest.raises(TypeError):
        normalize_records(bad, EMPLOYEE_SCHEMA)


def test_to_number() -> None:
    assert to_number(" 3.5 ") == 3.5
    assert to_number(4) == 4.0
    assert to_number(True) is None
    assert to_number("inf") is None
    assert to_number("") is None
    assert to_number(10**400) is None
