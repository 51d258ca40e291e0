import pandas as pd
from typer.testing import CliRunner

from dashstats.report import app, to_frame

runner = CliRunner()

CSV = """employee_id,department,salary,satisfaction,productivity,stress_level
E1,Sales,50000,6,70,5
E2,Sales,70000,8,80,7
E3,IT,90000,9,95,3
"""


def test_to_frame() -> None:
    frame = to_frame({"A": {"count": 2, "s_avg": 15.0}, "B": {"count": 1, "s_avg": 5.0}}, "d")

    assert list(frame.columns) == ["d", "count", "s_avg"]
    assert frame["s_avg"].tolist() == [15.0, 5.0]


def test_summary_writes_csv(tmp_path) -> None:
    src = tmp_path / "employees.csv"
    src.write_text(CSV)
    out = tmp_path / "report.csv"

    result = runner.invoke(app, ["summary", str(src), "--out", str(out)])
    assert result.exit_code == 0, result.output

    report = pd.read_csv(out)
    assert report["department"].tolist() == ["Sales", "IT"]
    assert report.loc[0, "salary_avg"] == 60000
    assert "performance_score" in report.columns


def test_summary_rejects_unknown_operation(tmp_path) -> None:
    src = tmp_path / "employees.csv"
    src.write_text(CSV)

    result = runner.invoke(app, ["summary", str(src), "--op", "median"])
    assert result.exit_code != 0


def test_insights_command(tmp_path) -> None:
    src = tmp_path / "employees.csv"
    src.write_text(CSV)

    result = runner.invoke(app, ["insights", str(src)])
    assert result.exit_code == 0, result.output
    assert "Department Performance" in result.output
