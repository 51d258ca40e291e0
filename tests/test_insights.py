from dashstats import generate_insights


def make_employees():
    return [
        {"department": "IT", "salary": 90_000.0, "satisfaction": 9.0, "productivity": 90.0,
         "stress_level": 3.0, "weekly_hours": 40.0, "exercise_hours": 4.0, "sleep_hours": 8.0},
        {"department": "Sales", "salary": 40_000.0, "satisfaction": 4.0, "productivity": 50.0,
         "stress_level": 8.0, "weekly_hours": 50.0, "exercise_hours": 1.0, "sleep_hours": 6.0},
        {"department": "IT", "salary": 80_000.0, "satisfaction": 8.0, "productivity": 85.0,
         "stress_level": 4.0, "weekly_hours": 42.0, "exercise_hours": 3.0, "sleep_hours": 7.0},
    ]


def test_generate_insights_cards() -> None:
    cards = {card.kind: card for card in generate_insights(make_employees())}

    assert list(cards) == ["department", "salary", "worklife", "correlation"]
    assert cards["department"].message.startswith("IT has the highest")
    assert "Sales needs attention" in cards["department"].message
    assert cards["salary"].value == "$70,000"
    assert "25% earn below $40,000" in cards["salary"].message
    assert cards["correlation"].message.endswith("Strong positive relationship.")


def test_generate_insights_worklife_verdict() -> None:
    cards = {card.kind: card for card in generate_insights(make_employees())}
    # 100, 65 and 100
    assert cards["worklife"].value == "88.3%"
    assert cards["worklife"].message.endswith("Good overall balance.")


def test_generate_insights_empty() -> None:
    assert generate_insights([]) == []
