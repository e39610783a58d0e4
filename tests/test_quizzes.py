import pytest

from exrunner.lessons.quizzes import (
    Command,
    ReportCard,
    calculate_price_of_apples,
    transformer,
)


@pytest.mark.parametrize(
    "quantity, price",
    [(35, 70), (40, 80), (41, 41), (65, 65)],
)
def test_verify_prices(quantity, price):
    assert calculate_price_of_apples(quantity) == price


def test_transformer_it_works():
    output = transformer(
        [
            ("hello", Command.uppercase()),
            (" all roads lead to rome! ", Command.trim()),
            ("foo", Command.append(1)),
            ("bar", Command.append(5)),
        ]
    )
    assert output == [
        "HELLO",
        "all roads lead to rome!",
        "foobar",
        "barbarbarbarbarbar",
    ]


def test_transformer_empty():
    assert transformer([]) == []


def test_append_zero_still_appends_once():
    assert transformer([("x", Command.append(0))]) == ["xbar"]


def test_append_negative_rejected():
    with pytest.raises(ValueError):
        Command.append(-1)


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.render() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.render() == "Gary Plotter (11) - achieved a grade of A+"


def test_whole_number_grade():
    card = ReportCard(grade=5.0, student_name="Ann", student_age=10)
    assert card.render() == "Ann (10) - achieved a grade of 5"