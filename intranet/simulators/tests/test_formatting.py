import math

import pytest

from intranet.simulators.formatting import format_currency, format_number, format_percent, parse_brl


@pytest.mark.parametrize(
    "value,expected",
    [(0, "R$ 0,00"), (450, "R$ 450,00"), (1234.5, "R$ 1.234,50"), (1234567.891, "R$ 1.234.567,89")],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_percent_and_number():
    assert format_percent(0.012) == "1,2%"
    assert format_percent(0.4, digits=0) == "40%"
    assert format_number(36) == "36"
    assert format_number(10.0) == "10"
    assert format_number(6.5) == "6,5"


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, 0.0),
        ("", 0.0),
        ("   ", 0.0),
        (1500, 1500.0),
        (1500.25, 1500.25),
        ("1500.25", 1500.25),
        ("1.234,56", 1234.56),
        ("R$ 1.234,56", 1234.56),
        ("R$\xa030.000,00", 30000.0),
        ("1.234.567", 1234567.0),
        ("30.000", 30000.0),
        ("4.500", 4500.0),
        ("180.000", 180000.0),
        ("4.50", 4.5),
    ],
)
def test_parse_brl(raw, expected):
    assert parse_brl(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["abc", "1,2,3", "1.234.5", True, math.nan, "inf"])
def test_parse_brl_rejects_garbage(raw):
    with pytest.raises(ValueError):
        parse_brl(raw)
