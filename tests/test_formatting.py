import pytest

from mis_dashboard.ui.components.formatting import (
    MET_LABEL,
    PLACEHOLDER,
    format_indian,
    format_number,
    format_shortfall,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (999, "999"),
        (1000, "1,000"),
        (123456, "1,23,456"),
        (1234567, "12,34,567"),
        (123456789.5, "12,34,56,789.5"),
        (1234.56789, "1,234.568"),
        (-250000, "-2,50,000"),
        (-0.0001, "0"),
        (None, PLACEHOLDER),
        (float("nan"), PLACEHOLDER),
        ("abc", PLACEHOLDER),
    ],
)
def test_format_indian(value, expected):
    assert format_indian(value) == expected


def test_format_number_uses_western_grouping():
    assert format_number(1234567) == "1,234,567"
    assert format_number(None) == PLACEHOLDER


@pytest.mark.parametrize("shortfall, expected", [(None, MET_LABEL), (0, MET_LABEL), (-5, MET_LABEL), (150000, "1,50,000")])
def test_format_shortfall(shortfall, expected):
    assert format_shortfall(shortfall) == expected
