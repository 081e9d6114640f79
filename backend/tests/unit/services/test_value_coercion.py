import math

import pytest

from portfolio_shared.services.value_coercion import parse_numeric


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1,234,500원", 1234500.0),
        ("12.5%", 12.5),
        (" 3.5 % ", 3.5),
        ("-250,000", -250000.0),
        ("₩ 1,000", 1000.0),
        (42, 42.0),
        (0.035, 0.035),
    ],
)
def test_parse_numeric_accepts_numbers_and_display_strings(raw, expected):
    assert parse_numeric(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["", "-", "N/A", "1.2.3", None, True, False, {"v": 1}, [1]])
def test_parse_numeric_returns_none_for_unparsable(raw):
    assert parse_numeric(raw) is None


def test_parse_numeric_rejects_non_finite():
    assert parse_numeric(math.inf) is None
    assert parse_numeric(float("nan")) is None


@pytest.mark.parametrize("raw", ["１２３", "٣٤٥", "１,２００원"])
def test_parse_numeric_only_counts_ascii_digits(raw):
    assert parse_numeric(raw) is None


def test_parse_numeric_huge_integer_is_none():
    assert parse_numeric(10 ** 400) is None
    assert parse_numeric("9" * 400) is None
