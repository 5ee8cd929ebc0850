from __future__ import annotations

import pytest

from stock_quoter.utils.formatting import format_dot, format_fixed, format_inches, format_number


@pytest.mark.parametrize(
    "value,expected",
    [
        (1.25, "1.25"),
        (1.250, "1.25"),
        (2.0, "2"),
        (2.375, "2.375"),
        (0.125, "0.125"),
        (0.0, "0"),
        (1.0005, "1.001"),
        (12.34567, "12.346"),
    ],
)
def test_format_inches_trims_trailing_zeros(value: float, expected: str) -> None:
    assert format_inches(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (0.125, ".125"),
        (0.5, ".5"),
        (0.154, ".154"),
        (0.15, ".15"),
        (0.15 + 0.25, ".4"),
        (1.0, "1"),
        (1.25, "1.25"),
        (0.0, "0"),
    ],
)
def test_format_dot_drops_leading_zero_below_one(value: float, expected: str) -> None:
    assert format_dot(value) == expected


def test_format_fixed_pads_to_decimals() -> None:
    assert format_fixed(144, 3) == "144.000"
    assert format_fixed(195 / 3600.0, 4) == "0.0542"
    assert format_fixed(0.04, 3) == "0.040"


def test_format_number_uses_shortest_text() -> None:
    assert format_number(0.03) == "0.03"
    assert format_number(1.0) == "1"


def test_large_values_keep_every_digit() -> None:
    assert format_fixed(1e30, 3) == "1" + "0" * 30 + ".000"
    assert format_inches(1e30) == "1" + "0" * 30
    assert format_fixed(1.5e300, 4).endswith(".0000")


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_values_render_as_text(value: float) -> None:
    assert format_fixed(value, 3) == f"{value:.3f}"
    assert format_dot(value) == str(value)
    assert format_number(value) == repr(value)
