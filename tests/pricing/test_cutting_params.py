from __future__ import annotations

import pytest

from stock_quoter.pricing.cutting_params import (
    CARBON_STEEL_FEEDS,
    FEED_FACTOR,
    STAINLESS_PIERCE,
    TubeCuttingParameters,
    lookup_tier,
)


@pytest.fixture
def params() -> TubeCuttingParameters:
    return TubeCuttingParameters()


@pytest.mark.parametrize(
    "category,wall,speed,pierce",
    [
        ("StainlessSteel", 0.154, 100.3, 0.6),
        ("CarbonSteel", 0.12, 126.65, 0.10),
        ("CarbonSteel", 0.045, 295.0 * 0.85, 0.05),
        ("stainlesssteel", 1.0, 6.8, 5.0),
        ("CarbonSteel", 0.5, 7.0 * 0.85, 5.0),
    ],
)
def test_table_lookup(
    params: TubeCuttingParameters, category: str, wall: float, speed: float, pierce: float
) -> None:
    result = params.get(category, wall)

    assert result.cut_speed_in_per_min == pytest.approx(speed)
    assert result.pierce_time_sec == pytest.approx(pierce)


def test_aluminum_has_no_cutting_table(params: TubeCuttingParameters) -> None:
    result = params.get("Aluminum", 0.125)

    assert result.cut_speed_in_per_min == 0.0
    assert result.pierce_time_sec == 0.0


def test_unknown_category_cuts_as_carbon_steel(params: TubeCuttingParameters) -> None:
    assert params.get("Titanium", 0.12) == params.get("CarbonSteel", 0.12)


def test_tier_bounds_are_inclusive() -> None:
    assert lookup_tier(CARBON_STEEL_FEEDS, 0.125) == 149.0
    assert lookup_tier(CARBON_STEEL_FEEDS, 0.1251) == 137.0
    assert lookup_tier(STAINLESS_PIERCE, 0.205) == 0.60
    assert lookup_tier(STAINLESS_PIERCE, 0.2051) == 2.00


def test_feed_factor_applies_to_every_rate(params: TubeCuttingParameters) -> None:
    for bound, feed in CARBON_STEEL_FEEDS[:-1]:
        assert params.get("CarbonSteel", bound).cut_speed_in_per_min == pytest.approx(feed * FEED_FACTOR)
