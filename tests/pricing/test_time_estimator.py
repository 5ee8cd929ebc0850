from __future__ import annotations

import pytest

from stock_quoter.domain import StockCategory, StockClassification
from stock_quoter.pricing.cutting_params import TubeCuttingParameters
from stock_quoter.pricing.time_estimator import (
    FIVE_AXIS_LASER,
    SAW,
    SHAPE_TIERS,
    SHAPE_OVERSIZE,
    TUBE_LASER,
    estimate_cost,
    estimate_round_bar,
    estimate_round_tube,
    estimate_shape,
    select_tier,
)
from tests.doubles import FixedCutParameters


def _tube(make_dims, category: StockCategory = StockCategory.ROUND_TUBE, **fields) -> StockClassification:
    base = {"cross_section": '2.375"OD', "wall_thickness": ".154", "material_length": "144", "hole_count": "0"}
    base.update(fields)
    return StockClassification(category, make_dims(**base))


def _shape(make_dims, category: StockCategory, cross: str, **fields) -> StockClassification:
    base = {"shape": category.value, "cross_section": cross, "wall_thickness": ".125", "material_length": "120"}
    base.update(fields)
    return StockClassification(category, make_dims(**base))


def test_round_bar_is_sawn(make_dims) -> None:
    bar = StockClassification(StockCategory.ROUND_BAR, make_dims(cross_section='2"', wall_thickness="0"))

    result = estimate_round_bar(bar)

    assert result.work_center == SAW
    assert result.setup_hours == pytest.approx(0.05)
    assert result.run_hours == pytest.approx(195.0 / 3600.0)


def test_round_tube_with_shop_tables(make_dims) -> None:
    result = estimate_round_tube(_tube(make_dims), TubeCuttingParameters(), "StainlessSteel")

    assert result.work_center == TUBE_LASER
    assert result.setup_hours == pytest.approx(0.15)
    assert result.components.cut == pytest.approx(144 / 100.3 * 60)
    assert result.components.cycle == pytest.approx(27.0)
    assert result.components.pierce == pytest.approx(4.2)
    assert result.components.traverse == pytest.approx(6.0)
    assert result.run_hours == pytest.approx(123.341575 / 3600.0, rel=1e-6)
    assert result.multiplier == 1.0


def test_round_tube_cut_uses_cut_length_and_holes(make_dims) -> None:
    tube = _tube(make_dims, material_length="120", cut_length="60", hole_count="3")

    result = estimate_round_tube(tube, FixedCutParameters(speed=100.0, pierce=1.0), "CarbonSteel")

    assert result.components.cut == pytest.approx(36.0)
    assert result.components.cycle == pytest.approx(22.5)
    assert result.components.pierce == pytest.approx(12.5)
    assert result.components.traverse == pytest.approx(5.0)
    assert result.run_hours == pytest.approx(76.0 / 3600.0)


def test_zero_feed_rate_contributes_no_cut_time(make_dims) -> None:
    result = estimate_round_tube(_tube(make_dims), TubeCuttingParameters(), "Aluminum")

    assert result.components.cut == 0.0
    assert result.components.pierce == pytest.approx(3.0)


def test_heavy_part_run_floor(make_dims) -> None:
    tube = _tube(make_dims, material_length="12", weight="60")

    result = estimate_round_tube(tube, FixedCutParameters(), "StainlessSteel")

    assert result.heavy_floor_applied
    assert result.run_hours == pytest.approx(0.05)


def test_light_part_has_no_floor(make_dims) -> None:
    tube = _tube(make_dims, material_length="12", weight="50")

    result = estimate_round_tube(tube, FixedCutParameters(), "StainlessSteel")

    assert not result.heavy_floor_applied
    assert result.run_hours < 0.05


def test_thick_wall_doubles_after_floor(make_dims) -> None:
    tube = _tube(make_dims, wall_thickness=".25", material_length="12", weight="60")

    result = estimate_round_tube(tube, FixedCutParameters(), "StainlessSteel")

    assert result.heavy_floor_applied
    assert result.thick_wall_applied
    assert result.multiplier == 2.0
    assert result.run_hours == pytest.approx(0.1)


@pytest.mark.parametrize(
    "od,work_center,setup",
    [
        ('6"', TUBE_LASER, 0.15),
        ('8.625"', TUBE_LASER, 0.5),
        ('10.75"', TUBE_LASER, 1.0),
        ('12.75"', FIVE_AXIS_LASER, 0.25),
    ],
)
def test_round_tube_tiers(make_dims, od: str, work_center: str, setup: float) -> None:
    result = estimate_round_tube(_tube(make_dims, cross_section=od), FixedCutParameters(), "CarbonSteel")

    assert (result.work_center, result.setup_hours) == (work_center, setup)


def test_angle_adds_setup_and_triples_run(make_dims) -> None:
    angle = _shape(make_dims, StockCategory.ANGLE, "3 X 3", hole_count="4")

    result = estimate_shape(angle, FixedCutParameters(speed=100.0, pierce=1.0), "CarbonSteel")

    assert result.work_center == TUBE_LASER
    assert result.setup_hours == pytest.approx(0.4)
    assert result.components.pierce == 0.0
    assert result.multiplier == 3.0
    assert result.run_hours == pytest.approx(99.5 * 3 / 3600.0)


def test_rectangle_uses_major_dimension_for_tier(make_dims) -> None:
    rect = _shape(make_dims, StockCategory.RECTANGLE, '10.5"X4"')

    result = estimate_shape(rect, FixedCutParameters(), "CarbonSteel")

    assert result.work_center == FIVE_AXIS_LASER
    assert result.setup_hours == pytest.approx(0.25)
    assert result.multiplier == 1.0


@pytest.mark.parametrize("cross,setup", [('6"X4"', 0.15), ('6.0001"X4"', 0.5), ('10"X4"', 0.5)])
def test_shape_tier_bounds_are_inclusive(make_dims, cross: str, setup: float) -> None:
    rect = _shape(make_dims, StockCategory.RECTANGLE, cross)

    result = estimate_shape(rect, FixedCutParameters(), "CarbonSteel")

    assert result.work_center == TUBE_LASER
    assert result.setup_hours == pytest.approx(setup)


def test_unreadable_major_dimension_goes_oversize(make_dims) -> None:
    rect = _shape(make_dims, StockCategory.SQUARE, "n/a")

    assert estimate_shape(rect, FixedCutParameters(), "CarbonSteel").work_center == FIVE_AXIS_LASER
    assert select_tier(0.0, SHAPE_TIERS, SHAPE_OVERSIZE) == SHAPE_OVERSIZE


def test_estimate_cost_dispatches_by_category(make_dims) -> None:
    params = FixedCutParameters()
    pipe = _tube(make_dims, StockCategory.PIPE)
    bar = StockClassification(StockCategory.ROUND_BAR, make_dims(wall_thickness="0"))
    channel = _shape(make_dims, StockCategory.CHANNEL, '4"X2"')

    assert estimate_cost(pipe, params, "CarbonSteel") == estimate_round_tube(pipe, params, "CarbonSteel")
    assert estimate_cost(bar, params, "CarbonSteel").work_center == SAW
    assert estimate_cost(channel, params, "CarbonSteel").multiplier == 3.0


def test_unknown_shape_keeps_closed_shape_costing(make_dims) -> None:
    dims = make_dims(shape="Hexagon", cross_section='4"X2"', wall_thickness=".125", material_length="120")
    unknown = StockClassification(StockCategory.CHANNEL, dims, unknown_shape=True)

    result = estimate_shape(unknown, FixedCutParameters(speed=100.0, pierce=1.0), "CarbonSteel")

    assert result.setup_hours == pytest.approx(0.15)
    assert result.multiplier == 1.0
    assert result.run_hours == pytest.approx(99.5 / 3600.0)


def test_fractional_holes_count_toward_pierce_time(make_dims) -> None:
    tube = _tube(make_dims, hole_count="2.5")

    result = estimate_round_tube(tube, FixedCutParameters(speed=100.0, pierce=1.0), "CarbonSteel")

    assert result.components.pierce == pytest.approx(4.5 * 2.5)
