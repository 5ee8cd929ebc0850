"""Primary work-center (OP20) setup and run time estimation.

Run time is built from named pieces in seconds and converted to hours:

* cut      -- cut length / laser feed (in/min) x 60
* cycle    -- 45 s of load/unload per 240 in of stock
* pierce   -- (holes + 2 end cuts) x (pierce time + 1.5 s), round tube only
* traverse -- 60 s per 1440 in of stock

Round bar is sawn and uses its own single formula. Routing and setup come
from ordered size tiers whose upper bounds are inclusive.
"""

from __future__ import annotations

import logging
from typing import Sequence

from stock_quoter.domain import CostEstimate, StockCategory, StockClassification, TimeComponents
from stock_quoter.geometry.dimensions import parse_cross_section_od
from stock_quoter.pricing.base import CuttingParameterProvider

__all__ = [
    "SAW",
    "TUBE_LASER",
    "FIVE_AXIS_LASER",
    "ROUND_BAR_SETUP_HOURS",
    "ROUND_TUBE_TIERS",
    "SHAPE_TIERS",
    "HEAVY_PART_LB",
    "HEAVY_PART_MIN_RUN_HOURS",
    "THICK_WALL_IN",
    "estimate_round_bar",
    "estimate_round_tube",
    "estimate_shape",
    "estimate_cost",
    "select_tier",
]

log = logging.getLogger(__name__)

SAW = "F300 - SAW"
TUBE_LASER = "F110 - TUBE LASER"
FIVE_AXIS_LASER = "N145 - 5-AXIS LASER"

ROUND_BAR_SETUP_HOURS = 0.05
ROUND_BAR_SEC_PER_IN_OD = 90.0
ROUND_BAR_HANDLING_SEC = 15.0

Tier = tuple[float, str, float]

# (max size inches, work center, setup hours)
ROUND_TUBE_TIERS: Sequence[Tier] = (
    (6.0, TUBE_LASER, 0.15),
    (10.0, TUBE_LASER, 0.5),
    (10.75, TUBE_LASER, 1.0),
)
ROUND_TUBE_OVERSIZE = (FIVE_AXIS_LASER, 0.25)

SHAPE_TIERS: Sequence[Tier] = (
    (6.0, TUBE_LASER, 0.15),
    (10.0, TUBE_LASER, 0.5),
)
SHAPE_OVERSIZE = (FIVE_AXIS_LASER, 0.25)

OPEN_SHAPE_EXTRA_SETUP_HOURS = 0.25
OPEN_SHAPE_RUN_MULTIPLIER = 3.0
_OPEN_SHAPES = (StockCategory.ANGLE, StockCategory.CHANNEL)

HEAVY_PART_LB = 50.0
HEAVY_PART_MIN_RUN_HOURS = 0.05
THICK_WALL_IN = 0.2
THICK_WALL_MULTIPLIER = 2.0

CYCLE_SEC_PER_STICK = 45.0
STICK_LENGTH_IN = 240.0
TRAVERSE_SEC_PER_STICK = 60.0
TRAVERSE_LENGTH_IN = 1440.0
END_CUTS = 2
PIERCE_OVERHEAD_SEC = 1.5


def select_tier(size: float, tiers: Sequence[Tier], oversize: tuple[str, float]) -> tuple[str, float]:
    """Return ``(work_center, setup_hours)`` for ``size``.

    Sizes of zero or below (an unreadable cross-section) fall through to
    ``oversize``.
    """

    if size > 0:
        for bound, work_center, setup in tiers:
            if size <= bound:
                return work_center, setup
    return oversize


def _cut_seconds(cut_length: float, cut_speed_in_per_min: float) -> float:
    if cut_speed_in_per_min <= 0:
        return 0.0
    return cut_length / cut_speed_in_per_min * 60.0


def _cycle_seconds(length: float) -> float:
    return (length / STICK_LENGTH_IN) * CYCLE_SEC_PER_STICK


def _traverse_seconds(length: float) -> float:
    return (length / TRAVERSE_LENGTH_IN) * TRAVERSE_SEC_PER_STICK


def estimate_round_bar(classification: StockClassification) -> CostEstimate:
    od = classification.dimensions.outer_diameter
    seconds = od * ROUND_BAR_SEC_PER_IN_OD + ROUND_BAR_HANDLING_SEC
    return CostEstimate(SAW, ROUND_BAR_SETUP_HOURS, seconds / 3600.0)


def estimate_round_tube(
    classification: StockClassification,
    cut_params: CuttingParameterProvider,
    material_category: str,
) -> CostEstimate:
    """Laser estimate for round tube and pipe."""

    dims = classification.dimensions
    work_center, setup = select_tier(dims.outer_diameter, ROUND_TUBE_TIERS, ROUND_TUBE_OVERSIZE)

    params = cut_params.get(material_category, dims.wall)
    components = TimeComponents(
        cut=_cut_seconds(dims.cut_length, params.cut_speed_in_per_min),
        cycle=_cycle_seconds(dims.length),
        pierce=(dims.holes + END_CUTS) * (params.pierce_time_sec + PIERCE_OVERHEAD_SEC),
        traverse=_traverse_seconds(dims.length),
    )
    run = components.total_seconds / 3600.0

    heavy_floor = False
    if dims.weight is not None and dims.weight > HEAVY_PART_LB and run < HEAVY_PART_MIN_RUN_HOURS:
        run = HEAVY_PART_MIN_RUN_HOURS
        heavy_floor = True

    thick_wall = dims.wall > THICK_WALL_IN
    multiplier = THICK_WALL_MULTIPLIER if thick_wall else 1.0
    run *= multiplier

    return CostEstimate(
        work_center,
        setup,
        run,
        components=components,
        multiplier=multiplier,
        heavy_floor_applied=heavy_floor,
        thick_wall_applied=thick_wall,
    )


def estimate_shape(
    classification: StockClassification,
    cut_params: CuttingParameterProvider,
    material_category: str,
) -> CostEstimate:
    """Laser estimate for square, rectangle, angle and channel stock."""

    dims = classification.dimensions
    major = parse_cross_section_od(dims.cross_section)
    work_center, setup = select_tier(major, SHAPE_TIERS, SHAPE_OVERSIZE)

    # An unrecognised tag is coded as channel but costed like a closed shape.
    open_shape = classification.category in _OPEN_SHAPES and not classification.unknown_shape
    if open_shape:
        setup += OPEN_SHAPE_EXTRA_SETUP_HOURS

    params = cut_params.get(material_category, dims.wall)
    components = TimeComponents(
        cut=_cut_seconds(dims.cut_length, params.cut_speed_in_per_min),
        cycle=_cycle_seconds(dims.length),
        traverse=_traverse_seconds(dims.length),
    )
    multiplier = OPEN_SHAPE_RUN_MULTIPLIER if open_shape else 1.0
    run = components.total_seconds / 3600.0 * multiplier

    return CostEstimate(work_center, setup, run, components=components, multiplier=multiplier)


def estimate_cost(
    classification: StockClassification,
    cut_params: CuttingParameterProvider,
    material_category: str,
) -> CostEstimate:
    """Dispatch to the estimator for ``classification.category``."""

    category = classification.category
    if category is StockCategory.ROUND_BAR:
        estimate = estimate_round_bar(classification)
    elif category in (StockCategory.ROUND_TUBE, StockCategory.PIPE):
        estimate = estimate_round_tube(classification, cut_params, material_category)
    else:
        estimate = estimate_shape(classification, cut_params, material_category)
    log.debug(
        "%s -> %s setup=%.3f run=%.4f",
        classification.outcome,
        estimate.work_center,
        estimate.setup_hours,
        estimate.run_hours,
    )
    return estimate
