"""Secondary operations that follow the primary cut.

* F210 deburr -- always estimated from the cut (or material) length.
* F325 roll form -- weight/wall rule, only for items with a known weight.
* F140 press brake -- only when the roll-form rule asks for it *and* the
  press-brake estimate has positive run time.

Both models are computed first and the gate is applied afterwards by
:func:`gate_secondary`, so either side can be tested in isolation.
"""

from __future__ import annotations

import logging

from stock_quoter.domain import PostProcessEstimate, WeightRuleResult, WorkCenterTime
from stock_quoter.pricing.base import PostProcessRuleProvider

__all__ = [
    "DEBURR_CODE",
    "ROLL_FORM_CODE",
    "PRESS_BRAKE_CODE",
    "DEFAULT_DEBURR_RATE_IN_PER_HOUR",
    "PRESS_BRAKE_MIN_WALL_IN",
    "TubeWorkCenterRules",
    "deburr_length",
    "gate_secondary",
    "estimate_post_process",
]

log = logging.getLogger(__name__)

DEBURR_CODE = "F210"
ROLL_FORM_CODE = "F325"
PRESS_BRAKE_CODE = "F140"

DEFAULT_DEBURR_RATE_IN_PER_HOUR = 3600.0
DEBURR_SETUP_HOURS = 0.03

ROLL_FORM_SEC_PER_LB = 5.0
ROLL_FORM_BASE_MIN = 5.0
LIGHT_PART_LB = 40.0
MEDIUM_PART_LB = 150.0
ROLL_FORM_SETUP_LIGHT = 0.25
ROLL_FORM_SETUP_MEDIUM = 0.375
ROLL_FORM_SETUP_HEAVY = 0.75

PRESS_BRAKE_MIN_WALL_IN = 0.165
PRESS_BRAKE_SETUP_HOURS = 0.20
PRESS_BRAKE_RUN_MEDIUM = 0.08
PRESS_BRAKE_RUN_HEAVY = 0.25


class TubeWorkCenterRules:
    """Default :class:`~stock_quoter.pricing.base.PostProcessRuleProvider`."""

    def __init__(self, deburr_rate_in_per_hour: float = DEFAULT_DEBURR_RATE_IN_PER_HOUR) -> None:
        if deburr_rate_in_per_hour <= 0:
            deburr_rate_in_per_hour = DEFAULT_DEBURR_RATE_IN_PER_HOUR
        self.deburr_rate_in_per_hour = deburr_rate_in_per_hour

    def compute_deburr(self, length: float) -> WorkCenterTime:
        return WorkCenterTime(DEBURR_CODE, DEBURR_SETUP_HOURS, length / self.deburr_rate_in_per_hour)

    def compute_weight_rule(self, weight: float, wall: float) -> WeightRuleResult:
        """Roll-form time; heavier parts with a thick wall also need the press brake."""

        run = weight * ROLL_FORM_SEC_PER_LB / 3600.0 + ROLL_FORM_BASE_MIN / 60.0
        if weight < LIGHT_PART_LB:
            return WeightRuleResult("1", ROLL_FORM_SETUP_LIGHT, run, requires_press_brake=False)
        setup = ROLL_FORM_SETUP_MEDIUM if weight < MEDIUM_PART_LB else ROLL_FORM_SETUP_HEAVY
        return WeightRuleResult("1", setup, run, requires_press_brake=wall >= PRESS_BRAKE_MIN_WALL_IN)

    def compute_secondary(self, weight: float, wall: float) -> WorkCenterTime:
        if wall < PRESS_BRAKE_MIN_WALL_IN or weight < LIGHT_PART_LB:
            run = 0.0
        elif weight < MEDIUM_PART_LB:
            run = PRESS_BRAKE_RUN_MEDIUM
        else:
            run = PRESS_BRAKE_RUN_HEAVY
        return WorkCenterTime(PRESS_BRAKE_CODE, PRESS_BRAKE_SETUP_HOURS, run)


def deburr_length(cut_length: float, material_length: float) -> float:
    return cut_length if cut_length > 0 else material_length


def gate_secondary(
    weight_rule: WeightRuleResult | None,
    secondary: WorkCenterTime | None,
) -> WorkCenterTime | None:
    """Return ``secondary`` only if the weight rule requires it and it has run time."""

    if weight_rule is None or secondary is None:
        return None
    if weight_rule.requires_press_brake and secondary.run_hours > 0:
        return secondary
    return None


def estimate_post_process(
    rules: PostProcessRuleProvider,
    *,
    cut_length: float,
    material_length: float,
    wall: float,
    weight: float | None,
) -> PostProcessEstimate:
    deburr = rules.compute_deburr(deburr_length(cut_length, material_length))

    weight_rule: WeightRuleResult | None = None
    secondary: WorkCenterTime | None = None
    if weight is not None and weight > 0:
        weight_rule = rules.compute_weight_rule(weight, wall)
        secondary = rules.compute_secondary(weight, wall)

    gated = gate_secondary(weight_rule, secondary)
    if secondary is not None and gated is None:
        log.debug("Press brake not applied (weight=%s wall=%.3f)", weight, wall)
    return PostProcessEstimate(deburr=deburr, weight_rule=weight_rule, secondary=gated)
