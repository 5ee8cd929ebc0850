"""Tube laser feed rates and pierce times keyed by material and wall."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Sequence

from stock_quoter.pricing.base import CutParameters

__all__ = [
    "CARBON_STEEL_FEEDS",
    "STAINLESS_FEEDS",
    "CARBON_STEEL_PIERCE",
    "STAINLESS_PIERCE",
    "FEED_FACTOR",
    "TubeCuttingParameters",
    "lookup_tier",
]

log = logging.getLogger(__name__)

# (max wall inches, value); last entry catches everything thicker.
Tier = tuple[float, float]

CARBON_STEEL_FEEDS: Sequence[Tier] = (
    (0.045, 295.0),
    (0.055, 271.0),
    (0.065, 251.0),
    (0.085, 196.0),
    (0.105, 161.0),
    (0.125, 149.0),
    (0.145, 137.0),
    (0.165, 129.0),
    (0.185, 122.0),
    (0.205, 118.0),
    (0.255, 106.0),
    (0.32, 87.0),
    (0.38, 47.0),
    (0.405, 36.0),
    (0.455, 19.0),
    (float("inf"), 7.0),
)

STAINLESS_FEEDS: Sequence[Tier] = (
    (0.045, 397.0),
    (0.055, 354.0),
    (0.065, 318.0),
    (0.085, 251.0),
    (0.105, 196.0),
    (0.125, 157.0),
    (0.145, 135.0),
    (0.165, 118.0),
    (0.185, 104.0),
    (0.205, 90.0),
    (0.255, 78.0),
    (0.32, 54.0),
    (0.38, 36.0),
    (0.405, 30.0),
    (0.455, 18.0),
    (float("inf"), 8.0),
)

CARBON_STEEL_PIERCE: Sequence[Tier] = (
    (0.085, 0.05),
    (0.105, 0.07),
    (0.125, 0.10),
    (0.145, 0.20),
    (0.165, 0.30),
    (0.185, 0.40),
    (0.205, 0.50),
    (0.255, 0.70),
    (0.32, 2.80),
    (float("inf"), 5.0),
)

STAINLESS_PIERCE: Sequence[Tier] = (
    (0.085, 0.05),
    (0.105, 0.07),
    (0.125, 0.08),
    (0.145, 0.45),
    (0.205, 0.60),
    (0.255, 2.00),
    (0.32, 3.00),
    (float("inf"), 5.0),
)

# Applied to every table feed rate.
FEED_FACTOR = 0.85

_KERF_IN: Mapping[str, float] = MappingProxyType(
    {"carbonsteel": 0.02, "stainlesssteel": 0.02, "aluminum": 0.03}
)


def lookup_tier(tiers: Sequence[Tier], value: float) -> float:
    """Return the value of the first tier whose bound is ``>= value``."""

    for bound, result in tiers:
        if value <= bound:
            return result
    return tiers[-1][1]


def _normalize_category(name: str | None) -> str:
    return (name or "").strip().lower()


class TubeCuttingParameters:
    """Default :class:`~stock_quoter.pricing.base.CuttingParameterProvider`.

    Categories are ``CarbonSteel``, ``StainlessSteel`` and ``Aluminum``
    (case-insensitive). Aluminum has no table and reports zero speed and
    pierce time; anything unrecognised is cut as carbon steel.
    """

    def get(self, material_category: str, wall: float) -> CutParameters:
        category = _normalize_category(material_category)
        if category == "aluminum":
            return CutParameters(0.0, 0.0, kerf_in=_KERF_IN["aluminum"])
        if category == "stainlesssteel":
            feeds, pierce = STAINLESS_FEEDS, STAINLESS_PIERCE
        else:
            if category != "carbonsteel":
                log.debug("No cutting table for %r; using carbon steel", material_category)
            feeds, pierce = CARBON_STEEL_FEEDS, CARBON_STEEL_PIERCE
        return CutParameters(
            cut_speed_in_per_min=lookup_tier(feeds, wall) * FEED_FACTOR,
            pierce_time_sec=lookup_tier(pierce, wall),
            kerf_in=_KERF_IN.get(category, 0.02),
        )
