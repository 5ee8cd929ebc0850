"""Common types for the lookup services the estimators depend on."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from stock_quoter.domain import WeightRuleResult, WorkCenterTime


@dataclass(frozen=True)
class PipeMatch:
    """Result of a pipe-schedule lookup.

    ``nominal_size`` is already formatted for material codes (``2"``).
    """

    matched: bool
    nominal_size: str = ""
    schedule_code: str = ""


NO_PIPE_MATCH = PipeMatch(False)


@dataclass(frozen=True)
class CutParameters:
    """Laser cutting parameters for one material/wall combination."""

    cut_speed_in_per_min: float
    pierce_time_sec: float
    kerf_in: float = 0.0


class RoundBarValidator(Protocol):
    def is_round_bar(self, outer_diameter: float, inner_diameter: float) -> bool:
        ...


class PipeScheduleResolver(Protocol):
    def resolve(self, outer_diameter: float, wall: float, material_category: str) -> PipeMatch:
        ...


class CuttingParameterProvider(Protocol):
    def get(self, material_category: str, wall: float) -> CutParameters:
        ...


class PostProcessRuleProvider(Protocol):
    """Work-center rules for operations that follow the primary cut."""

    def compute_deburr(self, length: float) -> WorkCenterTime:
        ...

    def compute_weight_rule(self, weight: float, wall: float) -> WeightRuleResult:
        ...

    def compute_secondary(self, weight: float, wall: float) -> WorkCenterTime:
        ...


__all__ = [
    "PipeMatch",
    "NO_PIPE_MATCH",
    "CutParameters",
    "RoundBarValidator",
    "PipeScheduleResolver",
    "CuttingParameterProvider",
    "PostProcessRuleProvider",
]
