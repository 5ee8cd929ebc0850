"""Pipe schedule resolution by measured OD and wall thickness.

Units are inches. A measured tube is treated as pipe when its OD lands
within ``OD_TOLERANCE_IN`` of a nominal pipe OD and its wall lands within
``WALL_TOLERANCE_IN`` of one of that size's schedule walls.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

from stock_quoter.pricing.base import NO_PIPE_MATCH, PipeMatch
from stock_quoter.utils.formatting import format_dot

__all__ = [
    "OD_TOLERANCE_IN",
    "WALL_TOLERANCE_IN",
    "PIPE_SIZES",
    "PipeSize",
    "PipeScheduleTable",
    "nominal_size_text",
]

log = logging.getLogger(__name__)

OD_TOLERANCE_IN = 0.010
WALL_TOLERANCE_IN = 0.005


class PipeSize(NamedTuple):
    outer_diameter: float
    nominal: float
    walls: Sequence[tuple[float, str]]


# Wall entries are checked in order; the first within tolerance wins.
PIPE_SIZES: Sequence[PipeSize] = (
    PipeSize(0.405, 0.125, ((0.049, "10"), (0.068, "40"), (0.095, "80"))),
    PipeSize(0.540, 0.25, ((0.065, "10"), (0.088, "40"), (0.119, "80"))),
    PipeSize(0.675, 0.375, ((0.065, "10"), (0.091, "40"), (0.126, "80"))),
    PipeSize(0.840, 0.5, ((0.065, "5"), (0.083, "10"), (0.109, "40"), (0.147, "80"), (0.187, "160"), (0.294, "XX"))),
    PipeSize(1.050, 0.75, ((0.065, "5"), (0.083, "10"), (0.113, "40"), (0.154, "80"), (0.218, "160"), (0.308, "XX"))),
    PipeSize(1.315, 1.0, ((0.065, "5"), (0.109, "10"), (0.133, "40"), (0.179, "80"), (0.250, "160"), (0.358, "XX"))),
    PipeSize(1.660, 1.25, ((0.065, "5"), (0.109, "10"), (0.140, "40"), (0.191, "80"), (0.250, "160"), (0.382, "XX"))),
    PipeSize(1.900, 1.5, ((0.065, "5"), (0.109, "10"), (0.145, "40"), (0.200, "80"), (0.281, "160"), (0.400, "XX"))),
    PipeSize(2.375, 2.0, ((0.065, "5"), (0.120, "10"), (0.154, "40"), (0.218, "80"), (0.344, "160"), (0.436, "XX"))),
    PipeSize(2.875, 2.5, ((0.083, "5"), (0.120, "10"), (0.203, "40"), (0.276, "80"), (0.375, "160"), (0.552, "XX"))),
    PipeSize(3.500, 3.0, ((0.083, "5"), (0.120, "10"), (0.216, "40"), (0.300, "80"), (0.438, "160"), (0.600, "XX"))),
    PipeSize(4.000, 3.5, ((0.083, "5"), (0.120, "10"), (0.226, "40"), (0.318, "80"), (0.636, "XX"))),
    PipeSize(
        4.500,
        4.0,
        ((0.083, "5"), (0.120, "10"), (0.237, "40"), (0.337, "80"), (0.438, "120"), (0.531, "160"), (0.674, "XX")),
    ),
    PipeSize(5.000, 5.0, ((0.247, "STD"), (0.120, "XX"))),
    PipeSize(
        5.563,
        5.0,
        ((0.109, "5"), (0.134, "10"), (0.258, "40"), (0.375, "80"), (0.500, "120"), (0.625, "160"), (0.750, "XX")),
    ),
    PipeSize(
        6.625,
        6.0,
        ((0.109, "5"), (0.134, "10"), (0.280, "40"), (0.432, "80"), (0.562, "120"), (0.718, "160"), (0.864, "XX")),
    ),
    PipeSize(
        8.625,
        8.0,
        ((0.109, "5"), (0.148, "10"), (0.322, "40"), (0.500, "80"), (0.718, "120"), (0.906, "160"), (0.875, "XX")),
    ),
    PipeSize(
        10.750,
        10.0,
        ((0.134, "5"), (0.165, "10"), (0.365, "40"), (0.500, "80S"), (0.593, "80"), (0.843, "120"), (1.125, "160")),
    ),
    PipeSize(
        12.750,
        12.0,
        (
            (0.156, "5"), (0.180, "10"), (0.375, "40S"), (0.406, "40"),
            (0.500, "80S"), (0.687, "80"), (1.000, "120"), (1.312, "160"),
        ),
    ),
    PipeSize(
        14.000,
        14.0,
        (
            (0.156, "5"), (0.188, "10S"), (0.250, "10"), (0.375, "40S"), (0.437, "40"),
            (0.500, "80S"), (0.750, "80"), (1.093, "120"), (1.406, "160"),
        ),
    ),
    PipeSize(
        16.000,
        16.0,
        ((0.156, "5"), (0.188, "10S"), (0.250, "10"), (0.375, "40S"), (0.843, "80"), (1.218, "120"), (1.437, "160")),
    ),
    PipeSize(
        18.000,
        18.0,
        (
            (0.165, "5"), (0.188, "10S"), (0.250, "10"), (0.375, "40S"), (0.562, "40"),
            (0.500, "80S"), (0.937, "80"), (1.375, "120"), (1.781, "160"),
        ),
    ),
    PipeSize(
        20.000,
        20.0,
        (
            (0.188, "5"), (0.218, "10S"), (0.250, "10"), (0.375, "40S"), (0.593, "40"),
            (0.500, "80S"), (1.031, "80"), (1.500, "120"), (1.968, "160"),
        ),
    ),
    PipeSize(
        24.000,
        24.0,
        (
            (0.218, "5"), (0.250, "10"), (0.375, "40S"), (0.687, "40"),
            (0.500, "80S"), (1.218, "80"), (1.812, "120"), (2.343, "160"),
        ),
    ),
)

# 16" x .500 wall is not in the table; its schedule depends on the alloy.
_SIXTEEN_INCH_HALF_WALL = (16.000, 0.500)


def nominal_size_text(nominal: float) -> str:
    """Render a nominal pipe size for material codes (``2"``, ``.5"``)."""

    return f'{format_dot(nominal)}"'


class PipeScheduleTable:
    """Default :class:`~stock_quoter.pricing.base.PipeScheduleResolver`."""

    def __init__(
        self,
        sizes: Sequence[PipeSize] = PIPE_SIZES,
        *,
        od_tol: float = OD_TOLERANCE_IN,
        wall_tol: float = WALL_TOLERANCE_IN,
    ) -> None:
        self.sizes = sizes
        self.od_tol = od_tol
        self.wall_tol = wall_tol

    def resolve(self, outer_diameter: float, wall: float, material_category: str) -> PipeMatch:
        for size in self.sizes:
            if abs(size.outer_diameter - outer_diameter) > self.od_tol:
                continue
            for nominal_wall, schedule in size.walls:
                if abs(nominal_wall - wall) <= self.wall_tol:
                    log.debug("OD %.3f wall %.3f -> NPS %s SCH %s", outer_diameter, wall, size.nominal, schedule)
                    return PipeMatch(True, nominal_size_text(size.nominal), schedule)

        od, half_wall = _SIXTEEN_INCH_HALF_WALL
        if abs(outer_diameter - od) <= self.od_tol and abs(wall - half_wall) <= self.wall_tol:
            stainless = (material_category or "").strip().lower() == "stainlesssteel"
            return PipeMatch(True, nominal_size_text(16.0), "80S" if stainless else "40")

        return NO_PIPE_MATCH
