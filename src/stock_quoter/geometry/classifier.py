"""Decide the stock category for a set of parsed dimensions."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from stock_quoter.domain import CollaboratorUnavailable, ParsedDimensions, StockCategory, StockClassification
from stock_quoter.pricing.base import NO_PIPE_MATCH, PipeMatch, PipeScheduleResolver, RoundBarValidator

__all__ = [
    "MAX_TUBE_WALL_RATIO",
    "classify",
    "is_round_shape",
]

log = logging.getLogger(__name__)

# A round item whose wall exceeds this fraction of its OD is costed as solid bar.
MAX_TUBE_WALL_RATIO = 0.3

_SHAPE_TAGS: Mapping[str, StockCategory] = MappingProxyType(
    {
        "square": StockCategory.SQUARE,
        "rectangle": StockCategory.RECTANGLE,
        "angle": StockCategory.ANGLE,
        "channel": StockCategory.CHANNEL,
    }
)


def is_round_shape(shape: str | None) -> bool:
    return (shape or "").strip().lower() == "round"


def _resolve_pipe(
    resolver: PipeScheduleResolver,
    dims: ParsedDimensions,
    material_category: str,
) -> PipeMatch:
    try:
        return resolver.resolve(dims.outer_diameter, dims.wall, material_category)
    except CollaboratorUnavailable as exc:
        log.warning(
            "Pipe schedule lookup unavailable for OD %.3f wall %.3f: %s; treating as tube",
            dims.outer_diameter,
            dims.wall,
            exc,
        )
    except Exception:
        log.exception(
            "Pipe schedule lookup failed for OD %.3f wall %.3f; treating as tube",
            dims.outer_diameter,
            dims.wall,
        )
    return NO_PIPE_MATCH


def classify(
    dims: ParsedDimensions,
    *,
    material_category: str,
    round_bar_validator: RoundBarValidator,
    pipe_resolver: PipeScheduleResolver,
) -> StockClassification:
    """Classify ``dims`` into a :class:`StockCategory`.

    Round items with a measurable OD are split into bar, tube and pipe:
    bar when the validator says so, when there is no wall, or when the
    wall is too thick relative to the OD to be worth cutting as tube;
    pipe when the schedule table matches; tube otherwise.

    Everything else dispatches on the shape tag. An unrecognised tag is
    routed as channel but flagged with ``unknown_shape`` so callers can
    report it.
    """

    od = dims.outer_diameter
    wall = dims.wall

    if is_round_shape(dims.shape) and od > 0:
        inner = od - 2.0 * wall
        if (
            round_bar_validator.is_round_bar(od, inner)
            or wall <= 0
            or wall > od * MAX_TUBE_WALL_RATIO
        ):
            return StockClassification(StockCategory.ROUND_BAR, dims, inner_diameter=inner)

        match = _resolve_pipe(pipe_resolver, dims, material_category)
        if match.matched:
            return StockClassification(
                StockCategory.PIPE,
                dims,
                inner_diameter=inner,
                is_pipe=True,
                nominal_size=match.nominal_size,
                schedule_code=match.schedule_code,
            )
        return StockClassification(StockCategory.ROUND_TUBE, dims, inner_diameter=inner)

    category = _SHAPE_TAGS.get(dims.shape.strip().lower())
    if category is None:
        log.warning("Unrecognised shape %r (cross-section %r); routing as channel", dims.shape, dims.cross_section)
        return StockClassification(StockCategory.CHANNEL, dims, unknown_shape=True)
    return StockClassification(category, dims)
