"""Turn raw stock attribute text into typed dimensions.

Parsing is lenient: a numeric field that cannot be read degrades to zero
(cut length to the material length) and the reason is recorded in
:attr:`ParsedDimensions.issues`. Only the three fields needed to classify
an item at all are mandatory.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType

from stock_quoter.domain import (
    MissingRequiredDimension,
    ParsedDimensions,
    ParseIssue,
    RawDimensionSet,
)
from stock_quoter.utils.formatting import format_dot
from stock_quoter.utils.number_parse import first_inch_value, parse_float

__all__ = [
    "REQUIRED_FIELDS",
    "require_dimensions",
    "parse_dimensions",
    "parse_cross_section_od",
    "parse_cross_dims",
]

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("shape", "cross_section", "wall_thickness")

_DIM_SPLIT_RE = re.compile(r"[xX]")


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def require_dimensions(raw: RawDimensionSet) -> None:
    """Raise :class:`MissingRequiredDimension` if any required field is blank."""

    missing = tuple(name for name in REQUIRED_FIELDS if _blank(getattr(raw, name)))
    if missing:
        raise MissingRequiredDimension(missing)


def parse_cross_section_od(cross_section: str | None) -> float:
    """Return the outer diameter (or major dimension) of a cross-section, else 0."""

    value = first_inch_value(cross_section)
    return value if value is not None else 0.0


def parse_cross_dims(cross_section: str | None) -> tuple[str, str]:
    """Return the two formatted cross-section dimensions, e.g. ``("2", ".75")``.

    A single dimension is used for both sides. A side that does not parse
    comes back as an empty string.
    """

    if _blank(cross_section):
        return "", ""
    parts = [p for p in _DIM_SPLIT_RE.split((cross_section or "").replace('"', "")) if p]
    if not parts:
        return "", ""

    def _fmt(text: str) -> str:
        value = parse_float(text)
        return format_dot(value) if value is not None else ""

    if len(parts) == 1:
        side = _fmt(parts[0])
        return side, side
    return _fmt(parts[0]), _fmt(parts[1])


def _parse_field(
    name: str,
    text: str | None,
    issues: dict[str, ParseIssue],
) -> float | None:
    if _blank(text):
        issues[name] = ParseIssue.MISSING
        return None
    value = parse_float(text)
    if value is None:
        issues[name] = ParseIssue.UNPARSEABLE
        log.debug("Could not parse %s=%r; degrading", name, text)
    return value


def parse_dimensions(raw: RawDimensionSet) -> ParsedDimensions:
    """Project ``raw`` onto numeric dimensions.

    Raises :class:`MissingRequiredDimension` when shape, cross-section or
    wall thickness is blank. Every other problem degrades to a default.
    """

    require_dimensions(raw)
    issues: dict[str, ParseIssue] = {}

    wall = _parse_field("wall", raw.wall_thickness, issues)
    length = _parse_field("length", raw.material_length, issues)
    material_length = length if length is not None else 0.0

    cut_length = _parse_field("cut_length", raw.cut_length, issues)
    if cut_length is None:
        cut_length = material_length
        issues["cut_length"] = ParseIssue.DEFAULTED

    holes = _parse_field("holes", raw.hole_count, issues)

    weight = None if _blank(raw.weight) else parse_float(raw.weight)

    od = first_inch_value(raw.cross_section)
    if od is None:
        issues["outer_diameter"] = ParseIssue.UNPARSEABLE
        log.debug("No numeric token in cross-section %r", raw.cross_section)

    return ParsedDimensions(
        shape=(raw.shape or "").strip(),
        cross_section=(raw.cross_section or "").strip(),
        outer_diameter=od if od is not None else 0.0,
        wall=wall if wall is not None else 0.0,
        length=material_length,
        cut_length=cut_length,
        holes=holes if holes is not None else 0.0,
        weight=weight,
        issues=MappingProxyType(issues),
    )
