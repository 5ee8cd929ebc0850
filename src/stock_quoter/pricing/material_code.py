"""Material code (``OptiMaterial``) and description text for stock items.

Codes look like ``R.304L1.25"``, ``T.304L2.375"ODX.154"``,
``P.BLK2"SCH40`` or ``A.HR2"X2"X.25"``. Both values are write-once: an
item that already carries a code or description keeps it.
"""
from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

from stock_quoter.domain import MaterialDescriptor, ProcessingOptions, StockCategory, StockClassification
from stock_quoter.geometry.dimensions import parse_cross_dims
from stock_quoter.utils.formatting import format_dot

__all__ = [
    "CATEGORY_PREFIX",
    "CATEGORY_NOUN",
    "STANDARD_ROUND_BAR_SIZES",
    "RELABELED_MATERIALS",
    "descriptor_material",
    "material_code",
    "default_description",
    "generate_descriptor",
    "is_standard_round_bar",
]

CATEGORY_PREFIX: Mapping[StockCategory, str] = MappingProxyType(
    {
        StockCategory.ROUND_BAR: "R.",
        StockCategory.ROUND_TUBE: "T.",
        StockCategory.PIPE: "P.",
        StockCategory.SQUARE: "T.",
        StockCategory.RECTANGLE: "T.",
        StockCategory.ANGLE: "A.",
        StockCategory.CHANNEL: "C.",
    }
)

CATEGORY_NOUN: Mapping[StockCategory, str] = MappingProxyType(
    {
        StockCategory.ROUND_BAR: "ROUND",
        StockCategory.ROUND_TUBE: "TUBE",
        StockCategory.PIPE: "PIPE",
        StockCategory.SQUARE: "TUBE",
        StockCategory.RECTANGLE: "TUBE",
        StockCategory.ANGLE: "ANGLE",
        StockCategory.CHANNEL: "TUBE",
    }
)

# Raw grades that are bought as black pipe or hot-rolled shapes.
RELABELED_MATERIALS = frozenset({"A36", "ALNZD"})

STANDARD_ROUND_BAR_SIZES: tuple[float, ...] = (
    0.125, 0.1563, 0.1875, 0.25, 0.3125, 0.375, 0.4375, 0.5, 0.625, 0.75,
    0.875, 0.9375, 1.0, 1.1875, 1.25, 1.375, 1.5, 1.75, 2.0, 2.5, 3.0,
)

_STANDARD_SIZE_TOL = 0.001


def _inch(value: float) -> str:
    return f'{format_dot(value)}"'


def descriptor_material(material: str, category: StockCategory) -> str:
    """Return the material label used in codes and descriptions."""

    label = (material or "").strip()
    if label.upper() in RELABELED_MATERIALS:
        return "BLK" if category is StockCategory.PIPE else "HR"
    return label


def is_standard_round_bar(outer_diameter: float) -> bool:
    return any(abs(outer_diameter - size) <= _STANDARD_SIZE_TOL for size in STANDARD_ROUND_BAR_SIZES)


def material_code(
    classification: StockClassification,
    material: str,
    *,
    metric_nonstandard_round_bar: bool = False,
) -> str:
    """Build the canonical material code for ``classification``."""

    category = classification.category
    dims = classification.dimensions
    label = descriptor_material(material, category)
    prefix = CATEGORY_PREFIX[category]

    if category is StockCategory.ROUND_BAR:
        od = dims.outer_diameter
        if metric_nonstandard_round_bar and not is_standard_round_bar(od):
            return f"{prefix}{label}M{math.floor(od * 25.4)}"
        return f"{prefix}{label}{_inch(od)}"

    if category is StockCategory.PIPE and classification.schedule_code:
        return f"{prefix}{label}{classification.nominal_size}SCH{classification.schedule_code}"

    if category in (StockCategory.ROUND_TUBE, StockCategory.PIPE):
        return f"{prefix}{label}{_inch(dims.outer_diameter)}ODX{_inch(dims.wall)}"

    first, second = parse_cross_dims(dims.cross_section)
    if category is StockCategory.SQUARE:
        return f'{prefix}{label}{first}"SQX{_inch(dims.wall)}'
    return f'{prefix}{label}{first}"X{second}"X{_inch(dims.wall)}'


def default_description(material: str, category: StockCategory) -> str:
    return f"{descriptor_material(material, category)} {CATEGORY_NOUN[category]}"


def generate_descriptor(
    classification: StockClassification,
    options: ProcessingOptions,
    *,
    existing_code: str | None = None,
    existing_description: str | None = None,
) -> MaterialDescriptor:
    """Return the item's material code and description.

    Existing non-empty values win and are flagged as not needing a write,
    so running the pass again never changes them.
    """

    if existing_code and existing_code.strip():
        code, write_code = existing_code.strip(), False
    else:
        code = material_code(
            classification,
            options.material,
            metric_nonstandard_round_bar=options.metric_nonstandard_round_bar,
        )
        write_code = True

    if existing_description and existing_description.strip():
        description, write_description = existing_description.strip(), False
    else:
        description = default_description(options.material, classification.category)
        write_description = True

    return MaterialDescriptor(code, description, write_code=write_code, write_description=write_description)
