"""Attribute-store access: the snapshot read at the start of a pass and
the ordered write-back at the end of it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Protocol

from stock_quoter.domain import (
    CostEstimate,
    MaterialDescriptor,
    PostProcessEstimate,
    RawDimensionSet,
)
from stock_quoter.utils.formatting import format_dot, format_fixed, format_number

__all__ = [
    "PropertyKind",
    "AttributeStore",
    "InMemoryAttributeStore",
    "AttributeWrite",
    "INPUT_KEYS",
    "read_snapshot",
    "primary_writes",
    "post_process_writes",
    "apply_writes",
]


class PropertyKind(str, Enum):
    TEXT = "Text"
    NUMBER = "Number"


class AttributeStore(Protocol):
    """Custom-property access for one stock item."""

    def get(self, name: str) -> str | None:
        ...

    def set(self, name: str, value: str, kind: PropertyKind) -> None:
        ...


class InMemoryAttributeStore:
    """Dictionary-backed :class:`AttributeStore` used by the CLI and tests."""

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self.values: dict[str, str] = {}
        self.kinds: dict[str, PropertyKind] = {}
        for name, value in (values or {}).items():
            if value is None:
                continue
            self.values[name] = str(value)
            self.kinds[name] = PropertyKind.TEXT

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def set(self, name: str, value: str, kind: PropertyKind) -> None:
        self.values[name] = value
        self.kinds[name] = kind

    def as_dict(self) -> dict[str, str]:
        return dict(self.values)


# RawDimensionSet field -> attribute name
INPUT_KEYS: Mapping[str, str] = {
    "shape": "Shape",
    "cross_section": "CrossSection",
    "wall_thickness": "Wall Thickness",
    "material_length": "Material Length",
    "cut_length": "Cut Length",
    "hole_count": "Number of Holes",
    "weight": "Weight",
    "existing_material_code": "OptiMaterial",
    "existing_description": "Description",
}


def _read(store: AttributeStore, name: str) -> str | None:
    value = store.get(name)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def read_snapshot(store: AttributeStore) -> RawDimensionSet:
    """Capture every input attribute once, stripped, blanks as ``None``."""

    return RawDimensionSet(**{field: _read(store, key) for field, key in INPUT_KEYS.items()})


@dataclass(frozen=True)
class AttributeWrite:
    name: str
    value: str
    kind: PropertyKind = PropertyKind.TEXT


def primary_writes(
    material_length: float,
    cost: CostEstimate,
    descriptor: MaterialDescriptor,
) -> list[AttributeWrite]:
    """Writes for the routing (OP20) and material fields, in store order."""

    writes = [
        AttributeWrite("rbMaterialType", "1"),
        AttributeWrite("F300_Length", format_fixed(material_length, 3), PropertyKind.NUMBER),
        AttributeWrite("OP20", cost.work_center),
        AttributeWrite("OP20_S", format_dot(cost.setup_hours)),
        AttributeWrite("OP20_R", format_fixed(cost.run_hours, 4), PropertyKind.NUMBER),
    ]
    if descriptor.write_code:
        writes.append(AttributeWrite("OptiMaterial", descriptor.code))
    if descriptor.write_description:
        writes.append(AttributeWrite("Description", descriptor.description))
    return writes


def post_process_writes(estimate: PostProcessEstimate) -> list[AttributeWrite]:
    writes: list[AttributeWrite] = []
    rule = estimate.weight_rule
    if rule is not None:
        writes.extend(
            [
                AttributeWrite("F325", rule.code),
                AttributeWrite("F325_R", format_fixed(rule.run_hours, 3), PropertyKind.NUMBER),
                AttributeWrite("F325_S", format_dot(rule.setup_hours)),
            ]
        )
    secondary = estimate.secondary
    if secondary is not None:
        writes.extend(
            [
                AttributeWrite(f"{secondary.code}_S", format_dot(secondary.setup_hours)),
                AttributeWrite(f"{secondary.code}_R", format_dot(secondary.run_hours)),
            ]
        )
    deburr = estimate.deburr
    writes.extend(
        [
            AttributeWrite(f"{deburr.code}_R", format_fixed(deburr.run_hours, 3), PropertyKind.NUMBER),
            AttributeWrite(f"{deburr.code}_S", format_number(deburr.setup_hours), PropertyKind.NUMBER),
        ]
    )
    return writes


def apply_writes(store: AttributeStore, writes: Iterable[AttributeWrite]) -> int:
    """Push ``writes`` to ``store`` in order and return how many were made.

    Writes are not transactional: if the store raises part way through,
    earlier writes stay in place.
    """

    count = 0
    for write in writes:
        store.set(write.name, write.value, write.kind)
        count += 1
    return count
