"""Value records shared by the classification and costing stages.

Every record here is a frozen dataclass created once per stock item and
handed from one stage to the next; no stage mutates its input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

__all__ = [
    "StockCategory",
    "ParseIssue",
    "RawDimensionSet",
    "ParsedDimensions",
    "StockClassification",
    "MaterialDescriptor",
    "TimeComponents",
    "CostEstimate",
    "WorkCenterTime",
    "WeightRuleResult",
    "PostProcessEstimate",
    "ProcessingOptions",
    "StockProcessingError",
    "MissingRequiredDimension",
    "CollaboratorUnavailable",
    "UNKNOWN_SHAPE_OUTCOME",
]

UNKNOWN_SHAPE_OUTCOME = "UnknownShape->Channel"


class StockCategory(str, Enum):
    """Shape category a stock item is routed and coded as."""

    ROUND_BAR = "RoundBar"
    ROUND_TUBE = "RoundTube"
    PIPE = "Pipe"
    SQUARE = "Square"
    RECTANGLE = "Rectangle"
    ANGLE = "Angle"
    CHANNEL = "Channel"

    @property
    def is_round(self) -> bool:
        return self in (StockCategory.ROUND_BAR, StockCategory.ROUND_TUBE, StockCategory.PIPE)


class ParseIssue(str, Enum):
    """Why a parsed numeric field does not hold a measured value."""

    MISSING = "missing"
    UNPARSEABLE = "unparseable"
    DEFAULTED = "defaulted"


class StockProcessingError(RuntimeError):
    """Raised when a stock item cannot be classified or costed."""


class MissingRequiredDimension(StockProcessingError):
    """Raised when shape, cross-section or wall thickness text is blank."""

    def __init__(self, names: tuple[str, ...]):
        self.names = names
        super().__init__(f"missing required dimension(s): {', '.join(names)}")


class CollaboratorUnavailable(StockProcessingError):
    """Raised by a lookup service that cannot answer right now."""


@dataclass(frozen=True)
class RawDimensionSet:
    """Attribute text captured from the store before any parsing.

    ``None`` means the attribute was absent or blank; it is never
    replaced by zero at this stage.
    """

    shape: str | None = None
    cross_section: str | None = None
    wall_thickness: str | None = None
    material_length: str | None = None
    cut_length: str | None = None
    hole_count: str | None = None
    weight: str | None = None
    existing_material_code: str | None = None
    existing_description: str | None = None


@dataclass(frozen=True)
class ParsedDimensions:
    """Numeric projection of :class:`RawDimensionSet` in inches/pounds."""

    shape: str
    cross_section: str
    outer_diameter: float = 0.0
    wall: float = 0.0
    length: float = 0.0
    cut_length: float = 0.0
    holes: float = 0.0
    weight: float | None = None
    issues: Mapping[str, ParseIssue] = field(default_factory=dict)

    def is_measured(self, name: str) -> bool:
        """Return ``True`` when ``name`` came from a parsed, present value."""

        return name not in self.issues


@dataclass(frozen=True)
class StockClassification:
    category: StockCategory
    dimensions: ParsedDimensions
    inner_diameter: float = 0.0
    is_pipe: bool = False
    nominal_size: str = ""
    schedule_code: str = ""
    unknown_shape: bool = False

    @property
    def outcome(self) -> str:
        if self.unknown_shape:
            return UNKNOWN_SHAPE_OUTCOME
        return self.category.value


@dataclass(frozen=True)
class MaterialDescriptor:
    """Material code and description, with write-once flags.

    When the store already held a value, it is echoed back and the
    matching ``write_*`` flag is ``False``.
    """

    code: str
    description: str
    write_code: bool = True
    write_description: bool = True


@dataclass(frozen=True)
class TimeComponents:
    """Run-time pieces in seconds."""

    cut: float = 0.0
    cycle: float = 0.0
    pierce: float = 0.0
    traverse: float = 0.0

    @property
    def total_seconds(self) -> float:
        return self.cut + self.cycle + self.pierce + self.traverse


@dataclass(frozen=True)
class CostEstimate:
    work_center: str
    setup_hours: float
    run_hours: float
    components: TimeComponents = field(default_factory=TimeComponents)
    multiplier: float = 1.0
    heavy_floor_applied: bool = False
    thick_wall_applied: bool = False


@dataclass(frozen=True)
class WorkCenterTime:
    code: str
    setup_hours: float
    run_hours: float


@dataclass(frozen=True)
class WeightRuleResult:
    """Roll-form estimate plus the flag that unlocks the press brake."""

    code: str
    setup_hours: float
    run_hours: float
    requires_press_brake: bool = False


@dataclass(frozen=True)
class PostProcessEstimate:
    deburr: WorkCenterTime
    weight_rule: WeightRuleResult | None = None
    secondary: WorkCenterTime | None = None


@dataclass(frozen=True)
class ProcessingOptions:
    """Per-run material selection and tunables."""

    material: str = "304L"
    material_category: str = "StainlessSteel"
    deburr_rate_in_per_hour: float = 3600.0
    metric_nonstandard_round_bar: bool = False
