from __future__ import annotations
from dataclasses import dataclass, field
import logging

from stock_quoter.domain import (
    CostEstimate,
    MaterialDescriptor,
    MissingRequiredDimension,
    PostProcessEstimate,
    ProcessingOptions,
    RawDimensionSet,
    StockClassification,
)
from stock_quoter.geometry.classifier import classify
from stock_quoter.geometry.dimensions import parse_dimensions
from stock_quoter.pricing.material_code import generate_descriptor
from stock_quoter.pricing.post_process import estimate_post_process
from stock_quoter.pricing.time_estimator import estimate_cost

from .attributes import (
    AttributeStore,
    AttributeWrite,
    apply_writes,
    post_process_writes,
    primary_writes,
    read_snapshot,
)
from .container import ServiceContainer, create_default_container

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockEstimate:
    """Everything computed for one item, before anything is written."""

    classification: StockClassification
    material: MaterialDescriptor
    cost: CostEstimate
    post_process: PostProcessEstimate

    def writes(self) -> list[AttributeWrite]:
        dims = self.classification.dimensions
        return primary_writes(dims.length, self.cost, self.material) + post_process_writes(self.post_process)


@dataclass(frozen=True)
class PassResult:
    """Outcome reported to the caller of :func:`process_stock_item`."""

    ok: bool
    estimate: StockEstimate | None = None
    writes: tuple[AttributeWrite, ...] = field(default_factory=tuple)
    error: str | None = None

    @property
    def classification(self) -> StockClassification | None:
        return self.estimate.classification if self.estimate else None

    @property
    def material(self) -> MaterialDescriptor | None:
        return self.estimate.material if self.estimate else None

    @property
    def cost(self) -> CostEstimate | None:
        return self.estimate.cost if self.estimate else None

    @property
    def post_process(self) -> PostProcessEstimate | None:
        return self.estimate.post_process if self.estimate else None


def estimate_stock_item(
    raw: RawDimensionSet,
    options: ProcessingOptions,
    services: ServiceContainer,
) -> StockEstimate:
    """Run parse -> classify -> {code, cost} -> post-process for ``raw``.

    Pure with respect to the attribute store. Raises
    :class:`MissingRequiredDimension` when the item cannot be classified.
    """

    dims = parse_dimensions(raw)
    classification = classify(
        dims,
        material_category=options.material_category,
        round_bar_validator=services.round_bar_validator,
        pipe_resolver=services.pipe_resolver,
    )
    descriptor = generate_descriptor(
        classification,
        options,
        existing_code=raw.existing_material_code,
        existing_description=raw.existing_description,
    )
    cost = estimate_cost(classification, services.cut_params, options.material_category)
    post = estimate_post_process(
        services.post_process_rules,
        cut_length=dims.cut_length,
        material_length=dims.length,
        wall=dims.wall,
        weight=dims.weight,
    )
    return StockEstimate(classification, descriptor, cost, post)


def process_stock_item(
    store: AttributeStore,
    options: ProcessingOptions | None = None,
    services: ServiceContainer | None = None,
) -> PassResult:
    """Classify and cost the item behind ``store`` and write the results back.

    Never raises: a missing required dimension is reported as a warning
    with no writes; any other fault is logged and reported as a failed
    pass. All values are computed before the first write, but the writes
    themselves are not rolled back if the store fails part way through.
    """

    opts = options or ProcessingOptions()
    svc = services or create_default_container(opts)

    try:
        raw = read_snapshot(store)
        estimate = estimate_stock_item(raw, opts, svc)
        writes = tuple(estimate.writes())
    except MissingRequiredDimension as exc:
        log.warning("Skipping stock item: %s", exc)
        return PassResult(ok=False, error=str(exc))
    except Exception as exc:
        log.exception("Stock estimate failed: %s", exc)
        return PassResult(ok=False, error=f"{type(exc).__name__}: {exc}")

    try:
        apply_writes(store, writes)
    except Exception as exc:
        log.exception("Attribute write-back failed: %s", exc)
        return PassResult(ok=False, estimate=estimate, writes=writes, error=f"{type(exc).__name__}: {exc}")

    log.info(
        "%s %s -> %s (setup %.3f h, run %.4f h)",
        estimate.classification.outcome,
        estimate.material.code,
        estimate.cost.work_center,
        estimate.cost.setup_hours,
        estimate.cost.run_hours,
    )
    return PassResult(ok=True, estimate=estimate, writes=writes)


__all__ = ["StockEstimate", "PassResult", "estimate_stock_item", "process_stock_item"]
