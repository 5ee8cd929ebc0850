"""Simple dependency-injection helpers for the stock-quoting pass."""
from __future__ import annotations

from dataclasses import dataclass, replace

from stock_quoter.domain import ProcessingOptions
from stock_quoter.geometry.pipe_schedule import PipeScheduleTable
from stock_quoter.geometry.round_bar import InsideDiameterValidator
from stock_quoter.pricing.base import (
    CuttingParameterProvider,
    PipeScheduleResolver,
    PostProcessRuleProvider,
    RoundBarValidator,
)
from stock_quoter.pricing.cutting_params import TubeCuttingParameters
from stock_quoter.pricing.post_process import TubeWorkCenterRules


@dataclass(frozen=True)
class ServiceContainer:
    """Bundle the lookup services a pass consults."""

    round_bar_validator: RoundBarValidator
    pipe_resolver: PipeScheduleResolver
    cut_params: CuttingParameterProvider
    post_process_rules: PostProcessRuleProvider

    def with_overrides(self, **services: object) -> "ServiceContainer":
        """Return a copy with some services swapped, e.g. test doubles."""

        return replace(self, **services)  # type: ignore[arg-type]


def create_default_container(options: ProcessingOptions | None = None) -> ServiceContainer:
    """Create a :class:`ServiceContainer` wired to the built-in shop tables."""

    opts = options or ProcessingOptions()
    return ServiceContainer(
        round_bar_validator=InsideDiameterValidator(),
        pipe_resolver=PipeScheduleTable(),
        cut_params=TubeCuttingParameters(),
        post_process_rules=TubeWorkCenterRules(opts.deburr_rate_in_per_hour),
    )


__all__ = ["ServiceContainer", "create_default_container"]
