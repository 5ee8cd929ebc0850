from __future__ import annotations

from stock_quoter.app.container import ServiceContainer, create_default_container
from stock_quoter.domain import ProcessingOptions
from stock_quoter.geometry.pipe_schedule import PipeScheduleTable
from stock_quoter.pricing.post_process import TubeWorkCenterRules
from tests.doubles import FixedCutParameters


def test_default_container_uses_shop_tables() -> None:
    container = create_default_container()

    assert isinstance(container, ServiceContainer)
    assert isinstance(container.pipe_resolver, PipeScheduleTable)
    assert isinstance(container.post_process_rules, TubeWorkCenterRules)
    assert container.post_process_rules.deburr_rate_in_per_hour == 3600.0


def test_deburr_rate_comes_from_options() -> None:
    container = create_default_container(ProcessingOptions(deburr_rate_in_per_hour=1200.0))

    assert container.post_process_rules.deburr_rate_in_per_hour == 1200.0


def test_with_overrides_returns_new_container() -> None:
    base = create_default_container()
    fake = FixedCutParameters()

    swapped = base.with_overrides(cut_params=fake)

    assert swapped.cut_params is fake
    assert base.cut_params is not fake
    assert swapped.pipe_resolver is base.pipe_resolver
