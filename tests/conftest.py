from __future__ import annotations

from typing import Callable

import pytest

from stock_quoter.app.attributes import InMemoryAttributeStore
from stock_quoter.app.container import ServiceContainer, create_default_container
from stock_quoter.domain import ProcessingOptions, RawDimensionSet
from stock_quoter.geometry.dimensions import parse_dimensions
from tests.doubles import FixedPipeResolver


@pytest.fixture
def options() -> ProcessingOptions:
    return ProcessingOptions(material="304L", material_category="StainlessSteel")


@pytest.fixture
def no_pipe_services(options: ProcessingOptions) -> ServiceContainer:
    """Default services with a resolver that never reports pipe."""

    return create_default_container(options).with_overrides(pipe_resolver=FixedPipeResolver())


@pytest.fixture
def make_store() -> Callable[..., InMemoryAttributeStore]:
    def _make(**overrides: object) -> InMemoryAttributeStore:
        values: dict[str, object] = {
            "Shape": "Round",
            "CrossSection": '2.375"OD',
            "Wall Thickness": ".154",
            "Material Length": "144",
            "Number of Holes": "0",
        }
        for key, value in overrides.items():
            values[key.replace("_", " ")] = value
        return InMemoryAttributeStore({k: v for k, v in values.items() if v is not None})

    return _make


@pytest.fixture
def make_dims() -> Callable[..., object]:
    def _make(**fields: str | None):
        raw = RawDimensionSet(**{"shape": "Round", "cross_section": '2"', "wall_thickness": ".125", **fields})
        return parse_dimensions(raw)

    return _make
