"""Stock item classification and routing/time estimation.

Typical use::

    from stock_quoter import InMemoryAttributeStore, process_stock_item

    store = InMemoryAttributeStore({"Shape": "Round", "CrossSection": '2"', ...})
    result = process_stock_item(store)
"""
from __future__ import annotations

from stock_quoter.app.attributes import AttributeStore, InMemoryAttributeStore, PropertyKind
from stock_quoter.app.container import ServiceContainer, create_default_container
from stock_quoter.app.driver import PassResult, StockEstimate, estimate_stock_item, process_stock_item
from stock_quoter.domain import (
    CollaboratorUnavailable,
    MissingRequiredDimension,
    ProcessingOptions,
    StockCategory,
    StockProcessingError,
)

__version__ = "0.1.0"

__all__ = [
    "AttributeStore",
    "InMemoryAttributeStore",
    "PropertyKind",
    "ServiceContainer",
    "create_default_container",
    "PassResult",
    "StockEstimate",
    "estimate_stock_item",
    "process_stock_item",
    "CollaboratorUnavailable",
    "MissingRequiredDimension",
    "ProcessingOptions",
    "StockCategory",
    "StockProcessingError",
]
