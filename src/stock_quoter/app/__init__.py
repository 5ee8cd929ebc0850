"""Application-level wiring for the stock quoting pass."""
from __future__ import annotations

from .container import ServiceContainer, create_default_container
from .driver import PassResult, StockEstimate, estimate_stock_item, process_stock_item
from . import attributes, driver, io, runtime

__all__ = [
    "ServiceContainer",
    "create_default_container",
    "PassResult",
    "StockEstimate",
    "estimate_stock_item",
    "process_stock_item",
    "attributes",
    "driver",
    "io",
    "runtime",
]
