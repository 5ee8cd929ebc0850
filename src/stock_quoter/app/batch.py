"""Run the stock pass over a table of items with pandas."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Iterable, Mapping

import pandas as pd

from stock_quoter.domain import ProcessingOptions

from .attributes import InMemoryAttributeStore
from .container import ServiceContainer, create_default_container
from .driver import process_stock_item

log = logging.getLogger(__name__)

STATUS_COLUMNS = ("ok", "outcome", "error")


def read_items(source: Path | str) -> pd.DataFrame:
    """Load a CSV of stock items; ``"-"`` reads stdin. All cells stay text."""

    handle: Any = sys.stdin if str(source) == "-" else source
    return pd.read_csv(handle, dtype=str, keep_default_na=False)


def _row_attributes(row: Mapping[str, Any]) -> dict[str, str]:
    return {str(k): str(v) for k, v in row.items() if v is not None and str(v).strip() != ""}


def run_rows(
    rows: Iterable[Mapping[str, Any]],
    options: ProcessingOptions,
    services: ServiceContainer | None = None,
) -> list[dict[str, Any]]:
    """Process each row independently and return its final attribute values."""

    svc = services or create_default_container(options)
    results: list[dict[str, Any]] = []
    for index, row in enumerate(rows):
        store = InMemoryAttributeStore(_row_attributes(row))
        result = process_stock_item(store, options, svc)
        if not result.ok:
            log.warning("Row %s failed: %s", index, result.error)
        record: dict[str, Any] = dict(store.as_dict())
        record["ok"] = result.ok
        record["outcome"] = result.classification.outcome if result.classification else ""
        record["error"] = result.error or ""
        results.append(record)
    return results


def run_batch(
    frame: pd.DataFrame,
    options: ProcessingOptions,
    services: ServiceContainer | None = None,
) -> pd.DataFrame:
    """Return ``frame``'s items with the computed attribute columns added."""

    records = run_rows(frame.to_dict("records"), options, services)
    result = pd.DataFrame.from_records(records)
    leading = [c for c in frame.columns if c in result.columns]
    trailing = [c for c in result.columns if c not in leading and c not in STATUS_COLUMNS]
    status = [c for c in STATUS_COLUMNS if c in result.columns]
    return result.reindex(columns=leading + trailing + status).fillna("")


__all__ = ["read_items", "run_rows", "run_batch", "STATUS_COLUMNS"]
