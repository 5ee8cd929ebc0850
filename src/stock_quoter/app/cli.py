"""Command-line entry point for classifying and costing stock items."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import batch as app_batch
from . import io as app_io
from . import runtime
from .attributes import InMemoryAttributeStore
from .driver import process_stock_item

log = logging.getLogger(__name__)


def _render_single(result_lines: list[str], store: InMemoryAttributeStore, written: Sequence[str]) -> list[str]:
    for name in written:
        result_lines.append(f"{name}={store.get(name)}")
    return result_lines


def main(argv: Optional[Sequence[str]] = None, *, env: dict[str, str] | None = None) -> int:
    """Run one item from ``--attr`` values, or a ``--batch`` CSV. Returns an exit code."""

    cfg = runtime.build_config(env)
    ns = app_io.parse_args(list(argv) if argv is not None else None)
    try:
        spec = app_io.resolve_input(ns)
    except argparse.ArgumentTypeError as exc:
        log.error("%s", exc)
        return 2
    options = cfg.processing_options(material=spec.material, material_category=spec.material_category)

    if spec.batch_path is not None:
        frame = app_batch.read_items(spec.batch_path)
        out = app_batch.run_batch(frame, options)
        if spec.out_path is not None:
            spec.out_path.parent.mkdir(parents=True, exist_ok=True)
            out.to_csv(spec.out_path, index=False)
        else:
            out.to_csv(sys.stdout, index=False)
        ok = "ok" not in out.columns or bool(out["ok"].astype(bool).all())
        return 0 if ok else 1

    if not spec.attributes:
        log.error("No attributes given; use --attr NAME=VALUE or --batch FILE")
        return 2

    store = InMemoryAttributeStore(spec.attributes)
    result = process_stock_item(store, options)
    if not result.ok:
        app_io.emit_output([f"error={result.error}"])
        return 1

    lines = [f"outcome={result.classification.outcome}"] if result.classification else []
    app_io.emit_output(_render_single(lines, store, [w.name for w in result.writes]))
    return 0


__all__ = ["main"]
