from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import argparse
import sys

from stock_quoter.app.attributes import INPUT_KEYS


@dataclass(frozen=True)
class InputSpec:
    """Resolved inputs derived from parsed CLI arguments."""

    attributes: dict[str, str]
    batch_path: Path | None
    material: str | None
    material_category: str | None
    out_path: Path | None


_SHORTCUTS = {
    "shape": INPUT_KEYS["shape"],
    "cross_section": INPUT_KEYS["cross_section"],
    "wall": INPUT_KEYS["wall_thickness"],
    "length": INPUT_KEYS["material_length"],
    "cut_length": INPUT_KEYS["cut_length"],
    "holes": INPUT_KEYS["hole_count"],
    "weight": INPUT_KEYS["weight"],
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the stock-quoting CLI."""

    p = argparse.ArgumentParser(
        prog="stock-quoter",
        description="Classify a stock item and estimate its routing, times and material code.",
    )
    p.add_argument("--batch", type=str, help="CSV with one stock item per row ('-' for stdin).")
    p.add_argument(
        "--attr",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Attribute value for a single item, e.g. --attr 'Wall Thickness=.154'.",
    )
    p.add_argument("--shape", help="Shape tag (Round, Square, Rectangle, Angle, Channel).")
    p.add_argument("--cross-section", dest="cross_section", help='Cross-section text, e.g. 2.375"OD.')
    p.add_argument("--wall", help="Wall thickness in inches.")
    p.add_argument("--length", help="Material length in inches.")
    p.add_argument("--cut-length", dest="cut_length", help="Cut length in inches.")
    p.add_argument("--holes", help="Number of holes.")
    p.add_argument("--weight", help="Part weight in pounds.")
    p.add_argument("--material", help="Material grade, e.g. 304L or A36.")
    p.add_argument("--category", dest="material_category", help="CarbonSteel, StainlessSteel or Aluminum.")
    p.add_argument("--out", type=str, help="Write batch results to this CSV instead of stdout.")
    return p.parse_args(argv if argv is not None else sys.argv[1:])


def _split_attr(text: str) -> tuple[str, str]:
    name, sep, value = text.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    return name.strip(), value


def resolve_input(ns: argparse.Namespace) -> InputSpec:
    """Resolve CLI namespace into a structured :class:`InputSpec`."""

    attributes: dict[str, str] = {}
    for item in getattr(ns, "attr", None) or []:
        name, value = _split_attr(item)
        attributes[name] = value
    for option, key in _SHORTCUTS.items():
        value = getattr(ns, option, None)
        if value is not None:
            attributes[key] = value

    batch = getattr(ns, "batch", None)
    return InputSpec(
        attributes=attributes,
        batch_path=Path(batch) if batch else None,
        material=getattr(ns, "material", None),
        material_category=getattr(ns, "material_category", None),
        out_path=_maybe_path(getattr(ns, "out", None)),
    )


def _maybe_path(s: str | None) -> Path | None:
    return Path(s).resolve() if s else None


def emit_output(text_lines: list[str]) -> None:
    """Print rendered result lines to stdout."""

    print("\n".join(text_lines))
