"""Text formatting for dimension codes and attribute values."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

__all__ = [
    "format_inches",
    "format_dot",
    "format_fixed",
    "format_number",
]


def _quantize(value: float, decimals: int) -> Decimal:
    exact = Decimal(repr(float(value)))
    with localcontext() as ctx:
        # Enough digits for the integer part of any finite float.
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        return exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_inches(value: float, *, decimals: int = 3) -> str:
    """Render ``value`` with up to ``decimals`` places and no trailing zeros.

    ``1.250`` -> ``"1.25"``, ``2.0`` -> ``"2"``, ``0.125`` -> ``"0.125"``.
    Midpoints round away from zero.
    """

    if not math.isfinite(value):
        return f"{value}"
    text = format(_quantize(value, decimals), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"-0", ""}:
        text = "0"
    return text


def format_dot(value: float, *, decimals: int = 3) -> str:
    """Like :func:`format_inches` but drop the leading zero below one (``.125``)."""

    text = format_inches(value, decimals=decimals)
    if text.startswith("0."):
        return text[1:]
    if text.startswith("-0."):
        return "-" + text[2:]
    return text


def format_fixed(value: float, decimals: int) -> str:
    """Fixed-point rendering used for numeric attributes (``F3``/``F4``)."""

    if not math.isfinite(value):
        return f"{value:.{decimals}f}"
    return format(_quantize(value, decimals), "f")


def format_number(value: float) -> str:
    """Shortest round-trip text for a float (``0.03`` -> ``"0.03"``)."""

    if not math.isfinite(value):
        return repr(float(value))
    return repr(float(value)) if value != int(value) else str(int(value))
