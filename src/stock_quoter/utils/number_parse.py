"""Helpers for parsing numeric inch values from attribute text."""

from __future__ import annotations

import math
import re

__all__ = [
    "NUM_DEC_RE",
    "TOKEN_SPLIT_RE",
    "parse_float",
    "first_inch_value",
    "clean_cross_section",
]

NUM_DEC_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
TOKEN_SPLIT_RE = re.compile(r"[\s,*]+")


def parse_float(text: str | None) -> float | None:
    """Return ``text`` as a float, or ``None`` when it is not a plain number.

    Thousands separators are tolerated and a leading dot is normalised
    (``".154"`` -> ``0.154``). Anything else with trailing units or
    markers is rejected so callers can decide how to degrade, as is a
    literal too large for a float (``1e999``).
    """

    s = (text or "").strip().replace(",", "")
    if not s or not NUM_DEC_RE.match(s):
        return None
    if s.startswith("."):
        s = "0" + s
    elif s[:2] in {"+.", "-."}:
        s = s[0] + "0" + s[1:]
    try:
        value = float(s)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def clean_cross_section(text: str | None) -> str:
    """Strip inch/OD markers and turn ``X``/``SCH`` separators into spaces."""

    s = text or ""
    s = s.replace('"', "").replace("OD", "").replace("X", " ").replace("SCH", " ")
    return s.strip()


def first_inch_value(text: str | None) -> float | None:
    """Return the first recognised inch value in a cross-section string."""

    cleaned = clean_cross_section(text)
    if not cleaned:
        return None
    whole = parse_float(cleaned)
    if whole is not None:
        return whole
    for token in TOKEN_SPLIT_RE.split(cleaned):
        if not token:
            continue
        value = parse_float(token)
        if value is not None:
            return value
    return None
