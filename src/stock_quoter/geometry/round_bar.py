"""Solid-versus-hollow check for round stock."""
from __future__ import annotations

__all__ = ["ROUND_BAR_ID_TOLERANCE_IN", "InsideDiameterValidator", "is_round_bar"]

ROUND_BAR_ID_TOLERANCE_IN = 1e-3


def is_round_bar(outer_diameter: float, inner_diameter: float, tol: float = ROUND_BAR_ID_TOLERANCE_IN) -> bool:
    """Return ``True`` when the inside diameter is effectively zero."""

    return inner_diameter <= tol


class InsideDiameterValidator:
    """Default round-bar validator backed by :func:`is_round_bar`."""

    def __init__(self, tol: float = ROUND_BAR_ID_TOLERANCE_IN) -> None:
        self.tol = tol

    def is_round_bar(self, outer_diameter: float, inner_diameter: float) -> bool:
        return is_round_bar(outer_diameter, inner_diameter, self.tol)
