from __future__ import annotations
from dataclasses import dataclass
import os
import logging

from stock_quoter.domain import ProcessingOptions


@dataclass(frozen=True)
class RuntimeConfig:
    """Configuration derived from environment variables for CLI runs."""

    # Logging
    log_level: str = "INFO"

    # Material defaults applied when the caller does not pass one
    material: str = "304L"
    material_category: str = "StainlessSteel"

    # Tunables
    deburr_rate_in_per_hour: float = 3600.0
    metric_round_bar: bool = False

    def processing_options(self, *, material: str | None = None, material_category: str | None = None) -> ProcessingOptions:
        """Return :class:`ProcessingOptions`, letting explicit arguments win."""

        return ProcessingOptions(
            material=material or self.material,
            material_category=material_category or self.material_category,
            deburr_rate_in_per_hour=self.deburr_rate_in_per_hour,
            metric_nonstandard_round_bar=self.metric_round_bar,
        )


def _to_bool(v: str | None, default: bool = False) -> bool:
    if v is None:
        return default
    return v.strip() in {"1", "true", "True", "YES", "yes", "on", "On"}


def _to_float(v: str | None, default: float) -> float:
    if v is None or not v.strip():
        return default
    try:
        return float(v)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-numeric value %r; using %s", v, default)
        return default


def build_config(env: dict[str, str] | None = None, *, configure_logging: bool = True) -> RuntimeConfig:
    """Build a :class:`RuntimeConfig` from ``env`` (defaults to ``os.environ``)."""

    e = env if env is not None else os.environ
    cfg = RuntimeConfig(
        log_level=e.get("APP_LOG_LEVEL", "INFO"),
        material=e.get("APP_MATERIAL") or "304L",
        material_category=e.get("APP_MATERIAL_CATEGORY") or "StainlessSteel",
        deburr_rate_in_per_hour=_to_float(e.get("APP_DEBURR_RATE"), 3600.0),
        metric_round_bar=_to_bool(e.get("APP_METRIC_ROUND_BAR"), False),
    )
    if configure_logging:
        _configure_logging(cfg.log_level)
    return cfg


def _configure_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format="%(levelname)s %(name)s: %(message)s")
