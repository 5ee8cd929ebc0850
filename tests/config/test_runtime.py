from __future__ import annotations

import logging

import pytest

from stock_quoter.app import runtime


def test_build_config_defaults() -> None:
    cfg = runtime.build_config({}, configure_logging=False)

    assert cfg.log_level == "INFO"
    assert cfg.material == "304L"
    assert cfg.material_category == "StainlessSteel"
    assert cfg.deburr_rate_in_per_hour == pytest.approx(3600.0)
    assert cfg.metric_round_bar is False


def test_build_config_reads_environment() -> None:
    env = {
        "APP_LOG_LEVEL": "DEBUG",
        "APP_MATERIAL": "A36",
        "APP_MATERIAL_CATEGORY": "CarbonSteel",
        "APP_DEBURR_RATE": "1800",
        "APP_METRIC_ROUND_BAR": "yes",
    }

    cfg = runtime.build_config(env, configure_logging=False)

    assert (cfg.material, cfg.material_category) == ("A36", "CarbonSteel")
    assert cfg.deburr_rate_in_per_hour == pytest.approx(1800.0)
    assert cfg.metric_round_bar is True
    assert cfg.log_level == "DEBUG"


def test_build_config_uses_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_MATERIAL", "316")
    monkeypatch.delenv("APP_MATERIAL_CATEGORY", raising=False)

    cfg = runtime.build_config(configure_logging=False)

    assert cfg.material == "316"
    assert cfg.material_category == "StainlessSteel"


def test_non_numeric_deburr_rate_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="stock_quoter.app.runtime"):
        cfg = runtime.build_config({"APP_DEBURR_RATE": "fast"}, configure_logging=False)

    assert cfg.deburr_rate_in_per_hour == pytest.approx(3600.0)
    assert "fast" in caplog.text


@pytest.mark.parametrize("value,expected", [("1", True), ("on", True), ("0", False), ("no", False), ("", False)])
def test_metric_flag_parsing(value: str, expected: bool) -> None:
    cfg = runtime.build_config({"APP_METRIC_ROUND_BAR": value}, configure_logging=False)

    assert cfg.metric_round_bar is expected


def test_processing_options_prefer_explicit_values() -> None:
    cfg = runtime.RuntimeConfig(material="A36", material_category="CarbonSteel", metric_round_bar=True)

    defaults = cfg.processing_options()
    explicit = cfg.processing_options(material="304L", material_category="StainlessSteel")

    assert (defaults.material, defaults.material_category) == ("A36", "CarbonSteel")
    assert defaults.metric_nonstandard_round_bar is True
    assert (explicit.material, explicit.material_category) == ("304L", "StainlessSteel")
