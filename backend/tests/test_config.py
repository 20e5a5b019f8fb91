"""Tests for Settings and create_default_engine."""

from __future__ import annotations

import pytest

from renocalc.config import Settings
from renocalc.engine import EstimateEngine
from renocalc.factory import create_default_engine
from renocalc.models.enums import FormulaVersion


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings.from_env({})
        assert s.formula_version == FormulaVersion.FLAT_RATE
        assert s.log_level == "INFO"
        assert s.cors_origins == ("http://localhost:3000",)

    def test_reads_environment(self) -> None:
        s = Settings.from_env({
            "RENOCALC_FORMULA_VERSION": "Legacy",
            "RENOCALC_LOG_LEVEL": "debug",
            "RENOCALC_CORS_ORIGINS": "https://a.example, https://b.example,",
        })
        assert s.formula_version == FormulaVersion.LEGACY
        assert s.log_level == "DEBUG"
        assert s.cors_origins == ("https://a.example", "https://b.example")

    def test_unknown_formula_rejected(self) -> None:
        with pytest.raises(ValueError, match="flat_rate, legacy"):
            Settings.from_env({"RENOCALC_FORMULA_VERSION": "v3"})

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="RENOCALC_LOG_LEVEL"):
            Settings.from_env({"RENOCALC_LOG_LEVEL": "loud"})

    def test_blank_log_level_uses_default(self) -> None:
        assert Settings.from_env({"RENOCALC_LOG_LEVEL": "  "}).log_level == "INFO"

    def test_os_environ_used_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENOCALC_FORMULA_VERSION", "legacy")
        assert Settings.from_env().formula_version == FormulaVersion.LEGACY


class TestCreateDefaultEngine:
    def test_returns_engine(self) -> None:
        engine = create_default_engine(Settings())
        assert isinstance(engine, EstimateEngine)
        assert engine.formula_version == FormulaVersion.FLAT_RATE

    def test_formula_from_settings(self) -> None:
        engine = create_default_engine(Settings(formula_version=FormulaVersion.LEGACY))
        assert engine.formula_version == FormulaVersion.LEGACY

    def test_explicit_formula_wins(self) -> None:
        engine = create_default_engine(
            Settings(formula_version=FormulaVersion.LEGACY),
            formula_version=FormulaVersion.FLAT_RATE,
        )
        assert engine.formula_version == FormulaVersion.FLAT_RATE
