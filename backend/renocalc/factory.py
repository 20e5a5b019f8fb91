"""Factory functions for creating pre-configured EstimateEngine instances."""

from __future__ import annotations

from renocalc.config import Settings
from renocalc.data.repository import default_rate_tables
from renocalc.engine import EstimateEngine
from renocalc.models.enums import FormulaVersion


def create_default_engine(
    settings: Settings | None = None,
    formula_version: FormulaVersion | None = None,
) -> EstimateEngine:
    """Create an EstimateEngine wired up with the built-in rate tables.

    Args:
        settings: Settings to read the default formula from. Defaults to
            :meth:`Settings.from_env`.
        formula_version: Explicit formula, overriding ``settings``.

    Example::

        from renocalc import create_default_engine

        engine = create_default_engine()
        breakdown = engine.calculate(request)
    """
    if formula_version is None:
        formula_version = (settings or Settings.from_env()).formula_version
    return EstimateEngine(default_rate_tables(), formula_version=formula_version)
