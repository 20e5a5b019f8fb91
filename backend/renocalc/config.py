"""Environment-driven settings for renocalc."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from renocalc.models.enums import FormulaVersion

_DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Read from the environment with :meth:`from_env`:

    - ``RENOCALC_FORMULA_VERSION``: ``flat_rate`` (default) or ``legacy``
    - ``RENOCALC_LOG_LEVEL``: logging level name, default ``INFO``
    - ``RENOCALC_CORS_ORIGINS``: comma-separated allowed origins
    """

    formula_version: FormulaVersion = FormulaVersion.FLAT_RATE
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = field(default=_DEFAULT_CORS_ORIGINS)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_version = env.get("RENOCALC_FORMULA_VERSION", "").strip().lower()
        if raw_version:
            try:
                formula_version = FormulaVersion(raw_version)
            except ValueError:
                allowed = ", ".join(v.value for v in FormulaVersion)
                msg = (
                    f"RENOCALC_FORMULA_VERSION must be one of {allowed}, "
                    f"got '{raw_version}'"
                )
                raise ValueError(msg) from None
        else:
            formula_version = FormulaVersion.FLAT_RATE

        log_level = env.get("RENOCALC_LOG_LEVEL", "").strip().upper() or "INFO"
        if log_level not in _LOG_LEVELS:
            msg = (
                f"RENOCALC_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, "
                f"got '{log_level}'"
            )
            raise ValueError(msg)

        raw_origins = env.get("RENOCALC_CORS_ORIGINS", "")
        origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip())

        return cls(
            formula_version=formula_version,
            log_level=log_level,
            cors_origins=origins or _DEFAULT_CORS_ORIGINS,
        )
