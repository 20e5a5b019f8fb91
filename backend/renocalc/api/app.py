"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from renocalc.config import Settings
from renocalc.engine import ENGINE_VERSION
from renocalc.exceptions import InvalidInputError, RequestValidationError
from renocalc.models.enums import FormulaVersion  # noqa: TCH001 (FastAPI resolves at runtime)
from renocalc.models.request import RenovationRequest  # noqa: TCH001

if TYPE_CHECKING:
    from renocalc.engine import EstimateEngine

logger = logging.getLogger(__name__)


def create_app(
    *,
    engine: EstimateEngine | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created via create_default_engine on first
        request.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or Settings.from_env()
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.log_level)

    app = FastAPI(title="renocalc", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own engine
    app.state.engine = engine

    def _get_engine() -> EstimateEngine:
        eng: EstimateEngine | None = app.state.engine
        if eng is not None:
            return eng
        from renocalc.factory import create_default_engine

        eng = create_default_engine(settings)
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/reference
    # ------------------------------------------------------------------

    @app.get("/api/reference")
    def reference() -> dict[str, Any]:
        eng = _get_engine()
        data = eng.tables.to_reference_dict()
        data["default_formula"] = eng.formula_version.value
        return data

    # ------------------------------------------------------------------
    # POST /api/validate
    # ------------------------------------------------------------------

    @app.post("/api/validate")
    def validate(renovation: RenovationRequest) -> dict[str, Any]:
        return _get_engine().validate(renovation).to_dict()

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(
        renovation: RenovationRequest,
        formula: FormulaVersion | None = None,
    ) -> dict[str, Any]:
        eng = _get_engine()
        try:
            breakdown = eng.calculate(renovation, formula_version=formula)
        except RequestValidationError as exc:
            logger.warning("Estimate rejected: %s", exc)
            raise HTTPException(
                status_code=422, detail={"errors": exc.errors}
            ) from exc
        except InvalidInputError as exc:
            logger.warning("Estimate rejected: %s", exc)
            raise HTTPException(
                status_code=422,
                detail={"field": exc.field, "message": str(exc)},
            ) from exc
        return {
            "breakdown": breakdown.model_dump(mode="json"),
            "summary": breakdown.to_summary_dict(),
        }

    return app
