"""FastAPI adapter — questionnaire JSON in, ranked recommendations out.

Usage:
    python -m healthshare.api

The engine itself is an in-process library; this module is the thin HTTP
boundary around it. The catalog is held in a ``CatalogStore`` on
``app.state`` and read once per request.
"""

from __future__ import annotations

from typing import Any

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from healthshare import __version__
from healthshare.catalog import CatalogStore, default_catalog
from healthshare.config import settings
from healthshare.logging_setup import configure_logging
from healthshare.recommendations import recommend, with_iua_preference
from healthshare.schemas.questionnaire import QuestionnaireResponse
from healthshare.schemas.recommendation import RecommendationsResponse

logger = structlog.get_logger(__name__)

NO_ELIGIBLE_PLANS = "No eligible plans found for your criteria"
PROCESSING_FAILED = "Failed to process recommendations"


# ── App factory ──────────────────────────────────────────────────────


def create_app(store: CatalogStore | None = None) -> FastAPI:
    """Build the HTTP app around a catalog store (bundled catalog by default)."""
    app = FastAPI(
        title="Healthshare Plan Matcher API",
        description="Eligible, scored healthshare plans for a questionnaire",
        version=__version__,
    )
    app.state.catalog_store = store or CatalogStore(default_catalog())

    @app.get("/health")
    async def health_check(request: Request) -> dict[str, Any]:
        """Health check endpoint."""
        return {
            "status": "ok",
            "environment": settings.environment,
            "plans": len(request.app.state.catalog_store.current),
        }

    @app.post("/api/recommendations")
    async def recommendations(request: Request) -> JSONResponse:
        catalog = request.app.state.catalog_store.current
        try:
            payload = await request.json()
            questionnaire = with_iua_preference(QuestionnaireResponse.model_validate(payload))
            results = recommend(catalog, questionnaire)
        except Exception:
            logger.exception("recommendations.failed")
            return JSONResponse({"error": PROCESSING_FAILED}, status_code=500)

        if not results:
            logger.info(
                "recommendations.none_eligible",
                age=questionnaire.age,
                coverage_type=questionnaire.coverage_type,
                iua_preference=questionnaire.iua_preference,
            )
            return JSONResponse({"error": NO_ELIGIBLE_PLANS}, status_code=404)

        logger.info(
            "recommendations.served",
            count=len(results),
            top_plan=results[0].id,
            iua_preference=questionnaire.iua_preference,
        )
        return JSONResponse(RecommendationsResponse(recommendations=results).to_json_dict())

    return app


# ── Entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    configure_logging()
    uvicorn.run(
        "healthshare.api:create_app",
        factory=True,
        host=settings.api.api_host,
        port=settings.api.api_port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
