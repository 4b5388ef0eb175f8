"""Endpoints de liveness e readiness baseados no ciclo de vida."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.lifecycle import AppState

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    app: str
    state: str
    timestamp: str


def _application(request: Request) -> Any | None:
    return getattr(request.app.state, "application", None)


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe — o processo responde, qualquer que seja o estado."""
    application = _application(request)
    state = application.state if application is not None else AppState.UNINITIALIZED
    return HealthResponse(
        status="healthy" if state is not AppState.FAILED else "failed",
        app=application.name if application is not None else "",
        state=str(state),
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe — pronto somente após o boot completo."""
    application = _application(request)
    if application is None:
        logger.warning("readiness_without_application")
        return JSONResponse(
            content={"status": "not_ready", "reason": "application_not_attached"},
            status_code=503,
        )

    ready = application.booted
    payload = {
        "status": "ready" if ready else "not_ready",
        "lifecycle": application.lifecycle.get_state_summary(),
        "config_sources": application.config.sources,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
