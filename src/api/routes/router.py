"""Agregador de rotas do container.

Uso:
    from api.routes import create_api_router

    app.router.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria o router com os endpoints do container.

    Returns:
        APIRouter com /health e /ready na raiz.
    """
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    return api_router
