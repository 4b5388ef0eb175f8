"""Rotas HTTP do container.

Agregação:
- router.py: cria o router com todos os sub-routers
- health/: liveness e readiness a partir do ciclo de vida da Application
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
