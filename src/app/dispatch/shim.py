"""DispatchShim — hooks e isolamento de falhas em volta do router.

Cada requisição passa por:
    1. hook ``before`` (opcional)
    2. router (FastAPI) para matching e handler
    3. hook ``after`` (opcional), antes de a resposta ser enviada

Qualquer exceção nas três etapas é capturada aqui e vira uma resposta fixa
``500 Internal Server Error``; o processo segue servindo as demais
requisições. A fronteira de recuperação cobre os hooks também: como
``call_next`` devolve a resposta antes do envio, uma falha no ``after``
substitui a resposta inteira em vez de truncá-la.

HTTPException levantada por um hook vira a resposta HTTP correspondente,
o que permite ao ``before`` recusar requisições.
"""

from __future__ import annotations

import logging

from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

from app.dispatch.hooks import RouteHooks, invoke_hook
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

FAILURE_STATUS_CODE = 500
FAILURE_BODY = "Internal Server Error"


def failure_response() -> Response:
    """Resposta fixa devolvida quando a requisição falha."""
    return PlainTextResponse(FAILURE_BODY, status_code=FAILURE_STATUS_CODE)


class DispatchShim(BaseHTTPMiddleware):
    """Middleware instalado no router pela Application.

    Os hooks são lidos de ``hooks`` a cada requisição, então alterações em
    ``Application.before_route``/``after_route`` feitas no setup valem sem
    reinstalar o middleware. O shim não guarda estado por requisição fora
    do ContextVar de correlation_id.
    """

    def __init__(self, app: ASGIApp, hooks: RouteHooks) -> None:
        super().__init__(app)
        self._hooks = hooks

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        correlation_id = get_correlation_id()
        try:
            try:
                await invoke_hook(self._hooks.before, request)
                response = await call_next(request)
                await invoke_hook(self._hooks.after, request, response)
            except HTTPException as exc:
                logger.info(
                    "request_rejected_by_hook",
                    extra={"path": request.url.path, "status_code": exc.status_code},
                )
                response = PlainTextResponse(
                    str(exc.detail),
                    status_code=exc.status_code,
                    headers=exc.headers,
                )
            except Exception as exc:
                logger.exception(
                    "request_dispatch_failed",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "error_type": type(exc).__name__,
                    },
                )
                response = failure_response()

            response.headers[CORRELATION_HEADER] = correlation_id
            return response
        finally:
            reset_correlation_id(token)
