"""Dispatch de requisições — hooks e isolamento de falhas."""

from app.dispatch.hooks import AfterHook, BeforeHook, RouteHooks, invoke_hook
from app.dispatch.shim import (
    FAILURE_BODY,
    FAILURE_STATUS_CODE,
    DispatchShim,
    failure_response,
)

__all__ = [
    "FAILURE_BODY",
    "FAILURE_STATUS_CODE",
    "AfterHook",
    "BeforeHook",
    "DispatchShim",
    "RouteHooks",
    "failure_response",
    "invoke_hook",
]
