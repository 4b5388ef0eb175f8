"""Hooks before/after executados em volta do roteamento de cada requisição."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import Response

BeforeHook = Callable[[Request], Awaitable[None] | None]
AfterHook = Callable[[Request, Response], Awaitable[None] | None]


@dataclass(slots=True)
class RouteHooks:
    """Hooks opcionais da aplicação; ``None`` é ignorado sem efeito."""

    before: BeforeHook | None = None
    after: AfterHook | None = None


async def invoke_hook(hook: Callable[..., Any] | None, *args: Any) -> None:
    """Executa um hook sync (no threadpool) ou async; ``None`` é no-op."""
    if hook is None:
        return
    if inspect.iscoroutinefunction(hook):
        await hook(*args)
        return
    result = await run_in_threadpool(hook, *args)
    if inspect.isawaitable(result):
        await result
