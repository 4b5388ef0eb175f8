"""Application — container de boot e ciclo de vida.

Dona do config store, do EventManager, do router (FastAPI) e do servidor.
Não existe instância global: o entrypoint cria a Application e a repassa
a quem precisar.

Ciclo de vida:
    boot(): UNINITIALIZED → BOOTING → BOOTED
        - dispara app.boot
        - aplica a cadeia de boot loaders, na ordem dada
        - adota ``name`` da config se ainda vazio
        - trava o config store e dispara app.booted
    run(addr): boota se necessário e entrega a aplicação ao servidor

Uso:
    app = Application(
        loaders=[
            EnvBootLoader(".", [".env"]),
            ConfigBootLoader(["config/app.yaml"]),
        ],
    )
    app.router.include_router(api_router)
    app.run(":8090")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from typing import Any

from fastapi import FastAPI

from app.boot import FuncBootLoader, run_boot_chain
from app.dispatch import AfterHook, BeforeHook, DispatchShim, RouteHooks
from app.events import APP_BOOT, APP_BOOTED, AppPayload, Event, EventManager
from app.infra.server import UvicornServer
from app.lifecycle import AppState, LifecycleMachine
from app.protocols import BootLoader, ServerProtocol
from config.store import ConfigStore
from utils.errors import ApplicationStateError, BootError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LISTEN_ADDRESS = f"{DEFAULT_HOST}:{DEFAULT_PORT}"


def parse_listen_address(addr: str) -> tuple[str, int]:
    """Converte ``host:port``, ``:port`` ou ``port`` em ``(host, port)``.

    Host ausente vale DEFAULT_HOST. IPv6 entre colchetes (``[::1]:8080``)
    é aceito.

    Raises:
        ValueError: Endereço vazio ou porta inválida.
    """
    value = addr.strip()
    if not value:
        raise ValueError("endereço de escuta vazio")

    host, sep, port_text = value.rpartition(":")
    if not sep:
        host, port_text = "", value
    host = host.strip("[]") or DEFAULT_HOST

    try:
        port = int(port_text)
    except ValueError as exc:
        raise ValueError(f"porta inválida em '{addr}'") from exc
    if not 0 < port < 65536:
        raise ValueError(f"porta fora do intervalo em '{addr}'")
    return host, port


class Application:
    """Container da aplicação.

    Attributes:
        name: Identidade da aplicação (adotada de ``config.name`` no boot
            se vazia)
        config: Config store em camadas
        events: Barramento de eventos de ciclo de vida
        router: Router FastAPI, já envolto pelo DispatchShim
    """

    def __init__(
        self,
        name: str = "",
        *,
        loaders: Iterable[BootLoader] = (),
        config: ConfigStore | None = None,
        events: EventManager | None = None,
        router: FastAPI | None = None,
        server: ServerProtocol | None = None,
        before_route: BeforeHook | None = None,
        after_route: AfterHook | None = None,
    ) -> None:
        self.name = name
        self.config = config if config is not None else ConfigStore()
        self.events = events if events is not None else EventManager()
        self.router = router if router is not None else FastAPI(title=name or "appboot")
        self._server = server if server is not None else UvicornServer()
        self._loaders: list[BootLoader] = list(loaders)
        self._data: dict[str, Any] = {}
        self._hooks = RouteHooks(before=before_route, after=after_route)
        self._lifecycle = LifecycleMachine(owner=name)

        self.router.state.application = self
        self.router.add_middleware(DispatchShim, hooks=self._hooks)

    # ──────────────────────────────────────────────────────────────────────
    # Estado
    # ──────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> AppState:
        return self._lifecycle.current_state

    @property
    def booted(self) -> bool:
        return self._lifecycle.current_state is AppState.BOOTED

    @property
    def lifecycle(self) -> LifecycleMachine:
        return self._lifecycle

    @property
    def loaders(self) -> tuple[BootLoader, ...]:
        return tuple(self._loaders)

    @property
    def asgi(self) -> FastAPI:
        """Aplicação ASGI entregue ao servidor (router + DispatchShim)."""
        return self.router

    @property
    def before_route(self) -> BeforeHook | None:
        return self._hooks.before

    @before_route.setter
    def before_route(self, hook: BeforeHook | None) -> None:
        self._hooks.before = hook

    @property
    def after_route(self) -> AfterHook | None:
        return self._hooks.after

    @after_route.setter
    def after_route(self, hook: AfterHook | None) -> None:
        self._hooks.after = hook

    # ──────────────────────────────────────────────────────────────────────
    # Setup
    # ──────────────────────────────────────────────────────────────────────

    def add_loader(self, loader: BootLoader | Callable[[Application], None]) -> None:
        """Anexa um loader ao fim da cadeia; callables viram FuncBootLoader."""
        if self.state is not AppState.UNINITIALIZED:
            raise ApplicationStateError(f"add_loader() não permitido no estado {self.state}")
        if not isinstance(loader, BootLoader):
            loader = FuncBootLoader(loader)
        self._loaders.append(loader)

    def on(self, event: Event[Any] | str, listener: Callable[[Any], None]) -> None:
        """Atalho para ``events.on``."""
        self.events.on(event, listener)

    def set(self, key: str, value: Any) -> None:
        """Guarda um valor na bag de extensão da aplicação."""
        self._data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    # ──────────────────────────────────────────────────────────────────────
    # Ciclo de vida
    # ──────────────────────────────────────────────────────────────────────

    def boot(self) -> None:
        """Inicializa a aplicação uma única vez.

        Chamadas após o boot são no-op: não redisparam eventos nem
        reaplicam loaders.

        Raises:
            BootLoaderError: Um loader falhou (a cadeia foi abortada).
            BootError: Um listener de app.boot/app.booted falhou.
            ApplicationStateError: Boot em andamento ou falha anterior.
        """
        state = self.state
        if state is AppState.BOOTED:
            logger.debug("app_boot_skipped", extra={"app_name": self.name})
            return
        if state is not AppState.UNINITIALIZED:
            raise ApplicationStateError(f"boot() não permitido no estado {state}")

        self._transition(AppState.BOOTING, "boot")
        logger.info(
            "app_booting",
            extra={"app_name": self.name, "loaders": [loader.name for loader in self._loaders]},
        )

        phase = APP_BOOT.name
        try:
            self.events.must_fire(APP_BOOT, AppPayload(app=self))
            phase = "loaders"
            run_boot_chain(self, self._loaders)
            if not self.name:
                self.name = self.config.string("name", "")
        except Exception as exc:
            self._fail(exc, phase)
            if isinstance(exc, BootError):
                raise
            raise BootError(f"Boot falhou em '{phase}': {exc}", phase=phase) from exc

        self._transition(AppState.BOOTED, "boot_completed")
        self.config.lock()
        self.events.seal()

        try:
            self.events.must_fire(APP_BOOTED, AppPayload(app=self))
        except Exception as exc:
            self._fail(exc, APP_BOOTED.name)
            raise BootError(
                f"Boot falhou em '{APP_BOOTED.name}': {exc}", phase=APP_BOOTED.name
            ) from exc

        logger.info(
            "app_booted",
            extra={"app_name": self.name, "config_sources": self.config.sources},
        )

    def resolve_listen_address(self, addr: str | None = None) -> tuple[str, int]:
        """Endereço de escuta: argumento > chave ``listen`` da config > default."""
        chosen = addr or self.config.def_string("listen", "") or DEFAULT_LISTEN_ADDRESS
        return parse_listen_address(chosen)

    def run(self, addr: str | None = None) -> None:
        """Boota (se preciso) e serve até o processo encerrar.

        Args:
            addr: Endereço opcional (``":8090"``, ``"127.0.0.1:9000"``).

        Raises:
            BootError: Boot falhou; nada é servido.
            ValueError: Endereço de escuta inválido.
        """
        if not self.booted:
            self.boot()

        host, port = self.resolve_listen_address(addr)
        logger.info(
            "app_running",
            extra={"app_name": self.name, "pid": os.getpid(), "host": host, "port": port},
        )
        self._server.serve(self.asgi, host, port)

    # ──────────────────────────────────────────────────────────────────────
    # Internos
    # ──────────────────────────────────────────────────────────────────────

    def _transition(self, target: AppState, trigger: str, **metadata: Any) -> None:
        result = self._lifecycle.transition(target, trigger=trigger, metadata=metadata)
        if not result.success:
            raise ApplicationStateError(result.error_reason or "transição recusada")

    def _fail(self, exc: BaseException, phase: str) -> None:
        self._transition(AppState.FAILED, "boot_failed", phase=phase, error_type=type(exc).__name__)
        logger.error(
            "app_boot_failed",
            extra={"app_name": self.name, "phase": phase, "error_type": type(exc).__name__},
        )

    def __repr__(self) -> str:
        return f"Application(name={self.name!r}, state={self.state})"
