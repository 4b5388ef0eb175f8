"""Configuração do pytest para o appboot."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.protocols import ServerProtocol  # noqa: E402


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Garante que as variáveis informadas não existam e sejam removidas no teardown.

    Útil para testes que carregam arquivos .env em ``os.environ``.
    """

    def _isolate(*names: str) -> None:
        for name in names:
            # setenv registra o estado original (ausente) para o undo
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)

    return _isolate


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Escreve ``content`` em ``tmp_path / name`` e devolve o path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


class FakeServer(ServerProtocol):
    """Servidor que registra as chamadas em vez de servir."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, str, int]] = []

    def serve(self, app: object, host: str, port: int) -> None:
        self.calls.append((app, host, port))


@pytest.fixture
def fake_server() -> FakeServer:
    return FakeServer()
