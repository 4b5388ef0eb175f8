"""Protocolo de boot loader.

Um boot loader é um passo de inicialização nomeado, ordenado e falível.
Recebe a Application parcialmente inicializada e pode mutar estado
compartilhado (config, ambiente do processo) ou falhar levantando exceção,
o que aborta a cadeia.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.application import Application


class BootLoader(ABC):
    """Contrato de um passo da cadeia de boot.

    Atributos:
    - name: identificador usado em logs e em BootLoaderError

    Método canônico:
    - apply(app) -> None
      Executa o passo; qualquer exceção aborta o boot.
    """

    name: str = "loader"

    @abstractmethod
    def apply(self, app: Application) -> None:
        """Aplica o passo à aplicação.

        Args:
            app: Aplicação em BOOTING.
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
