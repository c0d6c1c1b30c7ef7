"""Contrato de presentación (la "vista").

La consola es la única vista hoy; el contrato permite sustituirla
(dashboard de terminal, respuesta web) sin tocar la lógica de fetch.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Poem


@runtime_checkable
class PoemPresenter(Protocol):
    def present(self, poem: Poem | None) -> None:
        """Muestra el poema; con `None` no produce salida."""

        ...
