"""Contratos de fuentes de poemas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir PoetryDB por un fake en tests sin acoplar el Core
  a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Poem


@runtime_checkable
class PoemSource(Protocol):
    """Contrato mínimo para obtener un poema.

    Reglas de diseño:
    - `fetch` es asíncrono porque típicamente hará I/O (HTTP).
    - Nunca lanza: cualquier fallo se traduce en `None`.
    """

    async def fetch(self) -> Poem | None:
        """Obtiene un poema, o `None` si no hay resultado."""

        ...
