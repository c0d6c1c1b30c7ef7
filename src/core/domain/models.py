"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Decodifica el JSON de PoetryDB con validación de forma (campos y tipos)
  sin acoplar el Core a librerías de I/O.
- `frozen=True`: un poema se crea al decodificar y nunca se muta.

Nota:
- `linecount` llega como string ("14") desde la API y se conserva tal cual.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.config import ConfigDict


class Poem(BaseModel):
    """Un poema tal como lo devuelve PoetryDB."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = Field(
        ...,
        description="Título del poema.",
    )
    author: str = Field(
        ...,
        description="Autor del poema.",
    )
    lines: tuple[str, ...] = Field(
        ...,
        description="Cuerpo del poema, una entrada por verso en orden de lectura.",
    )
    linecount: str = Field(
        ...,
        description="Número de versos codificado como texto (peculiaridad de la API).",
    )


# Payload de /random/<n>: siempre un array JSON.
PoemList = TypeAdapter(list[Poem])
