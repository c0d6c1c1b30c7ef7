"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/presenters) lean config de forma consistente.

Sin variables definidas se usa el endpoint fijo de PoetryDB y no hay timeout.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

POETRYDB_RANDOM_ENDPOINT = "https://poetrydb.org/random/1"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="POETRY_FINDER_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    poetry_endpoint: str = Field(
        default=POETRYDB_RANDOM_ENDPOINT,
        description="Endpoint JSON que devuelve un array de poemas.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = esperar indefinidamente.",
    )
    user_agent: str = Field(
        default="poetry-finder/0.1",
        min_length=1,
        description="User-Agent enviado a PoetryDB.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Nivel de logging para diagnósticos (stderr).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        # "info" y "INFO" valen lo mismo para `logging`.
        return value.strip().upper() if isinstance(value, str) else value
