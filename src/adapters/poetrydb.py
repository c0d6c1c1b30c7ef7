"""Fuente PoetryDB: un poema aleatorio.

Flujo:
- Construye la URL del endpoint (por defecto `https://poetrydb.org/random/1`).
- Un único GET asíncrono; el status HTTP no se distingue, el body se decodifica
  siempre.
- Decodifica el array JSON como `list[Poem]` y devuelve el primero.

Nunca lanza: dirección inválida, fallo de red o de decodificación terminan en
`None` más un diagnóstico en el log (stderr en la CLI).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import (
    FETCH_FAILED_MESSAGE,
    INVALID_ADDRESS_MESSAGE,
    FetchErrorKind,
    FetchFailure,
)
from core.domain.models import Poem, PoemList
from core.interfaces.source import PoemSource

logger = logging.getLogger(__name__)


@dataclass
class FetchHooks:
    """Optional callbacks for callers that want the failure kind."""

    error: Callable[[FetchFailure], None] | None = None


def build_endpoint(address: str) -> httpx.URL | None:
    """Devuelve la URL si es absoluta http(s), si no `None`."""

    try:
        url = httpx.URL(address)
    except httpx.InvalidURL:
        return None
    if url.scheme not in ("http", "https") or not url.host:
        return None
    return url


def _describe(exc: Exception) -> str:
    # Algunos errores de httpx (timeouts) llegan sin mensaje.
    return str(exc) or type(exc).__name__


def _report(failure: FetchFailure, hooks: FetchHooks | None) -> None:
    logger.error(failure.render(), extra={"error_kind": failure.kind.value})
    if hooks is not None and hooks.error is not None:
        hooks.error(failure)


async def _get(url: httpx.URL, *, settings: AppSettings, client: httpx.AsyncClient | None) -> httpx.Response:
    if client is not None:
        return await client.get(url)
    async with build_async_client(settings) as own_client:
        return await own_client.get(url)


async def fetch_random_poem(
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
    hooks: FetchHooks | None = None,
) -> Poem | None:
    """Obtiene el primer poema de `/random/1`, o `None`.

    Si se inyecta `client`, se usa y no se cierra; si no, se crea uno por
    llamada. No hay estado compartido entre invocaciones.
    """

    settings = settings or AppSettings()

    url = build_endpoint(settings.poetry_endpoint)
    if url is None:
        _report(FetchFailure(FetchErrorKind.ADDRESS_INVALID, INVALID_ADDRESS_MESSAGE), hooks)
        return None

    try:
        response = await _get(url, settings=settings, client=client)
        logger.debug("GET %s -> HTTP %s", url, response.status_code)
        poems = PoemList.validate_json(response.content)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        _report(
            FetchFailure(FetchErrorKind.TRANSPORT_FAILED, FETCH_FAILED_MESSAGE, _describe(exc)),
            hooks,
        )
        return None
    except ValidationError as exc:
        _report(
            FetchFailure(FetchErrorKind.DECODE_FAILED, FETCH_FAILED_MESSAGE, _describe(exc)),
            hooks,
        )
        return None

    if not poems:
        return None
    return poems[0]


class PoetryDBSource(PoemSource):
    """`PoemSource` respaldado por la API pública de PoetryDB."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        hooks: FetchHooks | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._hooks = hooks

    async def fetch(self) -> Poem | None:
        return await fetch_random_poem(settings=self._settings, client=self._client, hooks=self._hooks)
