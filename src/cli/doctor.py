"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.poetrydb import build_endpoint
from core.config import AppSettings

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


def run() -> None:
    """Show the effective configuration and check the endpoint is reachable."""

    settings = AppSettings()

    table = Table(title="poetry-finder doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    url = build_endpoint(settings.poetry_endpoint)
    table.add_row("Endpoint", "OK" if url else "FAIL", settings.poetry_endpoint if url else "Invalid address")

    if settings.http_timeout_seconds is None:
        table.add_row("Timeout", "OK", "none (waits indefinitely)")
    else:
        table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    if url is not None:
        ok_http, detail_http = asyncio.run(_check_http(str(url), settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)
    else:
        table.add_row("HTTP connectivity", "SKIPPED", "Fix the endpoint first")

    _console.print(table)
