"""Shared fixtures: settings isolated from the environment and a fake PoetryDB."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable

import httpx
import pytest

from core.config import AppSettings

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep real POETRY_FINDER_* variables and any local .env out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("POETRY_FINDER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def sonnet_payload() -> list[dict]:
    return json.loads((FIXTURES / "random_poem.json").read_text(encoding="utf-8"))


@pytest.fixture
def json_transport() -> Callable[..., httpx.MockTransport]:
    """Build a transport that answers every request with the given body."""

    def factory(body, status_code: int = 200, calls: list | None = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if calls is not None:
                calls.append(request)
            if isinstance(body, (bytes, str)):
                return httpx.Response(status_code, content=body)
            return httpx.Response(status_code, json=body)

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def simple_payload() -> list[dict]:
    return [{"title": "T", "author": "A", "lines": ["L1", "L2"], "linecount": "2"}]
