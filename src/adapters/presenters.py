"""Presentadores de consola (Rich).

Por qué separar presentadores:
- Evita mezclar la lógica de fetch con detalles visuales.
- `LinePresenter` reproduce la salida mínima (primer verso); los demás son
  vistas alternativas seleccionables desde la CLI.
"""

from __future__ import annotations

import json
import logging

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.models import Poem
from core.interfaces.presenter import PoemPresenter

logger = logging.getLogger(__name__)


def first_line(poem: Poem) -> str | None:
    """Primer verso, o `None` si el poema no tiene versos."""

    return poem.lines[0] if poem.lines else None


class LinePresenter(PoemPresenter):
    """Imprime solo el primer verso en stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def present(self, poem: Poem | None) -> None:
        if poem is None:
            return
        line = first_line(poem)
        if line is None:
            logger.warning("Poem %r by %s has no lines; nothing to print", poem.title, poem.author)
            return
        self._console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


class PanelPresenter(PoemPresenter):
    """Panel Rich con título, autor y el poema completo."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def present(self, poem: Poem | None) -> None:
        if poem is None:
            return
        self._console.print(build_poem_panel(poem))


class JsonPresenter(PoemPresenter):
    """Vuelca el poema como JSON estable (útil en pipelines)."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def present(self, poem: Poem | None) -> None:
        if poem is None:
            return
        payload = poem.model_dump(mode="json")
        self._console.print(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )


def build_poem_panel(poem: Poem) -> Panel:
    title = Text(poem.title, style="bold cyan")
    body = Text()
    body.append("\n".join(poem.lines))
    body.append(f"\n\n{poem.linecount} lines", style="dim")
    return Panel(body, title=title, subtitle=Text(poem.author, style="italic"), border_style="cyan")
