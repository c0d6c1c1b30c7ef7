"""One-shot fetch-and-present pipeline.

The CLI delegates here so that the flow is reusable from other entry points
(tests, batch jobs) with the transport and the view substituted.
"""

from __future__ import annotations

import logging

from core.domain.models import Poem
from core.interfaces.presenter import PoemPresenter
from core.interfaces.source import PoemSource

logger = logging.getLogger(__name__)


async def run_pipeline(source: PoemSource, presenter: PoemPresenter) -> Poem | None:
    """Fetch a single poem and hand the (optional) result to `presenter`."""

    poem = await source.fetch()
    if poem is None:
        logger.debug("No poem returned; nothing to present")
    presenter.present(poem)
    return poem
