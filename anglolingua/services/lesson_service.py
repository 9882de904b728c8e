"""
Catalog collaborator for AngloLingua.

Simulates a remote lesson API over the static catalog: both calls sleep
for a configured latency before answering. No pagination, no filtering.
"""

import asyncio
import logging

from anglolingua import config
from anglolingua.catalog_data import MOCK_LESSONS
from anglolingua.models import Lesson

logger = logging.getLogger(__name__)


async def fetch_lessons(latency: float | None = None) -> list[Lesson]:
    """Return every lesson in the catalog."""
    delay = config.CATALOG_LATENCY_SECONDS if latency is None else latency
    if delay > 0:
        await asyncio.sleep(delay)
    lessons = [Lesson(**raw) for raw in MOCK_LESSONS]
    logger.info("Fetched %d lessons", len(lessons))
    return lessons


async def fetch_lesson_by_id(lesson_id: str, latency: float | None = None) -> Lesson | None:
    """Return one lesson, or None when the id is unknown."""
    delay = config.LESSON_LATENCY_SECONDS if latency is None else latency
    if delay > 0:
        await asyncio.sleep(delay)
    for raw in MOCK_LESSONS:
        if raw["id"] == lesson_id:
            return Lesson(**raw)
    logger.info("Lesson %s not found in catalog", lesson_id)
    return None
