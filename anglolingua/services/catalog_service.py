"""
Catalog Store for AngloLingua.

Holds the immutable lesson catalog fully resident in memory once the
initial (simulated remote) population has been awaited.
"""

import logging

from anglolingua.models import Lesson
from anglolingua.services import lesson_service

logger = logging.getLogger(__name__)


class CatalogStore:
    """Ordered, read-only view over the lesson catalog."""

    def __init__(self, catalog_latency: float | None = None, lesson_latency: float | None = None):
        self._catalog_latency = catalog_latency
        self._lesson_latency = lesson_latency
        self._lessons: dict[str, Lesson] = {}
        self._ordered: list[Lesson] = []
        self._loaded = False

    @property
    def is_loading(self) -> bool:
        return not self._loaded

    async def load(self) -> None:
        """Populate the store from the catalog collaborator.

        Raises ValueError if two lessons share an id or an order value.
        """
        lessons = await lesson_service.fetch_lessons(latency=self._catalog_latency)

        by_id: dict[str, Lesson] = {}
        seen_orders: set[int] = set()
        for lesson in lessons:
            if lesson.id in by_id:
                raise ValueError(f"Duplicate lesson id in catalog: {lesson.id}")
            if lesson.order in seen_orders:
                raise ValueError(f"Duplicate lesson order in catalog: {lesson.order}")
            by_id[lesson.id] = lesson
            seen_orders.add(lesson.order)

        self._lessons = by_id
        # sorted() is stable, ties cannot happen since orders are unique
        self._ordered = sorted(lessons, key=lambda lesson: lesson.order)
        self._loaded = True
        logger.info("Catalog ready: %d lessons", len(self._ordered))

    def list_lessons(self) -> list[Lesson]:
        """Lessons sorted by order ascending; empty while loading."""
        return list(self._ordered)

    def get_by_id(self, lesson_id: str) -> Lesson | None:
        return self._lessons.get(lesson_id)

    async def fetch_by_id(self, lesson_id: str) -> Lesson | None:
        """Per-lesson asynchronous lookup through the catalog collaborator."""
        return await lesson_service.fetch_lesson_by_id(lesson_id, latency=self._lesson_latency)
