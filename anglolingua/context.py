"""
Session context: the explicitly injected owner of all learner state.

Constructed once at process start, started (rehydrate + catalog load) in
the app lifespan, and torn down per user at logout. Routes receive it via
FastAPI dependencies rather than reaching for module globals.
"""

import logging

from fastapi import Request

from anglolingua import config
from anglolingua.errors import AccessDenied, NotAuthenticated
from anglolingua.models import Lesson, User
from anglolingua.services import access_policy
from anglolingua.services.ai_chat_service import AIChatService
from anglolingua.services.catalog_service import CatalogStore
from anglolingua.services.conversation_session import ConversationSession
from anglolingua.services.homework_session import HomeworkSession
from anglolingua.services.progress_store import UserProgressStore
from anglolingua.services.storage import LocalStorage

logger = logging.getLogger(__name__)


class SessionContext:
    def __init__(self, storage, catalog: CatalogStore, chat_service: AIChatService):
        self.storage = storage
        self.catalog = catalog
        self.chat_service = chat_service
        self.progress = UserProgressStore(storage)
        self._homework: dict[str, HomeworkSession] = {}
        self._conversation: ConversationSession | None = None

    async def start(self) -> None:
        self.progress.rehydrate()
        await self.catalog.load()

    # ── Identity ───────────────────────────────────────────────────────

    @property
    def is_authenticated(self) -> bool:
        return self.progress.is_authenticated

    @property
    def user(self) -> User | None:
        return self.progress.user

    def require_user(self) -> User:
        user = self.progress.user
        if user is None:
            raise NotAuthenticated("Please sign in to continue")
        return user

    def login(self, email: str, name: str) -> User:
        self._teardown_user_state()
        return self.progress.login(email, name)

    def logout(self) -> None:
        self._teardown_user_state()
        self.progress.logout()

    def _teardown_user_state(self) -> None:
        self._homework.clear()
        if self._conversation is not None:
            self._conversation.close()
            self._conversation = None

    # ── Lessons & homework ─────────────────────────────────────────────

    def require_unlocked(self, lesson: Lesson) -> None:
        if access_policy.is_locked(lesson, self.require_user()):
            raise AccessDenied(f"Lesson {lesson.title} requires a Premium subscription")

    def homework_for(self, lesson: Lesson) -> HomeworkSession:
        """Current attempt for ``lesson``, created empty on first entry."""
        session = self._homework.get(lesson.id)
        if session is None:
            session = HomeworkSession(lesson, self.progress)
            self._homework[lesson.id] = session
        return session

    # ── Conversation ───────────────────────────────────────────────────

    def open_conversation(self) -> ConversationSession:
        user = self.require_user()
        if not access_policy.can_access_conversation(user):
            raise AccessDenied("AI conversations are available for Premium subscribers")
        if self._conversation is None:
            self._conversation = ConversationSession(self.chat_service)
        return self._conversation


def create_context(storage=None) -> SessionContext:
    """Build a context from config."""
    return SessionContext(
        storage=storage if storage is not None else LocalStorage(config.STORAGE_PATH),
        catalog=CatalogStore(
            catalog_latency=config.CATALOG_LATENCY_SECONDS,
            lesson_latency=config.LESSON_LATENCY_SECONDS,
        ),
        chat_service=AIChatService(),
    )


def get_context(request: Request) -> SessionContext:
    """FastAPI dependency returning the app's session context."""
    return request.app.state.context
