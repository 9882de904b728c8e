"""
AI Tutor Chat Service for AngloLingua.

Mock mode: Returns scripted tutor replies from MOCK_TUTOR_REPLIES by turn.
Real mode: Uses OpenAI chat completions with a fixed system instruction.
           Without OPENAI_API_KEY every turn degrades to a fixed
           "service unavailable" reply instead of failing.

Remote conversational memory lives in an explicit ChatSessionHandle:
create_session() starts one, invalidate() ends it, and sends against an
invalidated handle are refused.
"""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from anglolingua import config
from anglolingua.catalog_data import (
    AI_SYSTEM_PROMPT,
    MOCK_TUTOR_REPLIES,
    SERVICE_UNAVAILABLE_MESSAGE,
)
from anglolingua.errors import ExternalServiceFailure

logger = logging.getLogger(__name__)


@dataclass
class ChatSessionHandle:
    """One remote tutor conversation and its message history."""

    session_id: str
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    history: list[dict] = field(default_factory=list)
    active: bool = True

    @property
    def turns(self) -> int:
        return sum(1 for m in self.history if m["role"] == "user")


def _drop_pending_user_turn(handle: ChatSessionHandle) -> None:
    if handle.history and handle.history[-1]["role"] == "user":
        handle.history.pop()


class AIChatService:
    """Request/response contract over the tutor model."""

    # Keep only last N conversation messages to reduce prompt size
    MAX_HISTORY_MESSAGES = 20

    def __init__(
        self,
        mock_mode: bool | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        system_prompt: str = AI_SYSTEM_PROMPT,
    ):
        self.mock_mode = config.MOCK_MODE if mock_mode is None else mock_mode
        self.model = model or config.CHAT_MODEL
        self.timeout = config.AI_TIMEOUT_SECONDS if timeout is None else timeout
        self.system_prompt = system_prompt
        self._client = None
        if not self.mock_mode:
            self._init_real_client(config.OPENAI_API_KEY if api_key is None else api_key)

    def _init_real_client(self, api_key: str):
        """Initialize AsyncOpenAI client; stays None without a credential."""
        if not api_key:
            logger.warning("No OPENAI_API_KEY, AI conversation disabled")
            return
        from openai import AsyncOpenAI

        org_id = config.OPENAI_ORG_ID
        self._client = AsyncOpenAI(
            api_key=api_key,
            organization=org_id if org_id else None,
        )
        logger.info("OpenAI chat client initialized (%s)", self.model)

    @property
    def available(self) -> bool:
        return self.mock_mode or self._client is not None

    # ── Session handles ────────────────────────────────────────────────

    def create_session(self) -> ChatSessionHandle:
        handle = ChatSessionHandle(session_id=uuid.uuid4().hex[:12])
        logger.info("Chat session %s created", handle.session_id)
        return handle

    def invalidate(self, handle: ChatSessionHandle | None) -> None:
        if handle is None or not handle.active:
            return
        handle.active = False
        handle.history.clear()
        logger.info("Chat session %s invalidated", handle.session_id)

    def reset_session(self, handle: ChatSessionHandle | None = None) -> ChatSessionHandle:
        """Invalidate ``handle`` (if any) and start a fresh session."""
        self.invalidate(handle)
        return self.create_session()

    # ── Turns ──────────────────────────────────────────────────────────

    def _trimmed_history(self, handle: ChatSessionHandle) -> list[dict]:
        """Return only the last N messages to keep prompts fast."""
        return handle.history[-self.MAX_HISTORY_MESSAGES:]

    async def send_turn(self, handle: ChatSessionHandle, user_text: str) -> str:
        """Send one user message and return the tutor's reply text."""
        if not handle.active:
            raise ExternalServiceFailure(
                f"Chat session {handle.session_id} was reset; start a new one"
            )
        if self.mock_mode:
            return self._mock_reply(handle, user_text)
        if self._client is None:
            return SERVICE_UNAVAILABLE_MESSAGE
        return await self._openai_reply(handle, user_text)

    def _mock_reply(self, handle: ChatSessionHandle, user_text: str) -> str:
        """Return the scripted reply for this turn."""
        reply = MOCK_TUTOR_REPLIES[handle.turns % len(MOCK_TUTOR_REPLIES)]
        handle.history.append({"role": "user", "content": user_text})
        handle.history.append({"role": "assistant", "content": reply})
        return reply

    async def _openai_reply(self, handle: ChatSessionHandle, user_text: str) -> str:
        handle.history.append({"role": "user", "content": user_text})

        messages = [
            {"role": "system", "content": self.system_prompt},
            *self._trimmed_history(handle),
        ]

        try:
            completion = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=0.7,
                    max_tokens=300,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.error("OpenAI chat timed out (%ss)", self.timeout)
            _drop_pending_user_turn(handle)
            raise ExternalServiceFailure("AI tutor timed out")
        except asyncio.CancelledError:
            logger.warning("OpenAI chat cancelled for session %s", handle.session_id)
            _drop_pending_user_turn(handle)
            raise
        except Exception as exc:
            logger.error("OpenAI chat error (%s): %s", type(exc).__name__, exc)
            _drop_pending_user_turn(handle)
            raise ExternalServiceFailure(f"Error communicating with AI: {exc}") from exc

        response_text = (completion.choices[0].message.content or "").strip()
        if not handle.active:
            # Reset while the request was in flight; keep the new session clean.
            raise ExternalServiceFailure(f"Chat session {handle.session_id} was reset")
        handle.history.append({"role": "assistant", "content": response_text})
        return response_text
