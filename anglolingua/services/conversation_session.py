"""
Conversation Session: the AI tutor transcript and its loading/error states.

The transcript is append-only with stable message ids. A user message is
followed by a pending assistant placeholder, which is replaced in place by
the tutor's reply or by the fixed bilingual error message, so the
placeholder never coexists with its resolution.
"""

import asyncio
import logging
import uuid
from enum import Enum

from anglolingua import config
from anglolingua.catalog_data import AI_ERROR_MESSAGE, GREETING_MESSAGE
from anglolingua.errors import ConversationBusy, ExternalServiceFailure
from anglolingua.models import ChatMessage, MessageRole

logger = logging.getLogger(__name__)


class ConversationState(str, Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"
    ERROR_DISPLAYED = "error_displayed"


def _message_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def _greeting() -> ChatMessage:
    return ChatMessage(
        id=_message_id("greeting"),
        role=MessageRole.ASSISTANT,
        content=GREETING_MESSAGE,
    )


class ConversationSession:
    """One learner's conversation with the AI tutor."""

    # Backstop over the chat service, which owns the request timeout.
    TIMEOUT_GRACE_SECONDS = 5.0

    def __init__(self, chat_service, timeout: float | None = None):
        self._chat = chat_service
        if timeout is None:
            timeout = getattr(chat_service, "timeout", config.AI_TIMEOUT_SECONDS) + self.TIMEOUT_GRACE_SECONDS
        self.timeout = timeout
        self._handle = chat_service.create_session()
        self._transcript: list[ChatMessage] = [_greeting()]
        self.state = ConversationState.IDLE
        # Bumped on every reset; responses for an older generation are dropped.
        self._generation = 0

    @property
    def transcript(self) -> list[ChatMessage]:
        return list(self._transcript)

    @property
    def handle(self):
        return self._handle

    @property
    def is_awaiting(self) -> bool:
        return self.state == ConversationState.AWAITING_RESPONSE

    def _replace(self, message_id: str, message: ChatMessage) -> None:
        for index, existing in enumerate(self._transcript):
            if existing.id == message_id:
                self._transcript[index] = message
                return
        raise KeyError(message_id)

    async def send(self, text: str) -> ChatMessage | None:
        """Send a learner message and return the resolved assistant message.

        Blank input is ignored. Raises ConversationBusy while a previous
        message is still awaiting its response.
        """
        text = (text or "").strip()
        if not text:
            return None
        if self.is_awaiting:
            raise ConversationBusy("Wait for the tutor to answer before sending again")

        generation = self._generation
        handle = self._handle
        self._transcript.append(ChatMessage(id=_message_id("user"), role=MessageRole.USER, content=text))
        placeholder = ChatMessage(
            id=_message_id("ai"), role=MessageRole.ASSISTANT, content="", is_pending=True
        )
        self._transcript.append(placeholder)
        self.state = ConversationState.AWAITING_RESPONSE

        failed = False
        try:
            content = await asyncio.wait_for(
                self._chat.send_turn(handle, text), timeout=self.timeout
            )
        except asyncio.CancelledError:
            logger.warning("AI tutor request cancelled")
            self._resolve(generation, placeholder.id, AI_ERROR_MESSAGE, failed=True)
            raise
        except asyncio.TimeoutError:
            logger.error("AI tutor did not answer within %ss", self.timeout)
            content, failed = AI_ERROR_MESSAGE, True
        except ExternalServiceFailure as exc:
            logger.warning("AI tutor unavailable: %s", exc)
            content, failed = AI_ERROR_MESSAGE, True
        except Exception:
            logger.exception("Error in AI conversation")
            content, failed = AI_ERROR_MESSAGE, True

        return self._resolve(generation, placeholder.id, content, failed)

    def _resolve(self, generation: int, placeholder_id: str, content: str, failed: bool) -> ChatMessage | None:
        """Replace the pending placeholder, unless a reset made it stale."""
        if generation != self._generation:
            logger.info("Dropping response for a conversation that was reset")
            return None

        resolved = ChatMessage(id=placeholder_id, role=MessageRole.ASSISTANT, content=content)
        self._replace(placeholder_id, resolved)
        self.state = ConversationState.ERROR_DISPLAYED if failed else ConversationState.IDLE
        return resolved

    def reset(self) -> None:
        """Start over: new remote session, transcript back to the greeting."""
        self._generation += 1
        self._handle = self._chat.reset_session(self._handle)
        self._transcript = [_greeting()]
        self.state = ConversationState.IDLE
        logger.info("Conversation reset (session %s)", self._handle.session_id)

    def close(self) -> None:
        """Invalidate the remote session without starting a new one."""
        self._generation += 1
        self._chat.invalidate(self._handle)

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "session_id": self._handle.session_id,
            "messages": [m.model_dump(mode="json") for m in self._transcript],
        }
