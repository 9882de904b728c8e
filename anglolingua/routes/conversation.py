"""
Conversation endpoints for the AngloLingua AI tutor (premium only).

REST:
    GET  /api/conversation            current transcript and state
    POST /api/conversation/messages   send one learner message
    POST /api/conversation/reset      start a new conversation

WebSocket at /ws/conversation.

Frontend sends:
    {"type": "text", "content": "Hello"}          learner message
    {"type": "reset"}                              start over

Backend responds:
    {"type": "status", "step": "thinking"}         request in flight
    {"type": "message", "message": {...}, ...}     resolved tutor message
    {"type": "transcript", "conversation": {...}}  full transcript (on connect/reset)
    {"type": "error", "message": "..."}            error during processing
"""

import json
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from anglolingua.context import SessionContext, get_context
from anglolingua.errors import AngloLinguaError
from anglolingua.models import SendMessageRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversation"])


@router.get("/api/conversation")
async def get_conversation(ctx: SessionContext = Depends(get_context)) -> dict:
    return ctx.open_conversation().to_dict()


@router.post("/api/conversation/messages")
async def send_message(body: SendMessageRequest, ctx: SessionContext = Depends(get_context)) -> dict:
    """Send a learner message and wait for the tutor's reply.

    Blank input is ignored and returns the unchanged transcript.
    """
    conversation = ctx.open_conversation()
    reply = await conversation.send(body.content)
    return {
        "reply": reply.model_dump(mode="json") if reply else None,
        "conversation": conversation.to_dict(),
    }


@router.post("/api/conversation/reset")
async def reset_conversation(ctx: SessionContext = Depends(get_context)) -> dict:
    conversation = ctx.open_conversation()
    conversation.reset()
    return conversation.to_dict()


def _error_frame(exc: AngloLinguaError) -> dict:
    frame = {"type": "error", "message": str(exc), "error_type": type(exc).__name__}
    if exc.redirect:
        frame["redirect"] = exc.redirect
    return frame


@router.websocket("/ws/conversation")
async def conversation_ws(websocket: WebSocket) -> None:
    """WebSocket endpoint for real-time conversation with the AI tutor."""
    await websocket.accept()
    ctx: SessionContext = websocket.app.state.context

    try:
        conversation = ctx.open_conversation()
    except AngloLinguaError as exc:
        await websocket.send_json(_error_frame(exc))
        await websocket.close()
        return

    await websocket.send_json({"type": "transcript", "conversation": conversation.to_dict()})

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except json.JSONDecodeError:
                await websocket.send_json({"type": "error", "message": "Invalid JSON"})
                continue

            msg_type = message.get("type", "")
            if msg_type == "reset":
                conversation.reset()
                await websocket.send_json(
                    {"type": "transcript", "conversation": conversation.to_dict()}
                )
                continue
            if msg_type != "text":
                await websocket.send_json(
                    {"type": "error", "message": f"Unknown message type: {msg_type}"}
                )
                continue

            content = message.get("content") or ""
            if not content.strip():
                continue

            try:
                await websocket.send_json({"type": "status", "step": "thinking"})
                reply = await conversation.send(content)
            except AngloLinguaError as exc:
                await websocket.send_json(_error_frame(exc))
                continue

            if reply is None:
                continue
            await websocket.send_json({
                "type": "message",
                "message": reply.model_dump(mode="json"),
                "state": conversation.state.value,
            })

    except WebSocketDisconnect:
        logger.info("WebSocket client disconnected")
