"""
Session routes: sign-in, sign-out, profile and theme preference.
"""

import logging

from fastapi import APIRouter, Depends

from anglolingua.context import SessionContext, get_context
from anglolingua.models import LoginRequest
from anglolingua.services.progress_store import validate_credentials

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/session", tags=["session"])


@router.post("/login")
async def login(body: LoginRequest, ctx: SessionContext = Depends(get_context)) -> dict:
    """Validate the auth form and start a new learner session."""
    name = validate_credentials(body.email, body.password, body.name, body.is_registering)
    user = ctx.login(body.email.strip(), name)
    return {"is_authenticated": True, "user": user.model_dump(mode="json"), "redirect": "/home"}


@router.post("/logout")
async def logout(ctx: SessionContext = Depends(get_context)) -> dict:
    ctx.logout()
    return {"is_authenticated": False, "redirect": "/auth"}


@router.get("/state")
async def session_state(ctx: SessionContext = Depends(get_context)) -> dict:
    user = ctx.user
    return {
        "is_authenticated": ctx.is_authenticated,
        "user": user.model_dump(mode="json") if user else None,
        "theme": ctx.progress.theme,
        "is_loading_lessons": ctx.catalog.is_loading,
    }


@router.get("/profile")
async def profile(ctx: SessionContext = Depends(get_context)) -> dict:
    user = ctx.require_user()
    completed = [
        {"id": lesson.id, "title": lesson.title}
        for lesson in ctx.catalog.list_lessons()
        if user.has_completed(lesson.id)
    ]
    return {
        "user": user.model_dump(mode="json"),
        "membership": "Premium Member" if user.is_premium else "Free Member",
        "completed_lessons_count": len(user.completed_lesson_ids),
        "completed_lessons": completed,
        "total_lessons": len(ctx.catalog.list_lessons()),
    }


@router.post("/theme")
async def toggle_theme(ctx: SessionContext = Depends(get_context)) -> dict:
    return {"theme": ctx.progress.toggle_theme()}
