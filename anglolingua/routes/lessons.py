"""
Lesson routes: catalog listing, lesson detail and the homework flow.

Gating always goes through access_policy (via SessionContext.require_unlocked).
Exercise payloads never include the correct answer until review.
"""

import logging

from fastapi import APIRouter, Depends

from anglolingua.context import SessionContext, get_context
from anglolingua.errors import NotFoundError
from anglolingua.models import AnswerRequest, Lesson, MultipleChoiceExercise, User
from anglolingua.services import access_policy

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/lessons", tags=["lessons"])


def _lesson_summary(lesson: Lesson, user: User) -> dict:
    return {
        "id": lesson.id,
        "title": lesson.title,
        "level": lesson.level,
        "order": lesson.order,
        "estimated_time_minutes": lesson.estimated_time_minutes,
        "tags": lesson.tags,
        "homework_count": len(lesson.homework),
        "is_premium": access_policy.is_premium_lesson(lesson),
        "is_locked": access_policy.is_locked(lesson, user),
        "is_completed": user.has_completed(lesson.id),
    }


def _public_exercise(exercise, number: int) -> dict:
    """Exercise as shown while answering: no correct answer, no explanation."""
    payload = {
        "id": exercise.id,
        "number": number,
        "type": exercise.type,
        "question": exercise.question,
    }
    if isinstance(exercise, MultipleChoiceExercise):
        payload["options"] = [opt.model_dump() for opt in exercise.options]
    else:
        payload["blank_count"] = exercise.blank_count
    return payload


async def _unlocked_lesson(lesson_id: str, ctx: SessionContext) -> Lesson:
    ctx.require_user()
    lesson = await ctx.catalog.fetch_by_id(lesson_id)
    if lesson is None:
        raise NotFoundError(f"Lesson {lesson_id} not found")
    ctx.require_unlocked(lesson)
    return lesson


@router.get("")
async def list_lessons(ctx: SessionContext = Depends(get_context)) -> dict:
    """All lessons sorted by order, each flagged locked/completed for the user."""
    user = ctx.require_user()
    return {
        "is_loading": ctx.catalog.is_loading,
        "is_premium": user.is_premium,
        "lessons": [_lesson_summary(lesson, user) for lesson in ctx.catalog.list_lessons()],
    }


@router.get("/{lesson_id}")
async def lesson_detail(lesson_id: str, ctx: SessionContext = Depends(get_context)) -> dict:
    lesson = await _unlocked_lesson(lesson_id, ctx)
    user = ctx.require_user()
    return {
        **_lesson_summary(lesson, user),
        "content": lesson.content.model_dump(mode="json"),
    }


@router.get("/{lesson_id}/homework")
async def homework(lesson_id: str, ctx: SessionContext = Depends(get_context)) -> dict:
    """Enter the homework view; creates an empty attempt on first entry."""
    lesson = await _unlocked_lesson(lesson_id, ctx)
    session = ctx.homework_for(lesson)
    return {
        "lesson_id": lesson.id,
        "title": lesson.title,
        "exercises": [
            _public_exercise(ex, number) for number, ex in enumerate(lesson.homework, start=1)
        ],
        "session": session.to_dict(),
    }


@router.post("/{lesson_id}/homework/answers")
async def answer_exercise(
    lesson_id: str, body: AnswerRequest, ctx: SessionContext = Depends(get_context)
) -> dict:
    lesson = await _unlocked_lesson(lesson_id, ctx)
    session = ctx.homework_for(lesson)
    record = session.record_answer(body.exercise_id, body.answer)
    return {"record": record.model_dump(), "session": session.to_dict()}


@router.post("/{lesson_id}/homework/submit")
async def submit_homework(lesson_id: str, ctx: SessionContext = Depends(get_context)) -> dict:
    lesson = await _unlocked_lesson(lesson_id, ctx)
    session = ctx.homework_for(lesson)
    session.submit()
    return {
        "session": session.to_dict(),
        "review": [item.model_dump() for item in session.review()],
        "completed_lesson_ids": ctx.require_user().completed_lesson_ids,
    }


@router.get("/{lesson_id}/homework/review")
async def review_homework(lesson_id: str, ctx: SessionContext = Depends(get_context)) -> dict:
    lesson = await _unlocked_lesson(lesson_id, ctx)
    session = ctx.homework_for(lesson)
    return {
        "session": session.to_dict(),
        "review": [item.model_dump() for item in session.review()],
    }


@router.post("/{lesson_id}/homework/reset")
async def try_again(lesson_id: str, ctx: SessionContext = Depends(get_context)) -> dict:
    lesson = await _unlocked_lesson(lesson_id, ctx)
    session = ctx.homework_for(lesson)
    session.try_again()
    return {"session": session.to_dict()}
