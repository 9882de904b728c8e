"""
Homework Session: one attempt at a lesson's exercises.

Collects per-exercise verdicts, scores the attempt on submit, and marks the
lesson complete through the progress store when the score passes.
"""

import logging
from enum import Enum

from anglolingua import config
from anglolingua.errors import HomeworkStateError, NotFoundError
from anglolingua.models import AnswerRecord, Lesson, ReviewItem, SubmittedAnswer
from anglolingua.services.evaluator import display_correct_answer, evaluate

logger = logging.getLogger(__name__)


class HomeworkState(str, Enum):
    NO_HOMEWORK = "no_homework"
    UNANSWERED = "unanswered"
    IN_PROGRESS = "in_progress"
    ALL_ANSWERED = "all_answered"
    SUBMITTED = "submitted"


def score_feedback(score: float) -> str:
    if score >= 80:
        return "Excellent work! You've mastered this material."
    if score >= 50:
        return "Good job! Review the explanations for areas to improve."
    return "Keep practicing! Review the lesson and try again."


class HomeworkSession:
    """Transient state of one homework attempt. Never persisted."""

    def __init__(self, lesson: Lesson, progress_store, pass_threshold: float | None = None):
        self.lesson = lesson
        self._progress = progress_store
        self.pass_threshold = config.PASS_THRESHOLD if pass_threshold is None else pass_threshold
        self._answers: dict[str, AnswerRecord] = {}
        self.score: float | None = None
        self.submitted = False

    @property
    def total(self) -> int:
        return len(self.lesson.homework)

    @property
    def answers(self) -> dict[str, AnswerRecord]:
        return dict(self._answers)

    @property
    def all_answered(self) -> bool:
        return self.total > 0 and all(ex.id in self._answers for ex in self.lesson.homework)

    @property
    def state(self) -> HomeworkState:
        if self.total == 0:
            return HomeworkState.NO_HOMEWORK
        if self.submitted:
            return HomeworkState.SUBMITTED
        if not self._answers:
            return HomeworkState.UNANSWERED
        if self.all_answered:
            return HomeworkState.ALL_ANSWERED
        return HomeworkState.IN_PROGRESS

    @property
    def passed(self) -> bool:
        return self.score is not None and self.score >= self.pass_threshold

    @property
    def display_score(self) -> int | None:
        return None if self.score is None else round(self.score)

    def record_answer(self, exercise_id: str, answer: SubmittedAnswer) -> AnswerRecord:
        """Evaluate and store an answer; answering again overwrites the verdict."""
        if self.submitted:
            raise HomeworkStateError("Homework already submitted; try again to answer")
        exercise = self.lesson.exercise(exercise_id)
        if exercise is None:
            raise NotFoundError(f"Exercise {exercise_id} not found in {self.lesson.id}")

        record = AnswerRecord(
            exercise_id=exercise_id,
            answer=answer,
            is_correct=evaluate(exercise, answer),
        )
        self._answers[exercise_id] = record
        return record

    def submit(self) -> float:
        """Score the attempt; completes the lesson when the score passes."""
        if self.state != HomeworkState.ALL_ANSWERED:
            raise HomeworkStateError(
                f"Cannot submit homework in state {self.state.value}; answer all questions first"
            )

        correct = sum(1 for ex in self.lesson.homework if self._answers[ex.id].is_correct)
        self.score = 100 * correct / self.total
        self.submitted = True
        logger.info(
            "Homework %s submitted: %d/%d (%.1f%%)",
            self.lesson.id, correct, self.total, self.score,
        )

        if self.passed:
            self._progress.complete_lesson(self.lesson.id)
        return self.score

    def review(self) -> list[ReviewItem]:
        """Every exercise, read-only, with verdict and canonical answer."""
        if not self.submitted:
            raise HomeworkStateError("Review is available after submitting")
        items = []
        for number, exercise in enumerate(self.lesson.homework, start=1):
            record = self._answers[exercise.id]
            items.append(ReviewItem(
                exercise_id=exercise.id,
                number=number,
                question=exercise.question,
                submitted_answer=record.answer,
                is_correct=record.is_correct,
                correct_answer=display_correct_answer(exercise),
                explanation=exercise.explanation,
            ))
        return items

    def try_again(self) -> None:
        """Back to UNANSWERED; lessons already completed stay completed."""
        self._answers.clear()
        self.score = None
        self.submitted = False

    def to_dict(self) -> dict:
        return {
            "lesson_id": self.lesson.id,
            "state": self.state.value,
            "total": self.total,
            "answered": len(self._answers),
            "can_submit": self.state == HomeworkState.ALL_ANSWERED,
            "answers": {k: v.model_dump() for k, v in self._answers.items()},
            "score": self.score,
            "display_score": self.display_score,
            "passed": self.passed if self.submitted else None,
            "feedback": score_feedback(self.score) if self.submitted else None,
        }
