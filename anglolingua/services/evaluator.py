"""
Exercise Evaluator.

Pure functions mapping (exercise, submitted answer) to a verdict. No side
effects: the same inputs always yield the same verdict.
"""

from anglolingua.models import (
    FillInTheBlanksExercise,
    MultiBlankAnswer,
    MultipleChoiceExercise,
    SingleAnswer,
    SubmittedAnswer,
)


def normalize_answer(text: str | None) -> str:
    """Trim and case-fold a free-text answer."""
    return (text or "").strip().casefold()


def _evaluate_multiple_choice(exercise: MultipleChoiceExercise, answer: SubmittedAnswer) -> bool:
    if not isinstance(answer, str):
        return False
    return answer == exercise.correct_answer


def _single_text(answer: SubmittedAnswer) -> str:
    if isinstance(answer, str):
        return answer
    if isinstance(answer, list):
        return " ".join(part or "" for part in answer)
    return ""


def _evaluate_blanks(exercise: FillInTheBlanksExercise, answer: SubmittedAnswer) -> bool:
    expected = exercise.correct_answer
    if isinstance(expected, SingleAnswer):
        return normalize_answer(_single_text(answer)) == normalize_answer(expected.text)

    if isinstance(answer, str):
        answer = [answer]
    elif not isinstance(answer, list):
        return False
    if len(answer) > len(expected.texts):
        return False

    for index, expected_text in enumerate(expected.texts):
        if index >= len(answer) or answer[index] is None:
            return False
        if normalize_answer(answer[index]) != normalize_answer(expected_text):
            return False
    return True


def evaluate(exercise, answer: SubmittedAnswer) -> bool:
    """Return True when ``answer`` is a correct response to ``exercise``."""
    if isinstance(exercise, MultipleChoiceExercise):
        return _evaluate_multiple_choice(exercise, answer)
    if isinstance(exercise, FillInTheBlanksExercise):
        return _evaluate_blanks(exercise, answer)
    raise TypeError(f"Unsupported exercise type: {type(exercise).__name__}")


def display_correct_answer(exercise) -> str:
    """Canonical correct answer as shown in the review screen."""
    if isinstance(exercise, MultipleChoiceExercise):
        return exercise.option_text(exercise.correct_answer) or exercise.correct_answer
    expected = exercise.correct_answer
    if isinstance(expected, MultiBlankAnswer):
        return ", ".join(expected.texts)
    return expected.text
