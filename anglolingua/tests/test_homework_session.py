"""
Tests for anglolingua.services.homework_session.

Verifies:
- State moves unanswered -> in progress -> all answered -> submitted
- Submit is refused until every exercise is answered
- Score is the share of correct answers; passing completes the lesson
- Review lists every exercise with its verdict and canonical answer
- Try again resets the attempt but keeps completion
"""

import pytest

from anglolingua.errors import HomeworkStateError, NotFoundError
from anglolingua.services.homework_session import HomeworkSession, HomeworkState, score_feedback
from anglolingua.services.progress_store import UserProgressStore

from conftest import blank_exercise, make_lesson


@pytest.fixture
def progress(storage):
    store = UserProgressStore(storage)
    store.login("anna@example.com", "Anna")
    return store


def _lesson_with(count: int):
    return make_lesson(homework=[blank_exercise(f"ex-{i}") for i in range(1, count + 1)])


def _answer(session, correct: int):
    """Answer every exercise, the first ``correct`` of them correctly."""
    for index, exercise in enumerate(session.lesson.homework):
        session.record_answer(exercise.id, "is" if index < correct else "are")


def _answer_sample(session):
    session.record_answer("ex-1", "opt2")
    session.record_answer("ex-2", "is")


class TestStates:
    """Tests for the attempt state machine."""

    def test_no_homework(self, progress):
        session = HomeworkSession(make_lesson(), progress)
        assert session.state == HomeworkState.NO_HOMEWORK
        with pytest.raises(HomeworkStateError):
            session.submit()

    def test_progression(self, sample_lesson, progress):
        session = HomeworkSession(sample_lesson, progress)
        assert session.state == HomeworkState.UNANSWERED
        session.record_answer("ex-1", "opt2")
        assert session.state == HomeworkState.IN_PROGRESS
        session.record_answer("ex-2", "is")
        assert session.state == HomeworkState.ALL_ANSWERED
        session.submit()
        assert session.state == HomeworkState.SUBMITTED

    def test_submit_refused_while_incomplete(self, sample_lesson, progress):
        session = HomeworkSession(sample_lesson, progress)
        session.record_answer("ex-1", "opt2")
        with pytest.raises(HomeworkStateError):
            session.submit()
        assert session.score is None

    def test_answer_overwrites(self, sample_lesson, progress):
        session = HomeworkSession(sample_lesson, progress)
        assert session.record_answer("ex-2", "are").is_correct is False
        assert session.record_answer("ex-2", "is").is_correct is True
        assert len(session.answers) == 1

    def test_unknown_exercise(self, sample_lesson, progress):
        with pytest.raises(NotFoundError):
            HomeworkSession(sample_lesson, progress).record_answer("ex-9", "x")

    def test_no_answers_after_submit(self, sample_lesson, progress):
        session = HomeworkSession(sample_lesson, progress)
        _answer_sample(session)
        session.submit()
        with pytest.raises(HomeworkStateError):
            session.record_answer("ex-1", "opt1")

    def test_review_requires_submit(self, sample_lesson, progress):
        with pytest.raises(HomeworkStateError):
            HomeworkSession(sample_lesson, progress).review()


class TestScoring:
    """Tests for score, pass threshold and completion."""

    def test_three_of_four_is_75_and_passes(self, progress):
        session = HomeworkSession(_lesson_with(4), progress, pass_threshold=60)
        _answer(session, correct=3)
        assert session.submit() == 75.0
        assert session.passed
        assert progress.user.has_completed("lesson-x")

    def test_threshold_is_inclusive(self, progress):
        """3/5 = 60% passes at a 60 threshold."""
        session = HomeworkSession(_lesson_with(5), progress, pass_threshold=60)
        _answer(session, correct=3)
        assert session.submit() == 60.0
        assert session.passed

    def test_59_of_100_fails(self, progress):
        session = HomeworkSession(_lesson_with(100), progress, pass_threshold=60)
        _answer(session, correct=59)
        assert session.submit() == 59.0
        assert not session.passed
        assert not progress.user.has_completed("lesson-x")

    def test_60_of_100_passes(self, progress):
        session = HomeworkSession(_lesson_with(100), progress, pass_threshold=60)
        _answer(session, correct=60)
        assert session.submit() == 60.0
        assert progress.user.has_completed("lesson-x")

    def test_just_below_threshold_fails(self, progress):
        """A score a fraction below the threshold does not pass."""
        session = HomeworkSession(_lesson_with(5), progress, pass_threshold=60.5)
        _answer(session, correct=3)
        session.submit()
        assert not session.passed
        assert not progress.user.has_completed("lesson-x")

    def test_failing_does_not_complete(self, progress):
        session = HomeworkSession(_lesson_with(5), progress, pass_threshold=60)
        _answer(session, correct=2)
        assert session.submit() == 40.0
        assert not session.passed
        assert not progress.user.has_completed("lesson-x")

    def test_display_score_rounds(self, progress):
        session = HomeworkSession(_lesson_with(3), progress)
        _answer(session, correct=2)
        session.submit()
        assert session.display_score == 67

    def test_perfect_score(self, sample_lesson, progress):
        session = HomeworkSession(sample_lesson, progress)
        _answer_sample(session)
        assert session.submit() == 100.0

    @pytest.mark.parametrize(
        "score, word",
        [(100, "Excellent"), (80, "Excellent"), (79, "Good job"), (50, "Good job"), (49, "Keep practicing")],
    )
    def test_feedback_bands(self, score, word):
        assert score_feedback(score).startswith(word)


class TestReviewAndRetry:
    """Tests for review and try again."""

    def test_review_items(self, sample_lesson, progress):
        session = HomeworkSession(sample_lesson, progress)
        session.record_answer("ex-1", "opt1")
        session.record_answer("ex-2", "is")
        session.submit()
        items = session.review()
        assert [item.number for item in items] == [1, 2]
        assert items[0].is_correct is False
        assert items[0].correct_answer == "Good morning"
        assert items[0].submitted_answer == "opt1"
        assert items[1].is_correct is True

    def test_try_again_keeps_completion(self, sample_lesson, progress):
        session = HomeworkSession(sample_lesson, progress)
        _answer_sample(session)
        session.submit()
        session.try_again()
        assert session.state == HomeworkState.UNANSWERED
        assert session.score is None
        assert progress.user.has_completed("lesson-x")

    def test_to_dict(self, sample_lesson, progress):
        session = HomeworkSession(sample_lesson, progress)
        session.record_answer("ex-1", "opt2")
        data = session.to_dict()
        assert data["state"] == "in_progress"
        assert data["answered"] == 1
        assert data["can_submit"] is False
        assert data["passed"] is None
