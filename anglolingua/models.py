"""
Pydantic models for AngloLingua.

Defines the data contract between the core services, routes, and frontend.
Lessons and exercises are immutable; the user record is what gets
persisted to local storage.
"""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# A run of three or more underscores marks one blank ("___", "____").
BLANK_PATTERN = re.compile(r"_{3,}")


def count_blanks(question: str) -> int:
    """Number of blank markers in a fill-in-the-blanks template."""
    return len(BLANK_PATTERN.findall(question or ""))


class SubscriptionTier(str, Enum):
    FREE = "FREE"
    PREMIUM = "PREMIUM"


class User(BaseModel):
    """The authenticated learner and their learning state."""

    id: str = Field(..., description="Unique user identifier")
    email: str = Field(..., description="Email address used at login")
    name: str = Field(..., description="Display name")
    current_level: str = Field(default="A1", description="Current CEFR level label")
    completed_lesson_ids: list[str] = Field(
        default_factory=list,
        description="Ids of completed lessons (unique, only ever grows)",
    )
    subscription_tier: SubscriptionTier = Field(
        default=SubscriptionTier.FREE, description="FREE or PREMIUM"
    )
    profile_picture_url: Optional[str] = Field(
        default=None, description="Avatar image reference"
    )

    def has_completed(self, lesson_id: str) -> bool:
        return lesson_id in self.completed_lesson_ids

    @property
    def is_premium(self) -> bool:
        return self.subscription_tier == SubscriptionTier.PREMIUM


# ---------------------------------------------------------------------------
# Lesson content
# ---------------------------------------------------------------------------

class VocabularyItem(BaseModel):
    """A single Polish/English vocabulary entry."""

    model_config = ConfigDict(frozen=True)

    polish: str = Field(..., description="The Polish word or phrase")
    english: str = Field(..., description="English translation")
    example_sentence: Optional[str] = Field(default=None, description="Usage example")
    pronunciation: Optional[str] = Field(
        default=None, description="Audio URL or phonetic spelling"
    )


class GrammarRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    explanation: str
    examples: list[str] = Field(default_factory=list)


class DialogueLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    speaker: str
    line: str


class Dialogue(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    participants: list[str] = Field(default_factory=list)
    lines: list[DialogueLine] = Field(default_factory=list)


class LessonContent(BaseModel):
    """Structured teaching material of one lesson."""

    model_config = ConfigDict(frozen=True)

    introduction: str
    vocabulary: list[VocabularyItem] = Field(default_factory=list)
    grammar: list[GrammarRule] = Field(default_factory=list)
    dialogue: Optional[Dialogue] = None
    summary: str = ""


# ---------------------------------------------------------------------------
# Exercises
# ---------------------------------------------------------------------------

class ExerciseType(str, Enum):
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    FILL_IN_THE_BLANKS = "FILL_IN_THE_BLANKS"


class ExerciseOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str


class SingleAnswer(BaseModel):
    """Expected answer for a single-blank question."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["single"] = "single"
    text: str


class MultiBlankAnswer(BaseModel):
    """Expected answers, one per blank, in template order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["multi_blank"] = "multi_blank"
    texts: list[str] = Field(..., min_length=1)


BlankAnswer = Annotated[Union[SingleAnswer, MultiBlankAnswer], Field(discriminator="kind")]


class MultipleChoiceExercise(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["MULTIPLE_CHOICE"] = "MULTIPLE_CHOICE"
    id: str = Field(..., description="Unique exercise id within the lesson")
    question: str
    options: list[ExerciseOption] = Field(..., min_length=1)
    correct_answer: str = Field(..., description="Id of the correct option")
    explanation: Optional[str] = None

    @model_validator(mode="after")
    def _correct_answer_is_an_option(self):
        if self.correct_answer not in {opt.id for opt in self.options}:
            raise ValueError(
                f"correct_answer {self.correct_answer!r} is not an option of {self.id}"
            )
        return self

    def option_text(self, option_id: str) -> Optional[str]:
        for opt in self.options:
            if opt.id == option_id:
                return opt.text
        return None


class FillInTheBlanksExercise(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["FILL_IN_THE_BLANKS"] = "FILL_IN_THE_BLANKS"
    id: str = Field(..., description="Unique exercise id within the lesson")
    question: str = Field(..., description="Sentence template with ___ blanks")
    correct_answer: BlankAnswer
    explanation: Optional[str] = None

    @model_validator(mode="after")
    def _answer_matches_blanks(self):
        blanks = count_blanks(self.question)
        if isinstance(self.correct_answer, MultiBlankAnswer):
            if len(self.correct_answer.texts) != blanks:
                raise ValueError(
                    f"{self.id}: {blanks} blank(s) but "
                    f"{len(self.correct_answer.texts)} expected answers"
                )
        elif blanks > 1:
            raise ValueError(
                f"{self.id}: {blanks} blanks require a multi_blank answer"
            )
        return self

    @property
    def blank_count(self) -> int:
        return count_blanks(self.question)


Exercise = Annotated[
    Union[MultipleChoiceExercise, FillInTheBlanksExercise],
    Field(discriminator="type"),
]


class Lesson(BaseModel):
    """An immutable unit of the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique lesson id")
    title: str
    level: str = Field(..., description="CEFR level label (e.g. A1, A2)")
    order: int = Field(..., description="Position in the canonical sequence")
    estimated_time_minutes: int = Field(..., ge=0)
    content: LessonContent
    homework: list[Exercise] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    def exercise(self, exercise_id: str):
        for ex in self.homework:
            if ex.id == exercise_id:
                return ex
        return None


# ---------------------------------------------------------------------------
# Homework
# ---------------------------------------------------------------------------

SubmittedAnswer = Union[str, list[Optional[str]], None]


class AnswerRecord(BaseModel):
    """A learner's answer to one exercise and its verdict."""

    exercise_id: str
    answer: SubmittedAnswer = None
    is_correct: bool


class ReviewItem(BaseModel):
    """One exercise rendered read-only after submission."""

    exercise_id: str
    number: int = Field(..., ge=1)
    question: str
    submitted_answer: SubmittedAnswer = None
    is_correct: bool
    correct_answer: str = Field(..., description="Canonical correct answer for display")
    explanation: Optional[str] = None


# ---------------------------------------------------------------------------
# Conversation
# ---------------------------------------------------------------------------

class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ChatMessage(BaseModel):
    """One transcript entry."""

    id: str = Field(..., description="Stable message id")
    role: MessageRole
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    is_pending: bool = Field(
        default=False, description="True while an assistant turn is in flight"
    )


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""
    name: str = ""
    is_registering: bool = False


class AnswerRequest(BaseModel):
    exercise_id: str
    answer: SubmittedAnswer = None


class SendMessageRequest(BaseModel):
    content: str
