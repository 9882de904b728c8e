"""
Access Policy: the single source of truth for tier gating.

Every screen that gates content (lesson listing, lesson detail, homework,
conversation) calls these functions instead of re-deriving the rule.
"""

from anglolingua import config
from anglolingua.models import Lesson, SubscriptionTier, User


def _tier(user: User | None) -> SubscriptionTier:
    if user is None:
        return SubscriptionTier.FREE
    return user.subscription_tier


def is_premium_lesson(lesson: Lesson, free_lesson_count: int | None = None) -> bool:
    """True when the lesson sits beyond the free-tier threshold."""
    threshold = config.FREE_LESSON_COUNT if free_lesson_count is None else free_lesson_count
    return lesson.order > threshold


def is_locked(
    lesson: Lesson,
    user: User | None,
    *,
    force_locked: bool = False,
    free_lesson_count: int | None = None,
) -> bool:
    """Whether ``user`` is denied access to ``lesson``.

    A lesson is unlocked iff its order is within the free-tier threshold or
    the user is PREMIUM. ``force_locked`` locks it regardless (used for
    administrative previews).
    """
    if force_locked:
        return True
    if _tier(user) == SubscriptionTier.PREMIUM:
        return False
    return is_premium_lesson(lesson, free_lesson_count)


def can_access_conversation(user: User | None) -> bool:
    """The AI conversation needs PREMIUM; lesson order plays no part."""
    return _tier(user) == SubscriptionTier.PREMIUM
