"""
User Progress Store.

Holds the authenticated learner (identity, tier, completed lessons) and the
theme preference. Every mutation is written synchronously to local storage
and rehydrate() restores identical state after a restart.
"""

import json
import logging
import re
import uuid

from pydantic import ValidationError

from anglolingua.catalog_data import DEFAULT_USER
from anglolingua.errors import ValidationFailure
from anglolingua.models import SubscriptionTier, User
from anglolingua.services.storage import THEME_KEY, USER_KEY

logger = logging.getLogger(__name__)

# Bump when the persisted user shape changes incompatibly.
USER_RECORD_VERSION = 1

THEMES = ("light", "dark")


def avatar_url(name: str) -> str:
    """Deterministic avatar reference derived from the display name."""
    seed = re.sub(r"\s+", "", name)
    return f"https://picsum.photos/seed/{seed}/100/100"


def validate_credentials(email: str, password: str, name: str = "", is_registering: bool = False) -> str:
    """Check the auth form and return the display name to log in with.

    Registration needs email, name and password; sign-in needs email and
    password, and derives the name from the email's local part.
    """
    email = (email or "").strip()
    name = (name or "").strip()
    required = {"email": email, "password": password or ""}
    if is_registering:
        required["name"] = name
    missing = [field for field, value in required.items() if not value]
    if missing:
        if is_registering:
            message = "Please fill in all fields for registration."
        else:
            message = "Please fill in email and password to login."
        raise ValidationFailure(message, missing_fields=missing)

    if is_registering:
        return name
    return email.split("@")[0] or "Learner"


class UserProgressStore:
    """Process-wide learner state with write-through persistence."""

    def __init__(self, storage):
        self._storage = storage
        self._user: User | None = None
        self._theme = "light"

    # ── Read side ──────────────────────────────────────────────────────

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def theme(self) -> str:
        return self._theme

    def rehydrate(self) -> None:
        """Restore user and theme from storage.

        A missing or malformed record is the normal unauthenticated state.
        """
        self._user = self._load_user()
        saved_theme = self._storage.get_item(THEME_KEY)
        self._theme = saved_theme if saved_theme in THEMES else "light"
        if self._user:
            logger.info("Rehydrated session for %s", self._user.email)

    def _load_user(self) -> User | None:
        raw = self._storage.get_item(USER_KEY)
        if not raw:
            return None
        try:
            record = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Malformed persisted session, ignoring: %s", exc)
            return None
        if not isinstance(record, dict) or record.get("version") != USER_RECORD_VERSION:
            logger.warning("Unsupported persisted session version, ignoring")
            return None
        try:
            return User(**record.get("user", {}))
        except (TypeError, ValidationError) as exc:
            logger.warning("Invalid persisted user, ignoring: %s", exc)
            return None

    def _persist_user(self) -> None:
        record = {"version": USER_RECORD_VERSION, "user": self._user.model_dump(mode="json")}
        self._storage.set_item(USER_KEY, json.dumps(record, ensure_ascii=False))

    # ── Mutations ──────────────────────────────────────────────────────

    def login(self, email: str, name: str) -> User:
        """Start a fresh session, replacing any existing one."""
        self._user = User(
            **DEFAULT_USER,
            id=f"user-{uuid.uuid4().hex[:12]}",
            email=email,
            name=name,
            profile_picture_url=avatar_url(name),
        )
        self._persist_user()
        logger.info("User %s logged in", email)
        return self._user

    def logout(self) -> None:
        if self._user:
            logger.info("User %s logged out", self._user.email)
        self._user = None
        self._storage.remove_item(USER_KEY)

    def upgrade_to_premium(self) -> None:
        if self._user is None:
            return
        if self._user.subscription_tier == SubscriptionTier.PREMIUM:
            return
        self._user = self._user.model_copy(update={"subscription_tier": SubscriptionTier.PREMIUM})
        self._persist_user()
        logger.info("User %s upgraded to PREMIUM", self._user.email)

    def complete_lesson(self, lesson_id: str) -> None:
        if self._user is None or self._user.has_completed(lesson_id):
            return
        completed = [*self._user.completed_lesson_ids, lesson_id]
        self._user = self._user.model_copy(update={"completed_lesson_ids": completed})
        self._persist_user()
        logger.info("User %s completed %s", self._user.email, lesson_id)

    def toggle_theme(self) -> str:
        self._theme = "dark" if self._theme == "light" else "light"
        self._storage.set_item(THEME_KEY, self._theme)
        return self._theme
