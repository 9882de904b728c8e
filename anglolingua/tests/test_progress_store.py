"""
Tests for anglolingua.services.progress_store.

Verifies:
- Login creates a FREE learner and persists it; rehydrate restores it
- Logout clears the persisted session
- Upgrade and lesson completion are idempotent and persisted
- Malformed or unversioned records rehydrate as unauthenticated
- Credential validation reports missing fields
"""

import json

import pytest

from anglolingua.errors import ValidationFailure
from anglolingua.models import SubscriptionTier
from anglolingua.services.progress_store import (
    USER_RECORD_VERSION,
    UserProgressStore,
    avatar_url,
    validate_credentials,
)
from anglolingua.services.storage import THEME_KEY, USER_KEY, LocalStorage


@pytest.fixture
def store(storage):
    return UserProgressStore(storage)


class TestLogin:
    """Tests for session start and rehydration."""

    def test_login_creates_free_user(self, store):
        user = store.login("anna@example.com", "Anna Nowak")
        assert store.is_authenticated
        assert user.subscription_tier == SubscriptionTier.FREE
        assert user.completed_lesson_ids == []
        assert user.current_level == "A1"
        assert user.id.startswith("user-")
        assert user.profile_picture_url == avatar_url("Anna Nowak")

    def test_login_persists_versioned_record(self, store, storage):
        store.login("anna@example.com", "Anna")
        record = json.loads(storage.get_item(USER_KEY))
        assert record["version"] == USER_RECORD_VERSION
        assert record["user"]["email"] == "anna@example.com"

    def test_rehydrate_restores_same_user(self, store, storage):
        user = store.login("anna@example.com", "Anna")
        store.complete_lesson("lesson-1")
        fresh = UserProgressStore(storage)
        fresh.rehydrate()
        assert fresh.user.id == user.id
        assert fresh.user.completed_lesson_ids == ["lesson-1"]

    def test_rehydrate_across_file_restart(self, tmp_path):
        path = tmp_path / "storage.json"
        first = UserProgressStore(LocalStorage(path))
        first.login("anna@example.com", "Anna")
        first.upgrade_to_premium()
        second = UserProgressStore(LocalStorage(path))
        second.rehydrate()
        assert second.user == first.user

    def test_new_login_replaces_session(self, store):
        first = store.login("anna@example.com", "Anna")
        store.complete_lesson("lesson-1")
        second = store.login("anna@example.com", "Anna")
        assert second.id != first.id
        assert second.completed_lesson_ids == []

    def test_avatar_seed_strips_whitespace(self):
        assert avatar_url("Anna Maria  Nowak") == "https://picsum.photos/seed/AnnaMariaNowak/100/100"


class TestLogout:
    def test_logout_clears_session(self, store, storage):
        store.login("anna@example.com", "Anna")
        store.logout()
        assert not store.is_authenticated
        assert storage.get_item(USER_KEY) is None

    def test_logout_then_rehydrate_is_anonymous(self, store, storage):
        store.login("anna@example.com", "Anna")
        store.logout()
        fresh = UserProgressStore(storage)
        fresh.rehydrate()
        assert fresh.user is None


class TestMutations:
    """Tests for tier and completion updates."""

    def test_upgrade_is_idempotent(self, store, storage):
        store.login("anna@example.com", "Anna")
        store.upgrade_to_premium()
        after_first = storage.get_item(USER_KEY)
        store.upgrade_to_premium()
        assert store.user.is_premium
        assert storage.get_item(USER_KEY) == after_first

    def test_complete_lesson_is_idempotent(self, store):
        store.login("anna@example.com", "Anna")
        store.complete_lesson("lesson-1")
        store.complete_lesson("lesson-1")
        store.complete_lesson("lesson-2")
        assert store.user.completed_lesson_ids == ["lesson-1", "lesson-2"]

    def test_mutations_without_user_are_noops(self, store, storage):
        store.upgrade_to_premium()
        store.complete_lesson("lesson-1")
        assert store.user is None
        assert storage.get_item(USER_KEY) is None


class TestMalformedRecords:
    """Unreadable records mean a logged-out start, never a crash."""

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            json.dumps({"id": "user-1", "email": "a@b.c", "name": "A"}),
            json.dumps({"version": 99, "user": {"id": "u", "email": "a@b.c", "name": "A"}}),
            json.dumps({"version": USER_RECORD_VERSION, "user": {"email": "a@b.c"}}),
            json.dumps([1, 2]),
        ],
    )
    def test_rehydrates_unauthenticated(self, storage, raw):
        storage.set_item(USER_KEY, raw)
        store = UserProgressStore(storage)
        store.rehydrate()
        assert store.user is None
        assert not store.is_authenticated


class TestTheme:
    def test_defaults_to_light(self, store):
        store.rehydrate()
        assert store.theme == "light"

    def test_toggle_persists(self, store, storage):
        assert store.toggle_theme() == "dark"
        assert storage.get_item(THEME_KEY) == "dark"
        fresh = UserProgressStore(storage)
        fresh.rehydrate()
        assert fresh.theme == "dark"

    def test_unknown_theme_ignored(self, store, storage):
        storage.set_item(THEME_KEY, "neon")
        store.rehydrate()
        assert store.theme == "light"


class TestValidateCredentials:
    """Tests for auth form validation."""

    def test_login_derives_name_from_email(self):
        assert validate_credentials("anna.nowak@example.com", "pw") == "anna.nowak"

    def test_register_uses_name(self):
        assert validate_credentials("a@b.c", "pw", "Anna", is_registering=True) == "Anna"

    def test_login_missing_password(self):
        with pytest.raises(ValidationFailure) as excinfo:
            validate_credentials("a@b.c", "")
        assert excinfo.value.missing_fields == ["password"]
        assert "email and password" in str(excinfo.value)

    def test_register_missing_name(self):
        with pytest.raises(ValidationFailure) as excinfo:
            validate_credentials("a@b.c", "pw", "  ", is_registering=True)
        assert excinfo.value.missing_fields == ["name"]
        assert "registration" in str(excinfo.value)

    def test_blank_email_counts_as_missing(self):
        with pytest.raises(ValidationFailure) as excinfo:
            validate_credentials("   ", "")
        assert excinfo.value.missing_fields == ["email", "password"]
