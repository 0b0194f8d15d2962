from __future__ import annotations

import pytest

from admin_panel.core.exceptions import AuthenticationError
from admin_panel.services.auth_service import (
    DEMO_USER,
    USER_KEY,
    AuthService,
    AuthSession,
    Credentials,
    User,
)
from admin_panel.services.notifications import ERROR, INFO, Notifier
from admin_panel.services.storage import InMemoryStorage
from admin_panel.validation.errors import ValidationError


@pytest.fixture
def auth():
    return AuthService(InMemoryStorage(), notifier=Notifier())


def test_login_with_demo_credentials_stores_user(auth):
    session = auth.login("admin@example.com", "admin123")

    assert session.is_authenticated
    assert session.user == DEMO_USER
    assert auth.storage.get(USER_KEY)["email"] == "john.doe@example.com"
    assert auth.notifier.drain()[-1].message == "Login successful!"


def test_login_trims_email(auth):
    assert auth.login("  admin@example.com ", "admin123").is_authenticated


def test_wrong_password_is_rejected(auth):
    with pytest.raises(AuthenticationError):
        auth.login("admin@example.com", "nope")

    assert USER_KEY not in auth.storage
    assert auth.notifier.drain()[-1].level == ERROR


def test_malformed_input_fails_validation_before_credential_check(auth):
    with pytest.raises(ValidationError) as exc:
        auth.login("admin", "")

    assert set(exc.value.field_errors) == {"email", "password"}
    assert auth.notifier.drain() == []


def test_custom_credentials():
    auth = AuthService(InMemoryStorage(), credentials=Credentials("ops@example.com", "s3cret"))
    with pytest.raises(AuthenticationError):
        auth.login("admin@example.com", "admin123")
    assert auth.login("ops@example.com", "s3cret").is_authenticated


def test_restore_reads_session_from_storage():
    storage = InMemoryStorage({USER_KEY: DEMO_USER.to_dict()})
    assert AuthService(storage).restore() == AuthSession(user=DEMO_USER)
    assert not AuthService(InMemoryStorage()).restore().is_authenticated


def test_restore_discards_malformed_user():
    storage = InMemoryStorage({USER_KEY: {"name": "No Id"}})
    assert AuthService(storage).restore() == AuthSession.anonymous()


def test_logout_clears_storage(auth):
    auth.login("admin@example.com", "admin123")

    session = auth.logout()

    assert not session.is_authenticated
    assert USER_KEY not in auth.storage
    assert auth.notifier.drain()[-1].level == INFO


@pytest.mark.parametrize(
    "name, initials",
    [("John Doe", "JD"), ("cher", "C"), ("Mary Ann Smith", "MA"), ("", "?")],
)
def test_user_initials(name, initials):
    assert User(id="1", name=name, email="x@example.com", role="Admin").initials == initials
