from datetime import datetime, timedelta, timezone

import pytest
from werkzeug.security import generate_password_hash

from src.ops_dashboard.ops_dashboard.core.exceptions import AuthenticationError
from src.ops_dashboard.ops_dashboard.users.service import AuthContext, AuthService

T0 = datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)


class Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


def _auth(clock):
    return AuthService(username="admin", password_hash=generate_password_hash("secret"), max_age_hours=12, clock=clock)


def test_authenticate_returns_context():
    ctx = _auth(Clock(T0)).authenticate("admin", "secret")
    assert ctx == AuthContext(username="admin", logged_in_at=T0)


@pytest.mark.parametrize("username,password", [("admin", "wrong"), ("root", "secret"), ("", "")])
def test_authenticate_rejects_bad_credentials(username, password):
    with pytest.raises(AuthenticationError):
        _auth(Clock(T0)).authenticate(username, password)


def test_corrupted_hash_is_rejected():
    auth = AuthService(username="admin", password_hash="CHANGE_ME")
    with pytest.raises(AuthenticationError):
        auth.authenticate("admin", "CHANGE_ME")


def test_session_round_trip_and_expiry():
    clock = Clock(T0)
    auth = _auth(clock)
    stored = auth.authenticate("admin", "secret").to_session()

    clock.now = T0 + timedelta(hours=11)
    assert auth.validate(stored).username == "admin"

    clock.now = T0 + timedelta(hours=12, minutes=1)
    with pytest.raises(AuthenticationError):
        auth.validate(stored)


@pytest.mark.parametrize("data", [None, {}, {"username": "admin"}, {"username": "admin", "loggedInAt": "garbage"}])
def test_invalid_session_data_is_rejected(data):
    with pytest.raises(AuthenticationError):
        _auth(Clock(T0)).validate(data)


def test_plain_password_setting_is_hashed():
    auth = AuthService.from_settings(username="admin", password="pw")
    assert auth.authenticate("admin", "pw").username == "admin"
