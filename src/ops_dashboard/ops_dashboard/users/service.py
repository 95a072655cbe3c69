from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import utc_now
from ..common.docs import opt_datetime
from ..core.constants import DEFAULT_SESSION_HOURS
from ..core.exceptions import AuthenticationError


@dataclass(frozen=True)
class AuthContext:
    """What we store into the Flask session after login."""

    username: str
    logged_in_at: datetime

    def expired(self, *, now: datetime, max_age: timedelta) -> bool:
        return now - self.logged_in_at > max_age

    def to_session(self) -> dict[str, str]:
        return {"username": self.username, "loggedInAt": self.logged_in_at.isoformat()}

    @classmethod
    def from_session(cls, data: Optional[Mapping[str, Any]]) -> Optional["AuthContext"]:
        if not data or not data.get("username"):
            return None
        logged_in_at = opt_datetime(data.get("loggedInAt"))
        if logged_in_at is None or logged_in_at.tzinfo is None:
            return None
        return cls(username=str(data["username"]), logged_in_at=logged_in_at)


class AuthService:
    """Use case: single admin login."""

    def __init__(
        self,
        *,
        username: str,
        password_hash: str,
        max_age_hours: float = DEFAULT_SESSION_HOURS,
        clock=utc_now,
    ):
        self._username = username
        self._password_hash = password_hash
        self.max_age = timedelta(hours=max_age_hours)
        self._clock = clock

    @classmethod
    def from_settings(cls, *, username: str, password_hash: str = "", password: str = "", max_age_hours: float = DEFAULT_SESSION_HOURS) -> "AuthService":
        if not password_hash and password:
            password_hash = generate_password_hash(password)
        return cls(username=username, password_hash=password_hash, max_age_hours=max_age_hours)

    def authenticate(self, username: str, password: str) -> AuthContext:
        if not self._password_hash or (username or "").strip() != self._username:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(self._password_hash, password or "")
        except ValueError:
            # unsupported or corrupted hash values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password")
        return AuthContext(username=self._username, logged_in_at=self._clock())

    def validate(self, data: Optional[Mapping[str, Any]]) -> AuthContext:
        ctx = AuthContext.from_session(data)
        if ctx is None:
            raise AuthenticationError("Please log in to continue")
        if ctx.expired(now=self._clock(), max_age=self.max_age):
            raise AuthenticationError("Session expired, please log in again")
        return ctx
