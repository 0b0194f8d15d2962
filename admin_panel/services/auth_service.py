from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from admin_panel.core.exceptions import AuthenticationError
from admin_panel.services.notifications import Notifier
from admin_panel.services.storage import KeyValueStorage
from admin_panel.validation.form_validation import validate_login_form

logger = logging.getLogger(__name__)

USER_KEY = "user"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: str
    avatar: Optional[str] = None

    @property
    def initials(self) -> str:
        parts = [p for p in self.name.split() if p]
        return "".join(p[0] for p in parts[:2]).upper() or "?"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Optional[User]:
        if not isinstance(data, dict):
            return None
        try:
            return cls(
                id=str(data["id"]),
                name=str(data["name"]),
                email=str(data["email"]),
                role=str(data.get("role", "")),
                avatar=data.get("avatar"),
            )
        except KeyError:
            logger.warning("Discarding malformed stored user: %r", data)
            return None


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str


DEMO_USER = User(
    id="1",
    name="John Doe",
    email="john.doe@example.com",
    role="Admin",
    avatar="https://i.pravatar.cc/150?img=1",
)

DEMO_CREDENTIALS = Credentials(email="admin@example.com", password="admin123")


@dataclass(frozen=True)
class AuthSession:
    """
    Explicit auth context passed into layout builders and page renderers.

    Created from storage when the app shell renders and replaced by an
    anonymous session on logout.
    """
    user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @classmethod
    def anonymous(cls) -> AuthSession:
        return cls(user=None)


class AuthService:
    """
    Mock credential check backed by a key-value store.

    The stored user under the "user" key is the whole session: present means
    logged in.
    """

    def __init__(
            self,
            storage: KeyValueStorage,
            *,
            credentials: Credentials = DEMO_CREDENTIALS,
            user: User = DEMO_USER,
            notifier: Optional[Notifier] = None,
    ):
        self.storage = storage
        self.credentials = credentials
        self.user = user
        self.notifier = notifier or Notifier()

    def restore(self) -> AuthSession:
        """Rebuild the session from storage (page load)."""
        return AuthSession(user=User.from_dict(self.storage.get(USER_KEY)))

    def login(self, email: str, password: str) -> AuthSession:
        """
        Raises:
            ValidationError: if the email/password are malformed
            AuthenticationError: if they do not match the configured credentials
        """
        validate_login_form(email, password)

        if email.strip() != self.credentials.email or password != self.credentials.password:
            logger.info("Login rejected", extra={"email": email})
            self.notifier.error("Invalid email or password")
            raise AuthenticationError("Invalid email or password")

        self.storage.set(USER_KEY, self.user.to_dict())
        logger.info("Login successful", extra={"user_id": self.user.id})
        self.notifier.success("Login successful!")
        return AuthSession(user=self.user)

    def logout(self) -> AuthSession:
        self.storage.remove(USER_KEY)
        self.notifier.info("You have been logged out")
        return AuthSession.anonymous()
