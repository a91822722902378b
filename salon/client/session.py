"""
Client-side auth session.

The identity provider reports sign-in/sign-out through on_identity_change();
the session re-syncs the caller's role with the API and notifies subscribers.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from .api import ApiError, SalonApiClient

logger = logging.getLogger(__name__)


@dataclass
class SignedInUser:
    """What the identity provider reports for a signed-in account"""

    uid: str
    id_token: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None


@dataclass
class SessionUser:
    id: str
    email: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    display_name: Optional[str]
    profile_image_url: Optional[str]
    role: str = "client"

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip() or (self.email or "")


Listener = Callable[[Optional[SessionUser]], None]


def _split(display_name: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    parts = (display_name or "").split()
    if not parts:
        return None, None
    return parts[0], " ".join(parts[1:]) or None


class AuthSession:
    def __init__(self, api: SalonApiClient):
        self.api = api
        self.user: Optional[SessionUser] = None
        self._token: Optional[str] = None
        self._listeners: list[Listener] = []

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_admin(self) -> bool:
        return self.user is not None and self.user.role == "admin"

    @property
    def is_stylist(self) -> bool:
        return self.user is not None and self.user.role == "stylist"

    @property
    def is_client(self) -> bool:
        return self.user is not None and self.user.role == "client"

    def get_id_token(self) -> Optional[str]:
        return self._token

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on_identity_change(self, signed_in: Optional[SignedInUser]) -> Optional[SessionUser]:
        """Resync the local session and role after a sign-in or sign-out"""
        if signed_in is None:
            self._token = None
            self.user = None
        else:
            self._token = signed_in.id_token
            self.user = self._sync(signed_in)

        for listener in list(self._listeners):
            listener(self.user)
        return self.user

    def _sync(self, signed_in: SignedInUser) -> SessionUser:
        first_name, last_name = _split(signed_in.display_name)
        user = SessionUser(
            id=signed_in.uid,
            email=signed_in.email,
            first_name=first_name,
            last_name=last_name,
            display_name=signed_in.display_name,
            profile_image_url=signed_in.photo_url,
        )
        try:
            data = self.api.sync(signed_in.id_token)
        except (ApiError, httpx.HTTPError) as e:
            # Keep the user signed in with the lowest role
            logger.warning(f"⚠️ Profile sync failed for {signed_in.uid}, defaulting to client: {e}")
            return user

        user.first_name = data.get("firstName") or first_name
        user.last_name = data.get("lastName") or last_name
        user.role = data.get("role") or "client"
        return user
