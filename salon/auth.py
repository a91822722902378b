"""
Authorization gate.

Bearer tokens are verified by an external identity provider (Firebase) and
resolved to the caller's UserProfile. Routes combine the dependencies below:

- get_current_identity: token required, 401 when missing or invalid
- get_optional_identity: token optional, anonymous context when absent or invalid
- require_admin / require_stylist_or_admin: role gates, 403 on insufficient role
- ensure_can_manage_appointment: row-level ownership check for stylists
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Protocol

import firebase_admin
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from sqlalchemy.orm import Session

from .config import FIREBASE_CREDENTIALS_PATH, FIREBASE_PROJECT_ID
from .database import get_db
from .models import Appointment, TeamMember, UserProfile

logger = logging.getLogger(__name__)

# auto_error=False so that a missing header is reported as 401 by us, not 403 by FastAPI
security = HTTPBearer(auto_error=False)


@dataclass
class Identity:
    """Verified claims of the external identity"""

    uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None


@dataclass
class AuthContext:
    identity: Optional[Identity] = None
    profile: Optional[UserProfile] = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def uid(self) -> Optional[str]:
        return self.identity.uid if self.identity else None

    @property
    def role(self) -> Optional[str]:
        # No profile yet means lowest privilege
        return self.profile.role if self.profile else None


class IdentityProvider(Protocol):
    def verify(self, token: str) -> Optional[Identity]:
        """Return the identity behind a token, or None if the token is not valid"""
        ...


class FirebaseIdentityProvider:
    """Verifies Firebase ID tokens with the Admin SDK"""

    def __init__(self, project_id: Optional[str] = None, credentials_path: Optional[str] = None):
        self.project_id = project_id
        self.credentials_path = credentials_path
        self._app = None

    def _get_app(self):
        if self._app is not None:
            return self._app

        try:
            self._app = firebase_admin.get_app()
        except ValueError:
            options = {"projectId": self.project_id} if self.project_id else None
            if self.credentials_path:
                cred = credentials.Certificate(self.credentials_path)
                self._app = firebase_admin.initialize_app(cred, options)
                logger.info("Firebase Admin initialized with service account")
            else:
                # Application Default Credentials; token verification only needs the project ID
                self._app = firebase_admin.initialize_app(options=options)
                logger.info("Firebase Admin initialized with default credentials")
        return self._app

    def verify(self, token: str) -> Optional[Identity]:
        try:
            decoded = firebase_auth.verify_id_token(token, app=self._get_app())
        except (ValueError, firebase_auth.InvalidIdTokenError, firebase_auth.UserDisabledError) as e:
            logger.warning(f"⚠️ Firebase token rejected: {type(e).__name__}: {e}")
            return None

        return Identity(
            uid=decoded["uid"],
            email=decoded.get("email"),
            name=decoded.get("name"),
            picture=decoded.get("picture"),
        )


@lru_cache
def get_identity_provider() -> IdentityProvider:
    """Identity provider dependency, overridable in tests"""
    return FirebaseIdentityProvider(FIREBASE_PROJECT_ID, FIREBASE_CREDENTIALS_PATH)


def _load_profile(db: Session, uid: str) -> Optional[UserProfile]:
    return db.query(UserProfile).filter(UserProfile.user_id == uid).first()


async def get_current_identity(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(security),
    provider: IdentityProvider = Depends(get_identity_provider),
    db: Session = Depends(get_db),
) -> AuthContext:
    """Require a valid bearer token and attach the caller's profile if one exists"""
    if not creds or not creds.credentials:
        raise HTTPException(status_code=401, detail="Unauthorized - No token provided")

    token = creds.credentials
    if len(token.split(".")) != 3:
        logger.warning(f"⚠️ Malformed token received, length: {len(token)}")
        raise HTTPException(status_code=401, detail="Unauthorized - Invalid token format")

    identity = provider.verify(token)
    if identity is None:
        raise HTTPException(status_code=401, detail="Unauthorized - Invalid token")

    return AuthContext(identity=identity, profile=_load_profile(db, identity.uid))


async def get_optional_identity(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(security),
    provider: IdentityProvider = Depends(get_identity_provider),
    db: Session = Depends(get_db),
) -> AuthContext:
    """Attach the caller's identity when a valid token is present, otherwise proceed anonymously"""
    if not creds or not creds.credentials:
        return AuthContext()

    try:
        identity = provider.verify(creds.credentials)
    except Exception as e:
        logger.warning(f"⚠️ Optional auth skipped, verification failed: {e}")
        return AuthContext()

    if identity is None:
        return AuthContext()
    return AuthContext(identity=identity, profile=_load_profile(db, identity.uid))


async def require_admin(ctx: AuthContext = Depends(get_current_identity)) -> AuthContext:
    if ctx.role != "admin":
        logger.warning(f"🚫 Admin access denied for {ctx.uid} (role={ctx.role})")
        raise HTTPException(status_code=403, detail="Forbidden - Admin access required")
    return ctx


async def require_stylist_or_admin(ctx: AuthContext = Depends(get_current_identity)) -> AuthContext:
    if ctx.role not in ("stylist", "admin"):
        logger.warning(f"🚫 Stylist access denied for {ctx.uid} (role={ctx.role})")
        raise HTTPException(status_code=403, detail="Forbidden - Stylist or Admin access required")
    return ctx


def ensure_can_manage_appointment(db: Session, ctx: AuthContext, appointment: Appointment) -> None:
    """Admins manage every appointment, stylists only those booked with themselves"""
    if ctx.role == "admin":
        return

    if ctx.role == "stylist":
        member = db.query(TeamMember).filter(TeamMember.user_id == ctx.uid).first()
        if member and member.id == appointment.stylist_id:
            return

    logger.warning(f"🚫 User {ctx.uid} tried to manage appointment {appointment.id}")
    raise HTTPException(status_code=403, detail="You can only manage your own appointments")
