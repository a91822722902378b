"""Python client for the salon API: session, booking wizard and notification badge"""

from .api import ApiError, SalonApiClient
from .notifications import UnreadCountPoller
from .session import AuthSession, SessionUser, SignedInUser
from .wizard import BookingStep, BookingWizard, LoginRequired, WizardError

__all__ = [
    "ApiError",
    "SalonApiClient",
    "UnreadCountPoller",
    "AuthSession",
    "SessionUser",
    "SignedInUser",
    "BookingStep",
    "BookingWizard",
    "LoginRequired",
    "WizardError",
]
