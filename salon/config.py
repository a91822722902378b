import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./salon.db")

# Firebase Configuration
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")
# Path to a service account JSON file; falls back to Application Default Credentials
FIREBASE_CREDENTIALS_PATH = os.getenv("FIREBASE_CREDENTIALS_PATH")

# Frontend base URL, used to build the login redirect for the booking wizard
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
LOGIN_URL = os.getenv("LOGIN_URL", f"{FRONTEND_URL}/auth")

ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:5173,http://localhost:3000",
).split(",")

# Reject a second non-cancelled booking for the same stylist/date/time with a 409.
# Off by default: availability filtering alone decides what clients are offered.
ENFORCE_SLOT_EXCLUSIVITY = os.getenv("ENFORCE_SLOT_EXCLUSIVITY", "false").lower() == "true"

# Seconds between unread-count polls in the client
NOTIFICATION_POLL_INTERVAL = float(os.getenv("NOTIFICATION_POLL_INTERVAL", "30"))
