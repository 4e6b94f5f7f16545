"""
Centralised configuration constants and environment helpers.
"""

import os
import sys

from dotenv import load_dotenv

load_dotenv()

# ── Roles ────────────────────────────────────────────────────────────
ROLE_PATIENT = "PATIENT"
ROLE_DOCTOR = "DOCTOR"
SUPPORTED_ROLES = {ROLE_PATIENT, ROLE_DOCTOR}

# ── Dashboard limits ─────────────────────────────────────────────────
PATIENT_RECENT_APPOINTMENTS = 5
DOCTOR_UPCOMING_APPOINTMENTS = 10

# ── Sessions ─────────────────────────────────────────────────────────
SECRET_KEY = os.getenv("SESSION_SECRET_KEY", "dev-secret-key-change-in-production")
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "healthhub_session")
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"
SESSION_IDLE_MINUTES = int(os.getenv("SESSION_IDLE_MINUTES", "30"))
SESSION_MAX_HOURS = int(os.getenv("SESSION_MAX_HOURS", "24"))

# Same text for unknown email and wrong password.
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


def get_env(name: str) -> str:
    """Return an environment variable or exit with an error message."""
    value = os.getenv(name)
    if not value:
        print(f"ERROR: env var {name} is not set", file=sys.stderr)
        sys.exit(1)
    return value
