"""
Credential checks – loading a UserAccount by email and verifying its password.
"""

from typing import Any, Dict, Optional

import bcrypt

from healthhub.config import INVALID_CREDENTIALS_MESSAGE, SUPPORTED_ROLES
from healthhub.database import fetch_one
from healthhub.models import SessionIdentity


class InvalidCredentials(ValueError):
    """Login failed. The message never says which part was wrong."""

    def __init__(self, message: str = INVALID_CREDENTIALS_MESSAGE):
        super().__init__(message)


def load_user_account(engine, email: str) -> Optional[Dict[str, Any]]:
    """Look up a user by email and return the UserAccount row (or None)."""
    return fetch_one(
        engine,
        """
        SELECT UserID, Email, PasswordHash, Role, PatientID, DoctorID
        FROM UserAccount
        WHERE Email = :email
        """,
        {"email": email},
    )


def hash_password(password: str, rounds: int = 10) -> str:
    """Return a bcrypt hash suitable for UserAccount.PasswordHash."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("ascii")


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """Compare a plaintext password with a stored bcrypt hash."""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # not a bcrypt hash
        return False


def authenticate(engine, email: str, password: str) -> SessionIdentity:
    """Check an email/password pair and return the identity to store in the session.

    The role always comes from UserAccount; whatever role the client claimed
    at login is not consulted. Database errors propagate to the caller.
    """
    if not email or not password:
        raise InvalidCredentials()

    row = load_user_account(engine, email.strip())
    if not row:
        raise InvalidCredentials()

    if not verify_password(password, row["PasswordHash"]):
        raise InvalidCredentials()

    role = str(row["Role"]).strip().upper()
    if role not in SUPPORTED_ROLES:
        print(f"[WARN] UserAccount {row['UserID']} has unsupported role '{row['Role']}'")
        raise InvalidCredentials()

    return SessionIdentity(
        user_id=int(row["UserID"]),
        role=role,
        patient_id=int(row["PatientID"]) if row["PatientID"] is not None else None,
        doctor_id=int(row["DoctorID"]) if row["DoctorID"] is not None else None,
    )
