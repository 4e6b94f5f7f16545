"""
Domain dataclasses used across the application.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SessionIdentity:
    """Who is logged in, as loaded from UserAccount at login time."""
    user_id: int
    role: str                  # "PATIENT" or "DOCTOR"
    patient_id: Optional[int]  # set for patients
    doctor_id: Optional[int]   # set for doctors
