"""
Dashboard payloads for the patient and doctor portals.

Each query runs on its own pooled connection; errors are left to the route,
which turns them into a single generic failure.
"""

from typing import Any, Dict

from healthhub.config import DOCTOR_UPCOMING_APPOINTMENTS, PATIENT_RECENT_APPOINTMENTS
from healthhub.database import fetch_all, fetch_one


PATIENT_PROFILE_SQL = """
    SELECT PatientName, Age, Gender, Insurance
    FROM Patient
    WHERE PatientID = :patient_id
"""

PATIENT_APPOINTMENTS_SQL = """
    SELECT
        a.AppointmentID,
        a.AppointmentDate,
        a.StartTime,
        a.ApptStatus,
        a.ReasonForVisit,
        d.Name AS DoctorName
    FROM Appointment a
    JOIN Doctor d ON a.DoctorID = d.DoctorID
    WHERE a.PatientID = :patient_id
    ORDER BY a.AppointmentDate DESC, a.StartTime DESC
    LIMIT :limit
"""

PATIENT_ALLERGIES_SQL = """
    SELECT AllergyName, ReactionType, Severity, AllergyFlag, AllergyNotes
    FROM Allergy_Warning_System
    WHERE PatientID = :patient_id
"""

DOCTOR_APPOINTMENTS_SQL = """
    SELECT
        a.AppointmentID,
        a.AppointmentDate,
        a.StartTime,
        a.ApptStatus,
        a.ReasonForVisit,
        p.PatientName
    FROM Appointment a
    JOIN Patient p ON a.PatientID = p.PatientID
    WHERE a.DoctorID = :doctor_id
    ORDER BY a.AppointmentDate, a.StartTime
    LIMIT :limit
"""

DOCTOR_PATIENTS_SQL = """
    SELECT DISTINCT
        p.PatientID,
        p.PatientName,
        p.Age,
        p.Gender
    FROM Appointment a
    JOIN Patient p ON a.PatientID = p.PatientID
    WHERE a.DoctorID = :doctor_id
    ORDER BY p.PatientName
"""


def load_patient_dashboard(engine, patient_id: int) -> Dict[str, Any]:
    """Profile, five most recent appointments and allergy warnings for one patient."""
    params = {"patient_id": patient_id}
    profile = fetch_one(engine, PATIENT_PROFILE_SQL, params)
    appointments = fetch_all(
        engine, PATIENT_APPOINTMENTS_SQL,
        {**params, "limit": PATIENT_RECENT_APPOINTMENTS},
    )
    allergies = fetch_all(engine, PATIENT_ALLERGIES_SQL, params)
    return {
        "patient": profile,
        "appointments": appointments,
        "allergies": allergies,
    }


def load_doctor_dashboard(engine, doctor_id: int) -> Dict[str, Any]:
    """Next ten appointments and the alphabetical list of patients seen."""
    params = {"doctor_id": doctor_id}
    appointments = fetch_all(
        engine, DOCTOR_APPOINTMENTS_SQL,
        {**params, "limit": DOCTOR_UPCOMING_APPOINTMENTS},
    )
    patients = fetch_all(engine, DOCTOR_PATIENTS_SQL, params)
    return {
        "appointments": appointments,
        "patients": patients,
    }
