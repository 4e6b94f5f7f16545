"""
Table definitions for the HealthHUB database.

The API only reads these tables with hand-written SQL; the definitions exist so
the schema can be created for tests and for the seed script.
"""

from sqlalchemy import (
    Column, Date, ForeignKey, Integer, MetaData, String, Table, Text, Time,
)

metadata = MetaData()

patient = Table(
    "Patient", metadata,
    Column("PatientID", Integer, primary_key=True, autoincrement=True),
    Column("PatientName", String(100), nullable=False),
    Column("Age", Integer),
    Column("Gender", String(20)),
    Column("Insurance", String(100)),
)

doctor = Table(
    "Doctor", metadata,
    Column("DoctorID", Integer, primary_key=True, autoincrement=True),
    Column("Name", String(100), nullable=False),
)

user_account = Table(
    "UserAccount", metadata,
    Column("UserID", Integer, primary_key=True, autoincrement=True),
    Column("Email", String(255), nullable=False, unique=True),
    Column("PasswordHash", String(255), nullable=False),
    Column("Role", String(20), nullable=False),  # PATIENT | DOCTOR
    Column("PatientID", Integer, ForeignKey("Patient.PatientID"), nullable=True),
    Column("DoctorID", Integer, ForeignKey("Doctor.DoctorID"), nullable=True),
)

appointment = Table(
    "Appointment", metadata,
    Column("AppointmentID", Integer, primary_key=True, autoincrement=True),
    Column("PatientID", Integer, ForeignKey("Patient.PatientID"), nullable=False),
    Column("DoctorID", Integer, ForeignKey("Doctor.DoctorID"), nullable=False),
    Column("AppointmentDate", Date, nullable=False),
    Column("StartTime", Time, nullable=False),
    Column("ApptStatus", String(30)),
    Column("ReasonForVisit", String(255)),
)

allergy_warning_system = Table(
    "Allergy_Warning_System", metadata,
    Column("AllergyID", Integer, primary_key=True, autoincrement=True),
    Column("PatientID", Integer, ForeignKey("Patient.PatientID"), nullable=False),
    Column("AllergyName", String(100), nullable=False),
    Column("ReactionType", String(100)),
    Column("Severity", String(30)),
    Column("AllergyFlag", String(30)),
    Column("AllergyNotes", Text),
)


def create_schema(engine):
    """Create any missing tables."""
    metadata.create_all(engine)
