"""
Shared fixtures: a throwaway SQLite HealthHUB database and a Flask test client.
"""

from datetime import date, time

import pytest
from sqlalchemy import create_engine

from healthhub.auth import hash_password
from healthhub.api.app import create_app
from healthhub.api.sessions import SessionStore
from healthhub.schema import (
    allergy_warning_system,
    appointment,
    create_schema,
    doctor,
    patient,
    user_account,
)

PASSWORDS = {
    "jane@x.com": "janepass123",
    "priya@x.com": "doctorpass2025",
    "omar@x.com": "omarpass",
    "orphan.patient@x.com": "orphanpass",
    "orphan.doctor@x.com": "orphanpass",
}

# (patient_id, doctor_id, date, start time)
APPOINTMENTS = [
    # Jane Doe
    (1, 1, date(2025, 1, 10), time(9, 0)),
    (1, 1, date(2025, 3, 5), time(14, 30)),
    (1, 2, date(2025, 3, 5), time(9, 15)),
    (1, 1, date(2025, 6, 20), time(11, 0)),
    (1, 2, date(2024, 12, 1), time(10, 0)),
    (1, 1, date(2025, 8, 15), time(8, 45)),
    (1, 1, date(2025, 2, 14), time(16, 0)),
    # Alan Brooks
    (2, 1, date(2024, 11, 20), time(10, 0)),
    (2, 1, date(2025, 1, 10), time(8, 0)),
    (2, 1, date(2025, 4, 1), time(13, 0)),
    (2, 1, date(2025, 7, 7), time(9, 30)),
    (2, 1, date(2025, 9, 9), time(15, 0)),
    # Carla Diaz
    (3, 1, date(2024, 10, 2), time(12, 0)),
    (3, 1, date(2025, 1, 10), time(8, 30)),
    (3, 1, date(2025, 5, 5), time(10, 45)),
    (3, 2, date(2025, 5, 6), time(9, 0)),
]


def seed(engine):
    with engine.begin() as conn:
        conn.execute(doctor.insert(), [
            {"DoctorID": 1, "Name": "Dr. Priya Shah"},
            {"DoctorID": 2, "Name": "Dr. Omar Reyes"},
        ])
        conn.execute(patient.insert(), [
            {"PatientID": 1, "PatientName": "Jane Doe", "Age": 34, "Gender": "Female", "Insurance": "Aetna"},
            {"PatientID": 2, "PatientName": "Alan Brooks", "Age": 61, "Gender": "Male", "Insurance": "Medicare"},
            {"PatientID": 3, "PatientName": "Carla Diaz", "Age": 45, "Gender": "Female", "Insurance": None},
            {"PatientID": 4, "PatientName": "Ben Ortiz", "Age": 22, "Gender": "Male", "Insurance": "Cigna"},
        ])
        conn.execute(appointment.insert(), [
            {
                "PatientID": pid, "DoctorID": did, "AppointmentDate": day, "StartTime": start,
                "ApptStatus": "Scheduled", "ReasonForVisit": "Check-up",
            }
            for pid, did, day, start in APPOINTMENTS
        ])
        conn.execute(allergy_warning_system.insert(), [
            {"PatientID": 1, "AllergyName": "Penicillin", "ReactionType": "Hives",
             "Severity": "Severe", "AllergyFlag": "HIGH", "AllergyNotes": "Carries epinephrine"},
            {"PatientID": 1, "AllergyName": "Peanuts", "ReactionType": "Swelling",
             "Severity": "Moderate", "AllergyFlag": "LOW", "AllergyNotes": None},
            {"PatientID": 2, "AllergyName": "Latex", "ReactionType": "Rash",
             "Severity": "Mild", "AllergyFlag": "LOW", "AllergyNotes": None},
        ])
        accounts = [
            ("jane@x.com", "PATIENT", 1, None),
            ("priya@x.com", "DOCTOR", None, 1),
            ("omar@x.com", "DOCTOR", None, 2),
            ("orphan.patient@x.com", "PATIENT", None, None),
            ("orphan.doctor@x.com", "DOCTOR", None, None),
        ]
        conn.execute(user_account.insert(), [
            {
                "Email": email,
                # low cost factor keeps the suite fast
                "PasswordHash": hash_password(PASSWORDS[email], rounds=4),
                "Role": role, "PatientID": pid, "DoctorID": did,
            }
            for email, role, pid, did in accounts
        ])


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'healthhub.db'}", future=True)
    create_schema(engine)
    seed(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store():
    return SessionStore(secret_key="test-secret")


@pytest.fixture
def app(engine, store):
    app = create_app(engine=engine, store=store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Log the test client in and return the parsed response body."""
    def _login(email, password=None, **extra):
        body = {"email": email, "password": password or PASSWORDS.get(email, ""), **extra}
        return client.post("/login", json=body).get_json()
    return _login
