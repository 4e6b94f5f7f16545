#!/usr/bin/env python3
"""
Create the HealthHUB tables and fill them with demo data.

    python scripts/seed_data.py                 # seed the database at DB_URI
    python scripts/seed_data.py --hash SECRET   # just print a bcrypt hash

The two demo logins below are always created so the portal can be tried out
right away.
"""

import argparse
import random
from datetime import date, time, timedelta

from faker import Faker
from sqlalchemy import create_engine, select

from healthhub.auth import hash_password
from healthhub.config import ROLE_DOCTOR, ROLE_PATIENT, get_env
from healthhub.schema import (
    allergy_warning_system,
    appointment,
    create_schema,
    doctor,
    patient,
    user_account,
)

# --------------------------------------------------------------------
# CONFIG
# --------------------------------------------------------------------
NUM_DOCTORS = 6
NUM_PATIENTS = 30

APPOINTMENTS_PER_PATIENT = (0, 6)   # min, max
ALLERGIES_PER_PATIENT = (0, 3)

DEMO_PATIENT = {"email": "jane@x.com", "password": "janepass123", "name": "Jane Doe"}
DEMO_DOCTOR = {"email": "priya@x.com", "password": "doctorpass2025", "name": "Dr. Priya Shah"}

ALLERGENS = ["Penicillin", "Peanuts", "Latex", "Shellfish", "Sulfa drugs", "Pollen", "Aspirin"]
REACTIONS = ["Hives", "Anaphylaxis", "Rash", "Swelling", "Wheezing", "Nausea"]
REASONS = ["Annual check-up", "Follow-up", "Flu symptoms", "Back pain", "Lab results", "Skin rash"]

# --------------------------------------------------------------------
# SETUP
# --------------------------------------------------------------------
fake = Faker()
random.seed(42)
Faker.seed(42)


# --------------------------------------------------------------------
# HELPERS
# --------------------------------------------------------------------
def random_slot(days_around=90):
    day = date.today() + timedelta(days=random.randint(-days_around, days_around))
    start = time(hour=random.randint(8, 16), minute=random.choice([0, 15, 30, 45]))
    return day, start


# --------------------------------------------------------------------
# SEED FUNCTIONS
# --------------------------------------------------------------------
def seed_doctors(conn, n=NUM_DOCTORS):
    rows = [{"Name": DEMO_DOCTOR["name"]}]
    rows += [{"Name": f"Dr. {fake.first_name()} {fake.last_name()}"} for _ in range(n - 1)]
    conn.execute(doctor.insert(), rows)
    return conn.execute(select(doctor.c.DoctorID).order_by(doctor.c.DoctorID)).scalars().all()


def seed_patients(conn, n=NUM_PATIENTS):
    rows = []
    for i in range(n):
        rows.append(
            {
                "PatientName": DEMO_PATIENT["name"] if i == 0 else fake.name(),
                "Age": random.randint(18, 90),
                "Gender": random.choice(["Female", "Male", "Other"]),
                "Insurance": random.choice(["Aetna", "Blue Cross", "Cigna", "Medicare", None]),
            }
        )
    conn.execute(patient.insert(), rows)
    return conn.execute(select(patient.c.PatientID).order_by(patient.c.PatientID)).scalars().all()


def seed_appointments(conn, patient_ids, doctor_ids):
    rows = []
    for pid in patient_ids:
        for _ in range(random.randint(*APPOINTMENTS_PER_PATIENT)):
            day, start = random_slot()
            rows.append(
                {
                    "PatientID": pid,
                    "DoctorID": random.choice(doctor_ids),
                    "AppointmentDate": day,
                    "StartTime": start,
                    "ApptStatus": "Completed" if day < date.today()
                    else random.choice(["Scheduled", "Confirmed"]),
                    "ReasonForVisit": random.choice(REASONS),
                }
            )
    if rows:
        conn.execute(appointment.insert(), rows)


def seed_allergies(conn, patient_ids):
    rows = []
    for pid in patient_ids:
        for allergen in random.sample(ALLERGENS, random.randint(*ALLERGIES_PER_PATIENT)):
            severity = random.choice(["Mild", "Moderate", "Severe"])
            rows.append(
                {
                    "PatientID": pid,
                    "AllergyName": allergen,
                    "ReactionType": random.choice(REACTIONS),
                    "Severity": severity,
                    "AllergyFlag": "HIGH" if severity == "Severe" else "LOW",
                    "AllergyNotes": fake.sentence(nb_words=8),
                }
            )
    if rows:
        conn.execute(allergy_warning_system.insert(), rows)


def seed_accounts(conn, patient_ids, doctor_ids):
    rows = [
        {
            "Email": DEMO_PATIENT["email"],
            "PasswordHash": hash_password(DEMO_PATIENT["password"]),
            "Role": ROLE_PATIENT,
            "PatientID": patient_ids[0],
            "DoctorID": None,
        },
        {
            "Email": DEMO_DOCTOR["email"],
            "PasswordHash": hash_password(DEMO_DOCTOR["password"]),
            "Role": ROLE_DOCTOR,
            "PatientID": None,
            "DoctorID": doctor_ids[0],
        },
    ]
    conn.execute(user_account.insert(), rows)


# --------------------------------------------------------------------
# MAIN
# --------------------------------------------------------------------
def main():
    parser = argparse.ArgumentParser(description="Seed the HealthHUB database.")
    parser.add_argument("--hash", metavar="PASSWORD",
                        help="print a bcrypt hash for PASSWORD and exit")
    args = parser.parse_args()

    if args.hash:
        print(hash_password(args.hash))
        return

    engine = create_engine(get_env("DB_URI"))
    create_schema(engine)

    with engine.begin() as conn:
        print("Seeding doctors...")
        doctor_ids = seed_doctors(conn)

        print("Seeding patients...")
        patient_ids = seed_patients(conn)

        print("Seeding appointments and allergies...")
        seed_appointments(conn, patient_ids, doctor_ids)
        seed_allergies(conn, patient_ids)

        print("Seeding demo accounts...")
        seed_accounts(conn, patient_ids, doctor_ids)

        print("Done!")
        print(f"  patient login: {DEMO_PATIENT['email']} / {DEMO_PATIENT['password']}")
        print(f"  doctor login:  {DEMO_DOCTOR['email']} / {DEMO_DOCTOR['password']}")


if __name__ == "__main__":
    main()
