"""
Manual smoke test for the HealthHub API endpoints.
Run the API server first: python api_server.py
Seed the demo logins:     python scripts/seed_data.py
Then run this:            python scripts/smoke_api.py
"""

import json
import os

import requests

BASE_URL = os.getenv("HEALTHHUB_URL", "http://localhost:3000")

PATIENT_LOGIN = {"email": "jane@x.com", "password": "janepass123", "role": "patient"}
DOCTOR_LOGIN = {"email": "priya@x.com", "password": "doctorpass2025", "role": "doctor"}


def banner(title):
    print("\n" + "=" * 50)
    print(f"CHECK: {title}")
    print("=" * 50)


def show(response):
    print(f"Status Code: {response.status_code}")
    print(f"Response: {json.dumps(response.json(), indent=2)[:1500]}")


def check_health():
    banner("Health Check")
    response = requests.get(f"{BASE_URL}/health")
    show(response)
    return response.status_code == 200


def check_login_invalid():
    banner("Login with Invalid Credentials")
    response = requests.post(
        f"{BASE_URL}/login",
        json={"email": "nobody@x.com", "password": "wrong"},
    )
    show(response)
    return response.status_code == 200 and response.json().get("success") is False


def check_dashboard_without_session():
    banner("Dashboard Without Session")
    response = requests.get(f"{BASE_URL}/api/patient/dashboard")
    show(response)
    return response.status_code == 401


def check_role_flow(credentials, own_path, other_path):
    """Login, load the own dashboard, get 403 on the other one, logout, get 401."""
    http = requests.Session()
    ok = True

    banner(f"Login as {credentials['email']}")
    response = http.post(f"{BASE_URL}/login", json=credentials)
    show(response)
    ok &= response.json().get("success") is True

    banner(f"GET {own_path}")
    response = http.get(f"{BASE_URL}{own_path}")
    show(response)
    ok &= response.status_code == 200

    banner(f"GET {other_path} (wrong role)")
    response = http.get(f"{BASE_URL}{other_path}")
    show(response)
    ok &= response.status_code == 403

    banner("Logout")
    old_cookies = http.cookies.get_dict()
    response = http.post(f"{BASE_URL}/logout")
    show(response)
    ok &= response.json().get("success") is True

    banner(f"GET {own_path} with the old session cookie")
    response = requests.get(f"{BASE_URL}{own_path}", cookies=old_cookies)
    show(response)
    ok &= response.status_code == 401

    return bool(ok)


def main():
    print("=" * 50)
    print("HealthHub API Smoke Test")
    print("=" * 50)
    print(f"Base URL: {BASE_URL}")
    print("Make sure the API server is running!")

    results = {}
    try:
        results["Health Check"] = check_health()
        results["Login Invalid"] = check_login_invalid()
        results["No Session"] = check_dashboard_without_session()
        results["Patient Flow"] = check_role_flow(
            PATIENT_LOGIN, "/api/patient/dashboard", "/api/doctor/dashboard")
        results["Doctor Flow"] = check_role_flow(
            DOCTOR_LOGIN, "/api/doctor/dashboard", "/api/patient/dashboard")
    except requests.RequestException as e:
        print(f"\n\nERROR: {e}")

    print("\n" + "=" * 50)
    print("SUMMARY")
    print("=" * 50)
    passed = sum(1 for v in results.values() if v)
    for name, result in results.items():
        status = "✓ PASS" if result else "✗ FAIL"
        print(f"{status}: {name}")
    print(f"\nTotal: {passed}/{len(results)} checks passed")
    print("=" * 50)


if __name__ == "__main__":
    main()
