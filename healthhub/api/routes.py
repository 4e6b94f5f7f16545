"""
Flask route handlers for the REST API.
"""

import sys
import traceback

from flask import jsonify, request
from sqlalchemy import text

from healthhub.auth import InvalidCredentials, authenticate
from healthhub.config import (
    ROLE_DOCTOR,
    ROLE_PATIENT,
    SESSION_COOKIE_NAME,
    SESSION_COOKIE_SECURE,
)
from healthhub.dashboards import load_doctor_dashboard, load_patient_dashboard
from healthhub.api.sessions import (
    SessionStore,
    login_required,
    role_required,
    session_token_from_request,
)


def register_routes(app, engine, store: SessionStore):
    """Register all API routes on the Flask *app*."""

    # ── Health / info ────────────────────────────────────────────────

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({
            "service": "HealthHub Clinic Portal API",
            "version": "1.0.0",
            "status": "running",
            "endpoints": {
                "login": "/login",
                "patient_dashboard": "/api/patient/dashboard",
                "doctor_dashboard": "/api/doctor/dashboard",
                "logout": "/logout",
                "health": "/health",
            },
        })

    @app.route("/health", methods=["GET"])
    def health():
        checks = {"database": False}
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            checks["database"] = True
        except Exception as e:
            print(f"[WARN] Health check could not reach the database: {e}", file=sys.stderr)

        all_healthy = all(checks.values())
        return jsonify({
            "status": "healthy" if all_healthy else "unhealthy",
            "checks": checks,
            "active_sessions": len(store),
        }), 200 if all_healthy else 503

    # ── Auth ─────────────────────────────────────────────────────────

    @app.route("/login", methods=["POST"])
    def login():
        # "role" may be posted by the login form's toggle; the stored role wins.
        data = request.get_json(silent=True) or request.form
        email = str(data.get("email") or "")
        password = str(data.get("password") or "")

        try:
            identity = authenticate(engine, email, password)
        except InvalidCredentials as e:
            return jsonify({"success": False, "message": str(e)}), 200
        except Exception as e:
            print(f"[ERROR] Login error: {e}", file=sys.stderr)
            traceback.print_exc()
            return jsonify({"success": False, "message": "Server error"}), 500

        # Never reuse a session id the client arrived with.
        store.destroy(session_token_from_request())
        store.cleanup_expired()
        token = store.create(identity)
        print(f"[auth] User {identity.user_id} logged in (role={identity.role})")

        response = jsonify({"success": True, "role": identity.role})
        response.set_cookie(
            SESSION_COOKIE_NAME,
            token,
            max_age=int(store.max_age.total_seconds()),
            httponly=True,
            secure=SESSION_COOKIE_SECURE,
            samesite="Lax",
        )
        return response, 200

    @app.route("/logout", methods=["POST"])
    def logout():
        store.destroy(session_token_from_request())
        response = jsonify({"success": True})
        response.delete_cookie(SESSION_COOKIE_NAME)
        return response, 200

    # ── Dashboards ───────────────────────────────────────────────────

    @app.route("/api/patient/dashboard", methods=["GET"])
    @login_required(store)
    @role_required(ROLE_PATIENT)
    def patient_dashboard(identity):
        if identity.patient_id is None:
            return jsonify({"success": False, "message": "No patient linked to this user"}), 400

        try:
            payload = load_patient_dashboard(engine, identity.patient_id)
        except Exception as e:
            print(f"[ERROR] Patient dashboard error: {e}", file=sys.stderr)
            traceback.print_exc()
            return jsonify({"success": False, "message": "Could not load patient dashboard"}), 500

        return jsonify({"success": True, **payload}), 200

    @app.route("/api/doctor/dashboard", methods=["GET"])
    @login_required(store)
    @role_required(ROLE_DOCTOR)
    def doctor_dashboard(identity):
        if identity.doctor_id is None:
            return jsonify({"success": False, "message": "No doctor linked to this user"}), 400

        try:
            payload = load_doctor_dashboard(engine, identity.doctor_id)
        except Exception as e:
            print(f"[ERROR] Doctor dashboard error: {e}", file=sys.stderr)
            traceback.print_exc()
            return jsonify({"success": False, "message": "Could not load doctor dashboard"}), 500

        return jsonify({"success": True, **payload}), 200

    # ── Error handlers ───────────────────────────────────────────────

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"success": False, "message": "Endpoint not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"success": False, "message": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(e):
        return jsonify({"success": False, "message": "Internal server error"}), 500
