"""
Flask application factory and server entry-point.
"""

import os
import sys
import traceback

from flask import Flask
from flask_cors import CORS

from healthhub.config import SESSION_IDLE_MINUTES, SESSION_MAX_HOURS
from healthhub.database import init_engine
from healthhub.api.routes import register_routes
from healthhub.api.sessions import SessionStore


def create_app(engine=None, store=None):
    """Build and return a fully configured Flask application.

    *engine* and *store* are created here unless the caller injects them.
    """
    app = Flask(__name__)
    # the portal pages authenticate with the session cookie
    CORS(app, supports_credentials=True)

    # ── Initialise shared resources ──────────────────────────────────
    if engine is None:
        try:
            print("[init] Initializing database connection...")
            engine = init_engine()
        except Exception as e:
            print(f"[FATAL] Failed to initialize: {e}", file=sys.stderr)
            traceback.print_exc()
            sys.exit(1)

    if store is None:
        store = SessionStore()

    # ── Register routes ──────────────────────────────────────────────
    register_routes(app, engine, store)

    print("[init] ✓ API server ready")
    return app


def main():
    """Run the development server."""
    print("=" * 60)
    print("HealthHub Clinic Portal – REST API Server")
    print("=" * 60)

    app = create_app()

    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "3000"))
    debug = os.getenv("FLASK_ENV") == "development"

    print(f"\n[server] Starting Flask API on {host}:{port}")
    print(f"[server] Debug mode: {debug}")
    print(f"[server] CORS enabled: True")
    print(f"[server] Session idle timeout: {SESSION_IDLE_MINUTES} minutes")
    print(f"[server] Session max age: {SESSION_MAX_HOURS} hours")
    print("\nAPI Endpoints:")
    print(f"  - POST http://{host}:{port}/login")
    print(f"  - GET  http://{host}:{port}/api/patient/dashboard")
    print(f"  - GET  http://{host}:{port}/api/doctor/dashboard")
    print(f"  - POST http://{host}:{port}/logout")
    print(f"  - GET  http://{host}:{port}/health")
    print("\n" + "=" * 60)

    app.run(host=host, port=port, debug=debug, threaded=True)


if __name__ == "__main__":
    main()
