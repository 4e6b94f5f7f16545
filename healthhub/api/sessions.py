"""
Server-side session store and the login / role guards for the Flask API.
"""

import secrets
import threading
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Any, Dict, Optional

import jwt
from flask import jsonify, request

from healthhub.config import (
    SECRET_KEY,
    SESSION_COOKIE_NAME,
    SESSION_IDLE_MINUTES,
    SESSION_MAX_HOURS,
)
from healthhub.models import SessionIdentity


class SessionStore:
    """In-memory session records keyed by session id.

    The client only ever holds a signed token carrying the session id and an
    absolute expiry; the identity itself stays here.
    Structure: {sid: {"identity": SessionIdentity, "created_at": datetime, "last_activity": datetime}}
    """

    def __init__(self, secret_key: str = SECRET_KEY,
                 idle_minutes: int = SESSION_IDLE_MINUTES,
                 max_hours: int = SESSION_MAX_HOURS):
        self.secret_key = secret_key
        self.idle_timeout = timedelta(minutes=idle_minutes)
        self.max_age = timedelta(hours=max_hours)
        self._sessions: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._sessions)

    # ── Tokens ───────────────────────────────────────────────────────

    def _encode(self, sid: str, now: datetime) -> str:
        payload = {"sid": sid, "iat": now, "exp": now + self.max_age}
        return jwt.encode(payload, self.secret_key, algorithm="HS256")

    def _decode(self, token: str) -> Optional[str]:
        """Return the session id inside a token, or None if it is forged or expired."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=["HS256"])
        except jwt.ExpiredSignatureError:
            return None
        except jwt.InvalidTokenError:
            return None
        return payload.get("sid")

    # ── Lifecycle ────────────────────────────────────────────────────

    def create(self, identity: SessionIdentity) -> str:
        """Start a new session with a freshly generated id and return its token."""
        now = datetime.now(timezone.utc)
        sid = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[sid] = {
                "identity": identity,
                "created_at": now,
                "last_activity": now,
            }
        return self._encode(sid, now)

    def get(self, token: Optional[str]) -> Optional[SessionIdentity]:
        """Resolve a token to its identity, refreshing last activity.

        Sessions idle for longer than the idle timeout are dropped on access.
        """
        if not token:
            return None
        sid = self._decode(token)
        if not sid:
            return None
        now = datetime.now(timezone.utc)
        with self._lock:
            data = self._sessions.get(sid)
            if data is None:
                return None
            if now - data["last_activity"] > self.idle_timeout:
                del self._sessions[sid]
                return None
            data["last_activity"] = now
            return data["identity"]

    def destroy(self, token: Optional[str]) -> None:
        """Forget the session behind *token*; unknown or invalid tokens are ignored."""
        if not token:
            return
        sid = self._decode(token)
        if not sid:
            return
        with self._lock:
            self._sessions.pop(sid, None)

    def cleanup_expired(self) -> int:
        """Remove sessions that have been inactive beyond the idle timeout."""
        now = datetime.now(timezone.utc)
        with self._lock:
            expired = [
                sid for sid, data in self._sessions.items()
                if now - data["last_activity"] > self.idle_timeout
            ]
            for sid in expired:
                del self._sessions[sid]
        if expired:
            print(f"[cleanup] Removed {len(expired)} expired sessions")
        return len(expired)


def session_token_from_request() -> Optional[str]:
    """Session cookie first, then an ``Authorization: Bearer`` header."""
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if token:
        return token
    auth_header = request.headers.get("Authorization", "")
    parts = auth_header.split(" ")
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def login_required(store: SessionStore):
    """Decorator factory: 401 unless the request carries a live session.

    The handler receives the session's identity as the ``identity`` keyword.
    """
    def decorator(f):
        @wraps(f)
        def decorated(*args, **kwargs):
            identity = store.get(session_token_from_request())
            if identity is None:
                return jsonify({"success": False, "message": "Not logged in"}), 401
            kwargs["identity"] = identity
            return f(*args, **kwargs)
        return decorated
    return decorator


def role_required(expected_role: str):
    """Decorator factory: 403 unless the session's role is *expected_role*.

    Must sit below ``login_required`` so that ``identity`` is already set.
    """
    def decorator(f):
        @wraps(f)
        def decorated(*args, **kwargs):
            identity = kwargs.get("identity")
            if identity is None or identity.role != expected_role:
                return jsonify({"success": False, "message": "Not authorized for this page"}), 403
            return f(*args, **kwargs)
        return decorated
    return decorator
