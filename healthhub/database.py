"""
Database engine initialisation and small query helpers.
"""

import sys
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine, text

from healthhub.config import get_env


def init_engine():
    """Create a SQLAlchemy engine and verify the connection."""
    db_uri = get_env("DB_URI")
    engine = create_engine(db_uri, echo=False, future=True, pool_pre_ping=True)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        print("ERROR: could not connect to DB:", e, file=sys.stderr)
        sys.exit(1)
    print("[init] Connected to DB.")
    return engine


def to_json_value(value: Any) -> Any:
    """Render date/time column values as ISO strings; pass everything else through."""
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        # MySQL drivers hand TIME columns back as timedelta
        seconds = int(value.total_seconds())
        hours, rest = divmod(seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return value


def _row_to_dict(row) -> Dict[str, Any]:
    return {key: to_json_value(value) for key, value in row.items()}


def fetch_all(engine, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """Run a parameterized SELECT on its own connection and return every row."""
    with engine.connect() as conn:
        rows = conn.execute(text(sql), params or {}).mappings().all()
    return [_row_to_dict(r) for r in rows]


def fetch_one(engine, sql: str, params: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
    """Like fetch_all, but return only the first row (or None)."""
    with engine.connect() as conn:
        row = conn.execute(text(sql), params or {}).mappings().first()
    return _row_to_dict(row) if row is not None else None
