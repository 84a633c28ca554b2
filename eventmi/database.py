import sqlite3
import threading
from datetime import datetime

from . import config


# =============================================================================
# SQLite3 datetime adapter (Python 3.12 compatibility)
# =============================================================================
def _adapt_datetime(dt: datetime) -> str:
    """Adapt datetime to ISO 8601 string for SQLite."""
    return dt.isoformat()


def _convert_datetime(val: bytes) -> datetime:
    """Convert ISO 8601 string from SQLite to datetime."""
    return datetime.fromisoformat(val.decode())


sqlite3.register_adapter(datetime, _adapt_datetime)
sqlite3.register_converter("TIMESTAMP", _convert_datetime)

# Thread-local storage for database connections
_local = threading.local()


def create_connection() -> sqlite3.Connection:
    """Open a new connection for request-scoped use.

    The caller owns the connection and must close it. FastAPI may create it
    in one worker thread and use it in another, hence check_same_thread=False.
    """
    conn = sqlite3.connect(
        config.DATABASE_PATH,
        detect_types=sqlite3.PARSE_DECLTYPES,
        check_same_thread=False
    )
    conn.row_factory = sqlite3.Row
    return conn


def get_db() -> sqlite3.Connection:
    """Get thread-local database connection"""
    if not hasattr(_local, 'connection') or _local.connection is None:
        _local.connection = sqlite3.connect(
            config.DATABASE_PATH,
            detect_types=sqlite3.PARSE_DECLTYPES
        )
        _local.connection.row_factory = sqlite3.Row
    return _local.connection


def close_db():
    """Close the thread-local connection, if any."""
    conn = getattr(_local, 'connection', None)
    if conn is not None:
        conn.close()
    _local.connection = None


def init_db():
    """Initialize database schema"""
    db = get_db()

    db.execute("""
        CREATE TABLE IF NOT EXISTS events (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            start_date TIMESTAMP NOT NULL,
            end_date TIMESTAMP NOT NULL,
            place TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    db.execute("""
        CREATE INDEX IF NOT EXISTS idx_events_name ON events(name)
    """)

    # Migration: add created_at to databases created before it existed
    columns = [row[1] for row in db.execute("PRAGMA table_info(events)").fetchall()]
    if "created_at" not in columns:
        db.execute("ALTER TABLE events ADD COLUMN created_at TIMESTAMP")

    db.commit()
