"""Application configuration and constants."""
import os
from pathlib import Path

# Directory paths
BASE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = BASE_DIR / "eventmi" / "templates"
STATIC_DIR = BASE_DIR / "eventmi" / "static"

# SQLite database file
DATABASE_PATH = Path(os.environ.get("EVENTMI_DATABASE_PATH", str(BASE_DIR / "eventmi.db")))

# Base URL configuration (for running under a subpath like /eventmi)
# Set via environment variable EVENTMI_BASE_URL, e.g., "eventmi" or "/eventmi"
BASE_URL = os.environ.get("EVENTMI_BASE_URL", "").strip("/")
ROOT_PATH = f"/{BASE_URL}" if BASE_URL else ""

# Logging
LOG_LEVEL = os.environ.get("EVENTMI_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Server bind address (manage_events.py serve)
HOST = os.environ.get("EVENTMI_HOST", "127.0.0.1")
PORT = int(os.environ.get("EVENTMI_PORT", "8000"))

# Dates travel over the wire as MM/dd/yyyy hh:mm tt
FORM_DATETIME_FORMAT = "%m/%d/%Y %I:%M %p"
# Also accepted on input: HTML datetime-local
ACCEPTED_DATETIME_FORMATS = (FORM_DATETIME_FORMAT, "%Y-%m-%dT%H:%M")

# Largest id SQLite can store; larger path ids cannot name an event
MAX_EVENT_ID = 2**63 - 1

# Event field limits
NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50
PLACE_MIN_LENGTH = 3
PLACE_MAX_LENGTH = 150
