"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORE_KEY = "academia-system-db"
DEFAULT_LATENCY_SECONDS = 0.0

MIN_MARKS = 0
MAX_MARKS = 100

ID_PREFIXES = {
    "ADMIN": "a",
    "TEACHER": "t",
    "STUDENT": "s",
}
