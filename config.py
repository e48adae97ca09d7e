"""
Runtime configuration read from the environment.
"""
import os
from pathlib import Path

CLASSES_FILE = Path(os.getenv("CLASSES_FILE", "classes.json"))
BOOKINGS_FILE = Path(os.getenv("BOOKINGS_FILE", "bookings.json"))
AUDIT_LOG_FILE = Path(os.getenv("AUDIT_LOG_FILE", "api_responses.log"))

# Timezone used for audit timestamps and seeded date ranges
TIMEZONE = os.getenv("TIMEZONE", "Asia/Kolkata")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8088"))
