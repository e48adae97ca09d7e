"""
Append-only audit trail of successful API operations.
"""
import json
import logging
from pathlib import Path

from utils import now_local

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"


class AuditLog:
    def __init__(self, path: Path):
        self.path = Path(path)

    def record(self, event: str, payload) -> None:
        """Append one timestamped line. Write errors are logged, never raised."""
        entry = "[{}] {}: {}\n".format(
            now_local().strftime(TIMESTAMP_FORMAT),
            event,
            json.dumps(payload, default=str),
        )
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(entry)
        except OSError:
            logger.exception("Error writing to the audit log %s", self.path)
