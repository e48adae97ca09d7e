"""
Whole-file JSON snapshots of the class catalog and the booking ledger.
"""
import json
import logging
from pathlib import Path
from typing import List, Sequence

from pydantic import ValidationError

from models import BookingRecord, ClassDefinition

logger = logging.getLogger(__name__)


class JsonSnapshotGateway:
    def __init__(self, classes_file: Path, bookings_file: Path):
        self.classes_file = Path(classes_file)
        self.bookings_file = Path(bookings_file)

    # ---------- Load ----------
    def _load(self, path: Path, model) -> list:
        """Read a snapshot; a missing or empty file is an empty collection."""
        if not path.exists():
            return []
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
        if not raw.strip():
            return []
        try:
            return [model.model_validate(item) for item in json.loads(raw)]
        except (ValueError, TypeError, ValidationError):
            # keep the unreadable snapshot so the next save cannot overwrite it
            backup = path.with_name(path.name + ".corrupt")
            path.replace(backup)
            logger.error(
                "Could not decode %s, moved it to %s and starting with no entries",
                path, backup, exc_info=True,
            )
            return []

    def load_classes(self) -> List[ClassDefinition]:
        return self._load(self.classes_file, ClassDefinition)

    def load_bookings(self) -> List[BookingRecord]:
        return self._load(self.bookings_file, BookingRecord)

    # ---------- Save ----------
    def _save(self, path: Path, items: Sequence) -> None:
        data = [item.model_dump(by_alias=True) for item in items]
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)

    def save_classes(self, classes: Sequence[ClassDefinition]) -> None:
        self._save(self.classes_file, classes)

    def save_bookings(self, bookings: Sequence[BookingRecord]) -> None:
        self._save(self.bookings_file, bookings)

    def reset(self) -> None:
        """Empty both snapshots."""
        self.save_classes([])
        self.save_bookings([])
        logger.info("Cleared %s and %s", self.classes_file, self.bookings_file)
