"""
In-memory collections backing the admission controller.

Neither store locks on its own; AdmissionController holds a single guard
over both of them.
"""
import logging
from datetime import date
from typing import Iterable, List, Optional

from errors import InvalidDateFormat
from models import BookingRecord, ClassDefinition
from utils import is_after, is_before, parse_date

logger = logging.getLogger(__name__)


def _next_id(items) -> int:
    return max((item.id for item in items), default=0) + 1


class CatalogStore:
    """Registered classes in insertion order."""

    def __init__(self, classes: Iterable[ClassDefinition] = ()):
        self._classes: List[ClassDefinition] = list(classes)
        self._next_id = _next_id(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def add(self, definition: ClassDefinition) -> ClassDefinition:
        stored = definition.model_copy(update={"id": self._next_id})
        self._next_id += 1
        self._classes.append(stored)
        return stored

    def find_active_on(self, name: str, on: date) -> Optional[ClassDefinition]:
        """Return the first class named `name` whose inclusive range contains `on`."""
        for cls in self._classes:
            if cls.name != name:
                continue
            try:
                start = parse_date(cls.start_date, "startDate")
                end = parse_date(cls.end_date, "endDate")
            except InvalidDateFormat:
                logger.warning("Skipping class %s with unreadable date range", cls.id)
                continue
            if not is_before(on, start) and not is_after(on, end):
                return cls
        return None

    def names(self) -> set:
        return {cls.name for cls in self._classes}

    def snapshot(self) -> List[ClassDefinition]:
        return list(self._classes)


class BookingLedger:
    """Admitted bookings in insertion order."""

    def __init__(self, bookings: Iterable[BookingRecord] = ()):
        self._bookings: List[BookingRecord] = list(bookings)
        self._next_id = _next_id(self._bookings)

    def __len__(self) -> int:
        return len(self._bookings)

    def add(self, record: BookingRecord) -> BookingRecord:
        stored = record.model_copy(update={"id": self._next_id})
        self._next_id += 1
        self._bookings.append(stored)
        return stored

    def count_for(self, class_name: str, date_text: str) -> int:
        # dates are always produced by parse_date's layout, so text equality is enough
        return sum(
            1 for b in self._bookings
            if b.class_name == class_name and b.date == date_text
        )

    def snapshot(self) -> List[BookingRecord]:
        return list(self._bookings)
