"""
Admission control for class registration and bookings.

One lock guards the catalog and the ledger together. It is held from the
class lookup through the capacity count, the append and the snapshot write,
so two bookings for the same class and date can never both see the last free
slot. Registration takes the same lock, which keeps a same-named class from
appearing between a booking's lookup and its commit.
"""
import logging
import threading
from typing import Optional

from audit import AuditLog
from errors import (
    CapacityExceeded,
    ClassUnavailable,
    InvalidFields,
    InvalidRange,
    PersistenceFailure,
)
from models import BookingRecord, BookingResult, BookRequest, ClassCreate, ClassDefinition
from persistence import JsonSnapshotGateway
from storage import BookingLedger, CatalogStore
from utils import format_date, is_before, parse_date

logger = logging.getLogger(__name__)


class AdmissionController:
    def __init__(
        self,
        catalog: CatalogStore,
        ledger: BookingLedger,
        gateway: JsonSnapshotGateway,
        audit: Optional[AuditLog] = None,
    ):
        self.catalog = catalog
        self.ledger = ledger
        self.gateway = gateway
        self.audit = audit
        self._lock = threading.Lock()

    @classmethod
    def from_gateway(cls, gateway: JsonSnapshotGateway, audit: Optional[AuditLog] = None):
        """Seed both stores from the persisted snapshots."""
        catalog = CatalogStore(gateway.load_classes())
        ledger = BookingLedger(gateway.load_bookings())
        logger.info("Loaded %d classes and %d bookings", len(catalog), len(ledger))
        return cls(catalog, ledger, gateway, audit)

    def _record(self, event: str, payload) -> None:
        if self.audit is not None:
            self.audit.record(event, payload)

    # ---------- Classes ----------
    def register_class(self, req: ClassCreate) -> ClassDefinition:
        if not req.name or not req.start_date or not req.end_date or req.capacity <= 0:
            raise InvalidFields("Invalid data format")

        start = parse_date(req.start_date, "startDate")
        end = parse_date(req.end_date, "endDate")
        if is_before(end, start):
            raise InvalidRange()

        definition = ClassDefinition(
            name=req.name,
            start_date=format_date(start),
            end_date=format_date(end),
            capacity=req.capacity,
        )
        with self._lock:
            stored = self.catalog.add(definition)
            try:
                self.gateway.save_classes(self.catalog.snapshot())
            except OSError as exc:
                # the class stays registered in memory; the next save rewrites it
                logger.exception("Failed to save class %s", stored.id)
                raise PersistenceFailure("Failed to save class data") from exc

        logger.info("Registered class %s (%s)", stored.id, stored.name)
        self._record("Class created successfully", stored.model_dump(by_alias=True))
        return stored

    # ---------- Bookings ----------
    def create_booking(self, req: BookRequest) -> BookingResult:
        if not req.member_name or not req.date or not req.class_name:
            raise InvalidFields("Invalid field format")

        on = parse_date(req.date)
        # count and store the canonical spelling of the day
        day = format_date(on)

        with self._lock:
            cls = self.catalog.find_active_on(req.class_name, on)
            if cls is None:
                logger.info("No %r class on %s", req.class_name, day)
                raise ClassUnavailable()

            available = cls.capacity - self.ledger.count_for(req.class_name, day)
            if available <= 0:
                logger.info("%r is full on %s", req.class_name, day)
                raise CapacityExceeded()

            stored = self.ledger.add(
                BookingRecord(
                    member_name=req.member_name,
                    date=day,
                    class_name=req.class_name,
                )
            )
            try:
                self.gateway.save_bookings(self.ledger.snapshot())
            except OSError as exc:
                logger.exception("Failed to save booking %s", stored.id)
                raise PersistenceFailure("Failed to save booking data") from exc

        result = BookingResult(booking=stored, available_slots=available - 1)
        logger.info("Booked %s into %r on %s", stored.member_name, stored.class_name, stored.date)
        self._record("Booking successful", result.model_dump(by_alias=True))
        return result
