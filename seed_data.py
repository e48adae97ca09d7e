"""
Seed demo classes (Pilates, Yoga, Zumba) running for the next 30 days.
- Default: Adds missing classes only.
- --force: Clears classes.json and bookings.json, then seeds every class.
Classes are registered through the admission controller so ids and
snapshots stay consistent with the API.
"""

import logging
import sys
from datetime import timedelta

import config
from admission import AdmissionController
from audit import AuditLog
from models import ClassCreate
from persistence import JsonSnapshotGateway
from utils import format_date, now_local

logger = logging.getLogger(__name__)

SEED_DAYS = 30
DEMO_CLASSES = [
    ("Pilates", 10),
    ("Yoga", 15),
    ("Zumba", 20),
]


def seed_classes(gateway: JsonSnapshotGateway, force=False, audit=None):
    """Register the demo classes, returning the ones added."""
    if force:
        gateway.reset()

    controller = AdmissionController.from_gateway(gateway, audit)
    existing_names = controller.catalog.names()

    today = now_local().date()
    start = format_date(today)
    end = format_date(today + timedelta(days=SEED_DAYS - 1))

    seeded = []
    for name, capacity in DEMO_CLASSES:
        if name in existing_names:
            continue
        stored = controller.register_class(
            ClassCreate(name=name, start_date=start, end_date=end, capacity=capacity)
        )
        seeded.append(stored)
        print(f"Seeded: {name} from {start} to {end}, {capacity} slots a day")
    return seeded


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    force_flag = "--force" in sys.argv
    seed_classes(
        JsonSnapshotGateway(config.CLASSES_FILE, config.BOOKINGS_FILE),
        force=force_flag,
        audit=AuditLog(config.AUDIT_LOG_FILE),
    )
