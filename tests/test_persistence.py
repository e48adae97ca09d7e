import json

from models import BookingRecord, ClassDefinition


def test_missing_files_load_empty(gateway):
    assert gateway.load_classes() == []
    assert gateway.load_bookings() == []


def test_empty_file_loads_empty(gateway):
    gateway.classes_file.write_text("", encoding="utf-8")
    assert gateway.load_classes() == []


def test_undecodable_file_loads_empty(gateway):
    gateway.bookings_file.write_text("{not json", encoding="utf-8")
    assert gateway.load_bookings() == []


def test_undecodable_file_is_kept_aside(gateway):
    gateway.bookings_file.write_text("{not json", encoding="utf-8")
    gateway.load_bookings()
    gateway.save_bookings([])

    backup = gateway.bookings_file.with_name("bookings.json.corrupt")
    assert backup.read_text(encoding="utf-8") == "{not json"
    assert gateway.bookings_file.read_text(encoding="utf-8") == "[]"


def test_save_writes_whole_snapshot(gateway):
    classes = [
        ClassDefinition(id=1, name="Pilates", start_date="01-12-2024", end_date="20-12-2024", capacity=10),
        ClassDefinition(id=2, name="Yoga", start_date="01-12-2024", end_date="05-12-2024", capacity=5),
    ]
    gateway.save_classes(classes)
    gateway.save_classes(classes[:1])

    data = json.loads(gateway.classes_file.read_text(encoding="utf-8"))
    assert data == [{
        "id": 1,
        "name": "Pilates",
        "startDate": "01-12-2024",
        "endDate": "20-12-2024",
        "capacity": 10,
    }]
    assert gateway.load_classes() == classes[:1]


def test_bookings_use_wire_names(gateway):
    gateway.save_bookings([
        BookingRecord(id=1, member_name="Rahul R P", date="16-12-2024", class_name="Pilates"),
    ])
    data = json.loads(gateway.bookings_file.read_text(encoding="utf-8"))
    assert data == [{"id": 1, "memberName": "Rahul R P", "date": "16-12-2024", "className": "Pilates"}]


def test_loads_class_name_key_from_older_snapshots(gateway):
    gateway.classes_file.write_text(json.dumps([{
        "id": 4,
        "className": "Pilates",
        "startDate": "01-12-2024",
        "endDate": "20-12-2024",
        "capacity": 10,
    }]), encoding="utf-8")

    [cls] = gateway.load_classes()
    assert cls.id == 4
    assert cls.name == "Pilates"


def test_reset_clears_both(gateway):
    gateway.save_bookings([
        BookingRecord(id=1, member_name="Rahul R P", date="16-12-2024", class_name="Pilates"),
    ])
    gateway.reset()
    assert gateway.load_classes() == []
    assert gateway.load_bookings() == []
