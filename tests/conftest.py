import pytest
from fastapi.testclient import TestClient

import config
from admission import AdmissionController
from audit import AuditLog
from persistence import JsonSnapshotGateway


@pytest.fixture
def gateway(tmp_path):
    return JsonSnapshotGateway(tmp_path / "classes.json", tmp_path / "bookings.json")


@pytest.fixture
def audit(tmp_path):
    return AuditLog(tmp_path / "api_responses.log")


@pytest.fixture
def controller(gateway, audit):
    return AdmissionController.from_gateway(gateway, audit)


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "CLASSES_FILE", tmp_path / "classes.json")
    monkeypatch.setattr(config, "BOOKINGS_FILE", tmp_path / "bookings.json")
    monkeypatch.setattr(config, "AUDIT_LOG_FILE", tmp_path / "api_responses.log")

    from main import app
    with TestClient(app) as c:
        yield c
