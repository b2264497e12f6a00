"""
Shared fixtures: a fresh in-memory database and an API client per test.
"""
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select, update

from bedmanager.api.main import app
from bedmanager.db import connection
from bedmanager.db.tables import BedRecord, WardRecord

ICU = {"wardName": "ICU", "wardId": "W1", "wardType": "critical"}


def future_date(days: int = 1) -> str:
    return (date.today() + timedelta(days=days)).strftime("%d-%m-%Y")


def admit_payload(**overrides) -> dict:
    payload = {
        "patientName": "Asha Rao",
        "age": 54,
        "gender": "F",
        "contactno": "9000000001",
        "wardId": "W1",
        "wardName": "ICU",
        "bedNumber": "bed_1",
        "medicalAcuity": "Critical",
        "admittingDoctors": "Dr. Menon",
        "admissionDate": future_date(),
        "admissionTime": "10:30",
        "assignedNurse": "Nurse Iyer",
        "tasks": [{"taskType": "vitals", "description": "Hourly vitals"}],
        "address": {"doorno": "12", "streetname": "MG Road", "district": "Pune",
                    "state": "MH", "country": "India", "pincode": "411001"},
        "abhaNo": "ABHA-001",
        "infectionStatus": "clear",
    }
    payload.update(overrides)
    return payload


def bed_state(ward_id: str, bed_number: str):
    """(status, patient_id) of a bed, read in its own session."""
    with connection.get_db() as session:
        bed = session.scalars(
            select(BedRecord)
            .join(WardRecord)
            .where(WardRecord.ward_id == ward_id, BedRecord.bed_number == bed_number)
        ).first()
        return (bed.status, bed.patient_id) if bed else None


def set_bed_elsewhere(bed_id: int, status: str, patient_id=None):
    """Change a bed from another session, as a concurrent request would."""
    with connection.get_db() as session:
        session.execute(
            update(BedRecord)
            .where(BedRecord.id == bed_id)
            .values(status=status, patient_id=patient_id)
        )
        session.commit()


@pytest.fixture
def db_engine():
    engine = connection.init_db("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def client(db_engine):
    return TestClient(app)


@pytest.fixture
def db(db_engine):
    session = connection.get_db()
    yield session
    session.close()


@pytest.fixture
def icu(client):
    """ICU ward W1 with three available beds."""
    response = client.post("/adbeds1", json={**ICU, "bedNumber": 3})
    assert response.status_code == 200
    return ICU


@pytest.fixture
def admitted(client, icu):
    """A patient admitted into W1/bed_1."""
    response = client.post("/admitpt", json=admit_payload())
    assert response.status_code == 201
    return response.json()["patient"]
