"""
Tests for patient admission and the patient store.
"""
import re
from datetime import date, timedelta

import pytest

from bedmanager.core.exceptions import BadRequestError
from bedmanager.db import connection
from bedmanager.db.tables import ContactHistoryRecord, PatientRecord
from bedmanager.services import beds as bed_service
from bedmanager.services.patients import (
    calculate_infection_rate,
    calculate_risk_score,
    validate_admission_date,
)
from bedmanager.tests.conftest import admit_payload, bed_state, future_date, set_bed_elsewhere


def test_admit_into_available_bed(client, icu):
    """Admission occupies the bed and stores exactly one patient."""
    response = client.post("/admitpt", json=admit_payload(bedNumber="bed_2"))

    assert response.status_code == 201
    body = response.json()
    patient = body["patient"]
    assert re.match(r"^PAT-[ABCDEF1234]{4}$", patient["patientId"])
    assert patient["status"] == "admitted"
    assert patient["riskScore"] == 0.85
    assert patient["readmitted"] is False
    assert patient["tasks"] == [{"taskType": "vitals", "description": "Hourly vitals"}]
    assert patient["address"]["pincode"] == "411001"
    assert body["infectionRate"] == 0

    assert bed_state("W1", "bed_2") == ("occupied", patient["patientId"])
    assert len(client.get("/patientGet").json()) == 1


def test_admit_into_occupied_bed_is_a_conflict(client, admitted):
    response = client.post("/admitpt", json=admit_payload(patientName="Second Patient"))

    assert response.status_code == 409
    assert response.json() == {"title": "Conflict", "message": "Selected bed is already occupied"}
    assert bed_state("W1", "bed_1") == ("occupied", admitted["patientId"])
    patients = client.get("/patientGet").json()
    assert [p["patientId"] for p in patients] == [admitted["patientId"]]


def test_admit_into_unknown_bed(client, icu):
    response = client.post("/admitpt", json=admit_payload(bedNumber="bed_99"))

    assert response.status_code == 404
    assert response.json()["message"] == "Ward or bed does not exist"
    assert client.get("/patientGet").status_code == 404


@pytest.mark.parametrize("admission_date", ["01-01-2000", "2030-01-01", "31-02-2030", "soon"])
def test_admit_rejects_past_or_malformed_dates(client, icu, admission_date):
    response = client.post("/admitpt", json=admit_payload(admissionDate=admission_date))

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid admission date"
    assert bed_state("W1", "bed_1") == ("available", None)


def test_admit_today_is_allowed(client, icu):
    today = date.today().strftime("%d-%m-%Y")
    response = client.post("/admitpt", json=admit_payload(admissionDate=today))
    assert response.status_code == 201


def test_readmission_is_detected_by_contact_number(client, icu):
    first = client.post("/admitpt", json=admit_payload(bedNumber="bed_1")).json()["patient"]
    second = client.post("/admitpt", json=admit_payload(bedNumber="bed_2")).json()["patient"]
    other = client.post(
        "/admitpt", json=admit_payload(bedNumber="bed_3", contactno="9111111111")
    ).json()["patient"]

    assert first["readmitted"] is False
    assert second["readmitted"] is True
    assert second["firstSeenAt"] == first["firstSeenAt"]
    assert other["readmitted"] is False


def test_infection_rate_in_admission_response(client, icu):
    client.post("/admitpt", json=admit_payload(bedNumber="bed_1", infectionStatus="infected"))
    response = client.post("/admitpt", json=admit_payload(bedNumber="bed_2"))

    assert response.json()["infectionRate"] == 50.0


def test_infection_rate_without_patients(db):
    assert calculate_infection_rate(db) == 0


def test_infection_rate_ratio(db):
    for index, status in enumerate(["infected", "infected", "clear", "clear", "clear"]):
        db.add(PatientRecord(
            patient_id=f"PAT-{index:04d}",
            patient_name=f"Patient {index}",
            infection_status=status,
            risk_score=0.1,
        ))
    db.commit()

    assert calculate_infection_rate(db) == pytest.approx(40.0)


def test_risk_score_table():
    assert calculate_risk_score("Critical") == 0.85
    assert calculate_risk_score("Moderate") == 0.65
    assert calculate_risk_score("Stable") == 0.45
    assert calculate_risk_score("critical") == 0.1
    assert calculate_risk_score(None) == 0.1


def test_validate_admission_date():
    today = date(2030, 6, 15)
    assert validate_admission_date("15-06-2030", today=today) == today
    assert validate_admission_date("16-06-2030", today=today) == today + timedelta(days=1)
    with pytest.raises(BadRequestError):
        validate_admission_date("14-06-2030", today=today)


def test_patient_get_empty(client):
    response = client.get("/patientGet")
    assert response.status_code == 404


def test_admit_requires_core_fields(client, icu):
    payload = admit_payload()
    del payload["patientName"]
    response = client.post("/admitpt", json=payload)

    assert response.status_code == 400
    assert "patientName" in response.json()["message"]


def test_unknown_acuity_gets_default_risk(client, icu):
    response = client.post("/admitpt", json=admit_payload(medicalAcuity="Unknown", admissionDate=future_date(3)))
    assert response.json()["patient"]["riskScore"] == 0.1


def test_admission_losing_bed_race_writes_nothing(client, icu, monkeypatch):
    """The bed is taken between lookup and claim: 409 and no patient stored."""
    find_bed = bed_service.find_bed

    def find_then_lose(db, ward_id, bed_number, status=None):
        bed = find_bed(db, ward_id, bed_number, status)
        set_bed_elsewhere(bed.id, "occupied", "PAT-4444")
        return bed

    monkeypatch.setattr(bed_service, "find_bed", find_then_lose)

    response = client.post("/admitpt", json=admit_payload())

    assert response.status_code == 409
    assert response.json()["title"] == "Conflict"
    assert bed_state("W1", "bed_1") == ("occupied", "PAT-4444")
    with connection.get_db() as session:
        assert session.query(PatientRecord).count() == 0
        assert session.query(ContactHistoryRecord).count() == 0
