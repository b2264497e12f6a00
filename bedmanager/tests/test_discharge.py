"""
Tests for discharging patients and the discharge log.
"""
import re

import pytest

from bedmanager.tests.conftest import ICU, admit_payload, bed_state, future_date


def discharge_payload(patient_id: str, **overrides) -> dict:
    payload = {
        "patientId": patient_id,
        "patientName": "Asha Rao",
        "medicalAcuity": "Critical",
        "age": 54,
        "gender": "F",
        "admissionDate": future_date(),
        "wardId": "W1",
        "bedNumber": "bed_1",
        "dischargeReasons": "recovered",
        "dischargeDate": future_date(5),
        "dischargeTime": "11:00",
    }
    payload.update(overrides)
    return payload


def test_discharge_frees_bed_and_logs_record(client, admitted):
    response = client.post("/distaa", json=discharge_payload(admitted["patientId"]))

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Patient discharged and bed record updated successfully."
    assert re.match(r"^Dsh-[A-Za-z0-9]{4}$", body["dischargeId"])
    assert body["mortalityRate"] == 0

    assert bed_state("W1", "bed_1") == ("available", None)
    assert client.get("/patientGet").status_code == 404

    discharges = client.get("/dischargeGet").json()
    assert len(discharges) == 1
    assert discharges[0]["patientId"] == admitted["patientId"]
    assert discharges[0]["dischargeReasons"] == "recovered"


def test_double_discharge_is_rejected(client, admitted):
    first = client.post("/distaa", json=discharge_payload(admitted["patientId"]))
    second = client.post("/distaa", json=discharge_payload(admitted["patientId"]))

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["title"] == "Bad Request"
    assert len(client.get("/dischargeGet").json()) == 1


def test_discharge_wrong_patient(client, admitted):
    response = client.post("/distaa", json=discharge_payload("PAT-FFFF"))

    assert response.status_code == 400
    assert response.json()["message"] == "Patient is not occupying the bed or already discharged."
    assert bed_state("W1", "bed_1") == ("occupied", admitted["patientId"])
    assert len(client.get("/patientGet").json()) == 1


def test_discharge_unknown_ward(client, admitted):
    response = client.post("/distaa", json=discharge_payload(admitted["patientId"], wardId="W9"))

    assert response.status_code == 404
    assert response.json() == {"title": "Not Found", "message": "Ward not found."}


def test_discharge_get_empty(client):
    assert client.get("/dischargeGet").status_code == 404


def test_mortality_rate_counts_prior_deaths_over_all_beds(client, icu):
    """Deaths already logged divided by every bed in every ward."""
    client.post("/adbeds1", json={
        "wardName": "General", "wardId": "W2", "wardType": "general", "bedNumber": 1
    })
    first = client.post("/admitpt", json=admit_payload(bedNumber="bed_1")).json()["patient"]
    second = client.post("/admitpt", json=admit_payload(bedNumber="bed_2")).json()["patient"]

    died = client.post(
        "/distaa", json=discharge_payload(first["patientId"], dischargeReasons="died")
    ).json()
    recovered = client.post(
        "/distaa", json=discharge_payload(second["patientId"], bedNumber="bed_2")
    ).json()

    assert died["mortalityRate"] == 0
    assert recovered["mortalityRate"] == pytest.approx(25.0)


def test_admit_discharge_scenario(client):
    """Three-bed ward, admit into bed_2, discharge, check every listing."""
    client.post("/adbeds1", json={**ICU, "bedNumber": 3})
    beds = client.get("/bedGet").json()[0]["beds"]
    assert [(b["bedNumber"], b["status"]) for b in beds] == [
        ("bed_1", "available"), ("bed_2", "available"), ("bed_3", "available")
    ]

    patient = client.post("/admitpt", json=admit_payload(bedNumber="bed_2")).json()["patient"]
    assert bed_state("W1", "bed_2") == ("occupied", patient["patientId"])
    assert len(client.get("/patientGet").json()) == 1

    response = client.post(
        "/distaa", json=discharge_payload(patient["patientId"], bedNumber="bed_2")
    )
    assert response.status_code == 200
    assert bed_state("W1", "bed_2") == ("available", None)
    assert client.get("/patientGet").status_code == 404
    assert len(client.get("/dischargeGet").json()) == 1
