"""
Tests for the bed registry endpoints.
"""
from types import SimpleNamespace

import pytest

from bedmanager.core.exceptions import ConflictError
from bedmanager.services.beds import claim_bed, find_bed, next_bed_index, release_bed
from bedmanager.tests.conftest import ICU, bed_state, set_bed_elsewhere


def test_add_beds_to_new_ward(client):
    """New wards get beds bed_1..bed_n, all available."""
    response = client.post("/adbeds1", json={**ICU, "bedNumber": 3})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Added 3 beds to the specified ward successfully"
    assert body["beds"] == ["bed_1", "bed_2", "bed_3"]

    wards = client.get("/bedGet").json()
    assert len(wards) == 1
    assert wards[0]["wardName"] == "ICU"
    assert [bed["bedNumber"] for bed in wards[0]["beds"]] == ["bed_1", "bed_2", "bed_3"]
    assert all(bed["status"] == "available" for bed in wards[0]["beds"])
    assert all(bed["patientId"] is None for bed in wards[0]["beds"])


def test_add_beds_continues_numbering(client):
    client.post("/adbeds1", json={**ICU, "bedNumber": 2})
    response = client.post("/adbeds1", json={**ICU, "bedNumber": 2})

    assert response.json()["beds"] == ["bed_3", "bed_4"]
    wards = client.get("/bedGet").json()
    assert len(wards) == 1
    assert len(wards[0]["beds"]) == 4


def test_same_ward_id_with_other_type_is_a_separate_ward(client):
    client.post("/adbeds1", json={**ICU, "bedNumber": 1})
    client.post("/adbeds1", json={**ICU, "wardType": "general", "bedNumber": 1})

    wards = client.get("/bedGet").json()
    assert len(wards) == 2
    assert all(ward["beds"][0]["bedNumber"] == "bed_1" for ward in wards)


def test_negative_bed_count_is_rejected(client):
    response = client.post("/adbeds1", json={**ICU, "bedNumber": -1})

    assert response.status_code == 400
    assert response.json() == {"title": "Bad Request", "message": "Invalid bed count found"}
    assert client.get("/bedGet").status_code == 404


def test_zero_beds_creates_empty_ward(client):
    response = client.post("/adbeds1", json={**ICU, "bedNumber": 0})

    assert response.status_code == 200
    wards = client.get("/bedGet").json()
    assert wards[0]["beds"] == []


def test_bed_get_empty_registry(client):
    response = client.get("/bedGet")

    assert response.status_code == 404
    assert response.json()["title"] == "Not Found"


def test_missing_fields_are_a_bad_request(client):
    response = client.post("/adbeds1", json={"wardName": "ICU"})

    assert response.status_code == 400
    assert response.json()["title"] == "Bad Request"


def test_next_bed_index_ignores_foreign_labels():
    beds = [SimpleNamespace(bed_number=label) for label in ("bed_2", "A12", "bed_7")]
    assert next_bed_index(beds) == 8
    assert next_bed_index([]) == 1


def test_claim_bed_taken_by_another_session(db, icu):
    bed = find_bed(db, "W1", "bed_1")
    set_bed_elsewhere(bed.id, "occupied", "PAT-4444")

    with pytest.raises(ConflictError):
        claim_bed(db, bed, "PAT-1111")

    assert bed_state("W1", "bed_1") == ("occupied", "PAT-4444")


def test_release_bed_freed_by_another_session(db, admitted):
    bed = find_bed(db, "W1", "bed_1")
    set_bed_elsewhere(bed.id, "available")

    with pytest.raises(ConflictError):
        release_bed(db, bed, admitted["patientId"])

    assert bed_state("W1", "bed_1") == ("available", None)


def test_release_bed_checks_occupant(db, admitted):
    bed = find_bed(db, "W1", "bed_1")

    with pytest.raises(ConflictError):
        release_bed(db, bed, "PAT-4444")

    assert bed_state("W1", "bed_1") == ("occupied", admitted["patientId"])
