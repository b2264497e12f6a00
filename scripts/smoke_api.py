"""
Bed manager API smoke run

Walks a live server through add beds → admit → transfer → discharge and
checks each response.
"""
import json
import sys
import time
from datetime import date, timedelta

import requests

BASE_URL = "http://localhost:4000"
WARD = {"wardName": "Smoke ICU", "wardId": f"SMOKE-{int(time.time())}", "wardType": "critical"}


def print_step(name: str):
    """Print step header."""
    print(f"\n{'='*70}")
    print(f"{name}")
    print(f"{'='*70}")


def check(response: requests.Response, expected: int) -> dict:
    print(f"Status: {response.status_code}")
    data = response.json()
    print(json.dumps(data, indent=2)[:600])
    assert response.status_code == expected, f"expected {expected}, got {response.status_code}"
    return data


def run_smoke():
    print_step("STEP 1: Health Check")
    check(requests.get(f"{BASE_URL}/"), 200)

    print_step("STEP 2: Add Beds")
    added = check(requests.post(f"{BASE_URL}/adbeds1", json={**WARD, "bedNumber": 2}), 200)
    first_bed, second_bed = added["beds"]

    print_step("STEP 3: Admit Patient")
    admitted = check(requests.post(f"{BASE_URL}/admitpt", json={
        "patientName": "Smoke Test",
        "age": 40,
        "gender": "F",
        "contactno": "0000000000",
        "wardId": WARD["wardId"],
        "wardName": WARD["wardName"],
        "bedNumber": first_bed,
        "medicalAcuity": "Stable",
        "admissionDate": (date.today() + timedelta(days=1)).strftime("%d-%m-%Y"),
        "infectionStatus": "clear",
    }), 201)
    patient_id = admitted["patient"]["patientId"]

    print_step("STEP 4: Transfer Patient")
    check(requests.post(f"{BASE_URL}/tpsss", json={
        "currentWardId": WARD["wardId"],
        "currentBedNumber": first_bed,
        "transferWardId": WARD["wardId"],
        "transferBedNumber": second_bed,
        "patientId": patient_id,
        "transferReasons": "smoke run",
    }), 200)

    print_step("STEP 5: Discharge Patient")
    check(requests.post(f"{BASE_URL}/distaa", json={
        "patientId": patient_id,
        "wardId": WARD["wardId"],
        "bedNumber": second_bed,
        "dischargeReasons": "recovered",
        "dischargeDate": date.today().strftime("%d-%m-%Y"),
    }), 200)

    print_step("STEP 6: Dashboards")
    for path in ("/realtimeavail", "/admdis", "/availbilityboard"):
        print(f"\nGET {path}")
        check(requests.get(f"{BASE_URL}{path}"), 200)


if __name__ == "__main__":
    print("\n🚀 Starting bed manager smoke run...")
    print(f"   Target: {BASE_URL}")

    try:
        run_smoke()
    except requests.exceptions.ConnectionError:
        print("\n❌ ERROR: Cannot connect to backend server")
        print(f"   Make sure server is running on {BASE_URL}")
        print(f"   Run: python -m bedmanager.run")
        sys.exit(1)
    except AssertionError as e:
        print(f"\n❌ Smoke run failed: {e}")
        sys.exit(1)

    print("\n✅ Smoke run passed!")
