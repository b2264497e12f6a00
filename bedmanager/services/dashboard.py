"""
Read-only dashboard aggregations over beds, patients and discharges.
"""
import logging
import random
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from bedmanager.core.exceptions import NotFoundError
from bedmanager.db.tables import DischargeRecord, PatientRecord
from bedmanager.models.hospital import BedStatus
from bedmanager.services.beds import get_all_wards

logger = logging.getLogger(__name__)

BOARD_TIME_FORMAT = "%H:%M %p"
BOARD_EARLIEST = time(8, 0)
BOARD_LATEST = time(23, 0)


def _count_status(ward, status: BedStatus) -> int:
    return sum(1 for bed in ward.beds if bed.status == status.value)


def ward_occupancy(db: Session) -> Dict[str, List[Dict[str, Any]]]:
    """Occupied-bed counts for wards that have any occupied bed."""
    occupancy = [
        {"ward": ward.ward_name, "occupancy": _count_status(ward, BedStatus.OCCUPIED)}
        for ward in get_all_wards(db)
        if _count_status(ward, BedStatus.OCCUPIED) > 0
    ]
    if not occupancy:
        logger.warning("No occupied beds found.")
        raise NotFoundError("No occupied beds found.")

    logger.info("Ward occupancy is displayed")
    return {"wardOccupancy": occupancy}


def realtime_availability(db: Session) -> Dict[str, List[Dict[str, Any]]]:
    """Available-bed counts for wards that have any available bed."""
    availability = [
        {"ward": ward.ward_name, "realtimebeds": _count_status(ward, BedStatus.AVAILABLE)}
        for ward in get_all_wards(db)
        if _count_status(ward, BedStatus.AVAILABLE) > 0
    ]
    if not availability:
        raise NotFoundError("No available beds found.")

    logger.info("Ward availability is displayed")
    return {"realtimeavailbility": availability}


def acuity_breakdown(db: Session) -> Dict[str, Dict[str, Dict[str, int]]]:
    """Patient counts grouped by ward name and medical acuity."""
    rows = db.execute(
        select(PatientRecord.ward_name, PatientRecord.medical_acuity, func.count())
        .group_by(PatientRecord.ward_name, PatientRecord.medical_acuity)
    ).all()
    if not rows:
        raise NotFoundError("No patient data found")

    breakdown: Dict[str, Dict[str, int]] = {}
    for ward_name, acuity, count in rows:
        breakdown.setdefault(ward_name, {})[acuity] = count

    logger.info("Successful retrieval of patient acuity breakdown")
    return {"patientAcuityBreakdown": breakdown}


def reformat_date(value: str) -> str:
    """Reverse the three `-`-separated parts of a date; anything else is unchanged."""
    parts = value.split("-")
    if len(parts) == 3:
        return f"{parts[2]}-{parts[1]}-{parts[0]}"
    return value


def admission_discharge_trend(db: Session) -> Dict[str, List[Dict[str, Any]]]:
    """Admission and discharge counts per date. Never raises on empty data."""
    trend: Dict[str, Dict[str, int]] = {}

    for admission_date in db.scalars(select(PatientRecord.admission_date)):
        if admission_date:
            bucket = trend.setdefault(reformat_date(admission_date), {"admissions": 0, "discharges": 0})
            bucket["admissions"] += 1

    for discharge_date in db.scalars(select(DischargeRecord.discharge_date)):
        if discharge_date:
            bucket = trend.setdefault(reformat_date(discharge_date), {"admissions": 0, "discharges": 0})
            bucket["discharges"] += 1

    return {
        "admissionsDischargesTrend": [
            {"date": day, "admissions": counts["admissions"], "discharges": counts["discharges"]}
            for day, counts in trend.items()
        ]
    }


def patient_care(db: Session) -> Dict[str, List[Dict[str, Any]]]:
    """Name, acuity, nurse and tasks for every patient."""
    records = list(db.scalars(select(PatientRecord).order_by(PatientRecord.id)))
    if not records:
        raise NotFoundError("No patients found")

    logger.info("Retrieved patient care dashboard data successfully")
    return {
        "patients": [
            {
                "name": record.patient_name,
                "medicalAcuity": record.medical_acuity,
                "assignedNurse": record.assigned_nurse,
                "tasks": record.tasks or [],
            }
            for record in records
        ]
    }


def random_board_time(rng: random.Random = None) -> datetime:
    """A random time today between 08:00 and 15:59."""
    rng = rng or random
    return datetime.combine(date.today(), time(rng.randint(8, 15), rng.randint(0, 59)))


def adjust_board_time(value: datetime, rng: random.Random = None) -> datetime:
    """Move a board time back up to 59 minutes, kept within 08:00-23:00."""
    rng = rng or random
    adjusted = value - timedelta(minutes=rng.randint(0, 59))
    earliest = datetime.combine(value.date(), BOARD_EARLIEST)
    latest = datetime.combine(value.date(), BOARD_LATEST)
    if adjusted < earliest:
        return earliest
    if adjusted > latest:
        return latest
    return adjusted


def bed_availability_board(db: Session, rng: random.Random = None) -> Dict[str, List[Dict[str, Any]]]:
    """
    Available beds per ward with a display time.

    The time is decoration for the board and carries no meaning.
    """
    wards = get_all_wards(db)
    if not wards:
        raise NotFoundError("No bed availability data found.")

    board = []
    for ward in wards:
        available = _count_status(ward, BedStatus.AVAILABLE)
        shown_at = random_board_time(rng)
        if available > 0:
            shown_at = adjust_board_time(shown_at, rng)
        board.append({
            "ward": ward.ward_name,
            "time": shown_at.strftime(BOARD_TIME_FORMAT),
            "availableBeds": available,
        })

    logger.info("Retrieved bed availability data successfully")
    return {"bedAvailability": board}
