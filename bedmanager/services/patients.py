"""
Admission handling and the patient store.
"""
import logging
from datetime import date, datetime
from typing import List, Optional, Tuple

from sqlalchemy import select, func, exists
from sqlalchemy.orm import Session

from bedmanager.core.exceptions import BadRequestError, ConflictError, NotFoundError
from bedmanager.core.identifiers import generate_patient_id, unique_id
from bedmanager.db.tables import (
    PatientRecord,
    ContactHistoryRecord,
    WaitlistRecord,
    DischargeRecord,
)
from bedmanager.models.hospital import BedStatus
from bedmanager.models.patient import (
    Acuity,
    AdmitRequest,
    AdmitResponse,
    PatientOut,
    PatientStatus,
)
from bedmanager.services import beds

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d-%m-%Y"

RISK_SCORES = {
    Acuity.CRITICAL.value: 0.85,
    Acuity.MODERATE.value: 0.65,
    Acuity.STABLE.value: 0.45,
}
DEFAULT_RISK_SCORE = 0.1

INFECTED = "infected"


def calculate_risk_score(medical_acuity: Optional[str]) -> float:
    """Risk score for an acuity; unknown or missing acuity scores 0.1."""
    return RISK_SCORES.get(medical_acuity, DEFAULT_RISK_SCORE)


def validate_admission_date(value: str, today: date = None) -> date:
    """
    Parse a `DD-MM-YYYY` admission date that must not be in the past.

    Raises:
        BadRequestError: Unparseable or past date
    """
    today = today or date.today()
    try:
        selected = datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        logger.warning(f"Unparseable admission date: {value!r}")
        raise BadRequestError("Invalid admission date")

    if selected < today:
        logger.warning(f"Admission date {value} is in the past")
        raise BadRequestError("Invalid admission date")
    return selected


def calculate_infection_rate(db: Session) -> float:
    """Percentage of stored patients whose infection status is `infected`."""
    total = db.scalar(select(func.count()).select_from(PatientRecord)) or 0
    if total == 0:
        return 0
    infected = db.scalar(
        select(func.count())
        .select_from(PatientRecord)
        .where(PatientRecord.infection_status == INFECTED)
    ) or 0
    return (infected / total) * 100


def patient_id_taken(db: Session, candidate: str) -> bool:
    # Discharged ids stay reserved so the double-discharge guard stays exact
    return bool(
        db.scalar(select(exists().where(PatientRecord.patient_id == candidate)))
        or db.scalar(select(exists().where(WaitlistRecord.patient_id == candidate)))
        or db.scalar(select(exists().where(DischargeRecord.patient_id == candidate)))
    )


def new_patient_id(db: Session) -> str:
    return unique_id(generate_patient_id, lambda candidate: patient_id_taken(db, candidate))


def record_contact(db: Session, contactno: Optional[str]) -> Tuple[bool, Optional[datetime]]:
    """
    Register an admission against a contact number.

    Returns:
        (readmitted, first_seen_at) for the contact number
    """
    if not contactno:
        return False, None

    now = datetime.now()
    history = db.get(ContactHistoryRecord, contactno)
    if history is not None:
        history.admissions += 1
        history.last_admitted_at = now
        return True, history.first_seen_at

    db.add(ContactHistoryRecord(
        contactno=contactno,
        first_seen_at=now,
        last_admitted_at=now,
        admissions=1,
    ))
    return False, now


def dump_embedded(request) -> dict:
    """JSON-ready tasks and address from a submission."""
    return {
        "tasks": [task.model_dump(by_alias=True) for task in request.tasks],
        "address": request.address.model_dump(by_alias=True) if request.address else None,
    }


def admit_patient(db: Session, request: AdmitRequest) -> AdmitResponse:
    """Admit a patient into an available bed."""
    validate_admission_date(request.admission_date)

    bed = beds.find_bed(db, request.ward_id, request.bed_number)
    if bed is None:
        logger.warning(f"Ward or bed does not exist: {request.ward_id}/{request.bed_number}")
        raise NotFoundError("Ward or bed does not exist")
    if bed.status == BedStatus.OCCUPIED.value:
        logger.warning(f"Bed {request.ward_id}/{request.bed_number} is already occupied")
        raise ConflictError("Selected bed is already occupied")

    patient_id = new_patient_id(db)
    readmitted, first_seen_at = record_contact(db, request.contactno)

    patient = PatientRecord(
        patient_id=patient_id,
        status=PatientStatus.ADMITTED.value,
        patient_name=request.patient_name,
        age=request.age,
        gender=request.gender,
        contactno=request.contactno,
        ward_id=request.ward_id,
        ward_name=request.ward_name or bed.ward.ward_name,
        bed_number=request.bed_number,
        medical_acuity=request.medical_acuity,
        risk_score=calculate_risk_score(request.medical_acuity),
        infection_status=request.infection_status,
        admitting_doctors=request.admitting_doctors,
        assigned_nurse=request.assigned_nurse,
        admission_date=request.admission_date,
        admission_time=request.admission_time,
        abha_no=request.abha_no,
        readmitted=readmitted,
        first_seen_at=first_seen_at,
        **dump_embedded(request),
    )
    db.add(patient)

    beds.claim_bed(db, bed, patient_id)
    db.commit()

    logger.info(f"Patient {patient_id} admitted to {request.ward_id}/{request.bed_number}")

    return AdmitResponse(
        patient=PatientOut.from_record(patient),
        infection_rate=calculate_infection_rate(db),
    )


def get_patient(db: Session, patient_id: str) -> Optional[PatientRecord]:
    return db.scalars(
        select(PatientRecord).where(PatientRecord.patient_id == patient_id)
    ).first()


def list_patients(db: Session) -> List[PatientOut]:
    """All patient records. Raises NotFoundError when there are none."""
    records = list(db.scalars(select(PatientRecord).order_by(PatientRecord.id)))
    if not records:
        raise NotFoundError("No patients found")
    return [PatientOut.from_record(record) for record in records]
