"""
Waitlist: patients waiting for a bed, their priority and bed assignment.
"""
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from bedmanager.core.exceptions import BadRequestError, NotFoundError
from bedmanager.db.tables import BedRecord, PatientRecord, WaitlistRecord, WardRecord
from bedmanager.models.base import MessageResponse
from bedmanager.models.hospital import BedStatus
from bedmanager.models.patient import PatientStatus
from bedmanager.models.waitlist import (
    BedAssignmentRequest,
    CreatedEntryResponse,
    PriorityUpdateRequest,
    WaitlistEntryOut,
    WaitlistFields,
    WaitlistRequest,
    WaitlistSummary,
    WaitlistSummaryFields,
)
from bedmanager.services import beds
from bedmanager.services.patients import (
    calculate_risk_score,
    dump_embedded,
    get_patient,
    new_patient_id,
    validate_admission_date,
)

logger = logging.getLogger(__name__)


def add_waiting_entry(db: Session, request: WaitlistRequest) -> CreatedEntryResponse:
    """Put a patient on the waitlist and create their waiting patient record."""
    validate_admission_date(request.admission_date)

    patient_id = new_patient_id(db)
    embedded = dump_embedded(request)

    entry = WaitlistRecord(
        patient_id=patient_id,
        patient_name=request.patient_name,
        contactno=request.contactno,
        age=request.age,
        gender=request.gender,
        medical_acuity=request.medical_acuity,
        admitting_doctors=request.admitting_doctors,
        assigned_nurse=request.assigned_nurse,
        ward_id=request.ward_id,
        ward_name=request.ward_name,
        bed_number=request.bed_number,
        priority=request.priority,
        admission_date=request.admission_date,
        admission_time=request.admission_time,
        abha_no=request.abha_no,
        **embedded,
    )
    db.add(entry)

    db.add(PatientRecord(
        patient_id=patient_id,
        status=PatientStatus.WAITING.value,
        patient_name=request.patient_name,
        age=request.age,
        gender=request.gender,
        contactno=request.contactno,
        ward_id=request.ward_id,
        ward_name=request.ward_name,
        bed_number=request.bed_number,
        medical_acuity=request.medical_acuity,
        risk_score=calculate_risk_score(request.medical_acuity),
        admitting_doctors=request.admitting_doctors,
        assigned_nurse=request.assigned_nurse,
        admission_date=request.admission_date,
        admission_time=request.admission_time,
        abha_no=request.abha_no,
        priority=request.priority,
        **embedded,
    ))
    db.commit()

    logger.info(f"New entry created in waiting list: {patient_id}")

    return CreatedEntryResponse(
        created_entry=WaitlistEntryOut(
            entry_id=entry.id,
            entry_fields=[WaitlistFields.from_record(entry)],
        )
    )


def update_priority(db: Session, request: PriorityUpdateRequest) -> MessageResponse:
    entry = db.scalars(
        select(WaitlistRecord).where(WaitlistRecord.patient_id == request.patient_id)
    ).first()
    if entry is None:
        logger.warning(f"Priority update for unknown waitlist patient {request.patient_id}")
        raise BadRequestError("Patient not found in the waiting list.")

    entry.priority = request.priority
    patient = get_patient(db, request.patient_id)
    if patient is not None:
        patient.priority = request.priority
    db.commit()

    logger.info(f"Priority for {request.patient_id} set to {request.priority}")
    return MessageResponse(message="Priority assigned successfully.")


def assign_bed(db: Session, request: BedAssignmentRequest) -> MessageResponse:
    """
    Put a waiting patient into a bed.

    A label that matches no bed anywhere gets a new ward holding just that
    bed. Otherwise the first available bed with the label is claimed.
    """
    patient = get_patient(db, request.patient_id)
    if patient is None:
        logger.warning(f"Bed assignment for unknown patient {request.patient_id}")
        raise NotFoundError("Patient not found")
    if patient.status != PatientStatus.WAITING.value:
        logger.warning(f"Bed assignment for {request.patient_id}, who is already admitted")
        raise BadRequestError("Patient is already admitted.")

    matches = beds.find_beds_by_label(db, request.bed_number, request.ward_id)

    if not matches:
        ward = None
        if request.ward_id is not None:
            ward = db.scalars(
                select(WardRecord).where(WardRecord.ward_id == request.ward_id).order_by(WardRecord.id)
            ).first()
        if ward is None:
            ward = WardRecord(ward_id=request.ward_id)
            db.add(ward)
        ward.beds.append(BedRecord(
            bed_number=request.bed_number,
            position=len(ward.beds),
            status=BedStatus.OCCUPIED.value,
            patient_id=request.patient_id,
        ))
        logger.info(f"Created ad hoc bed {request.bed_number} for {request.patient_id}")
    else:
        bed = next((b for b in matches if b.status == BedStatus.AVAILABLE.value), None)
        if bed is None:
            logger.warning(f"No available bed labelled {request.bed_number}")
            raise BadRequestError("Bed is already occupied.")
        beds.claim_bed(db, bed, request.patient_id)
        ward = bed.ward

    patient.bed_number = request.bed_number
    patient.ward_id = ward.ward_id
    patient.ward_name = ward.ward_name
    patient.status = PatientStatus.ADMITTED.value
    db.commit()

    logger.info(f"Bed {request.bed_number} assigned to {request.patient_id}")
    return MessageResponse(message="Bed assignment updated successfully.")


def list_waitlist(db: Session) -> List[WaitlistSummary]:
    entries = list(db.scalars(select(WaitlistRecord).order_by(WaitlistRecord.id)))
    if not entries:
        raise NotFoundError("No waitlist entries found")
    return [
        WaitlistSummary(entry_fields=[
            WaitlistSummaryFields(
                patient_name=entry.patient_name,
                patient_id=entry.patient_id,
                age=entry.age,
                gender=entry.gender,
                priority=entry.priority,
                admitting_doctors=entry.admitting_doctors,
                admission_date=entry.admission_date,
            )
        ])
        for entry in entries
    ]
