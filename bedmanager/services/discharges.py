"""
Discharging a patient and the discharge log.
"""
import logging
from typing import List

from sqlalchemy import select, exists, func
from sqlalchemy.orm import Session

from bedmanager.core.exceptions import BadRequestError, NotFoundError
from bedmanager.core.identifiers import generate_discharge_id, unique_id
from bedmanager.db.tables import DischargeRecord, WardRecord
from bedmanager.models.hospital import BedStatus
from bedmanager.models.records import DischargeOut, DischargeRequest, DischargeResponse
from bedmanager.services import beds
from bedmanager.services.patients import get_patient

logger = logging.getLogger(__name__)

DIED = "died"


def discharge_id_taken(db: Session, candidate: str) -> bool:
    return bool(db.scalar(select(exists().where(DischargeRecord.discharge_id == candidate))))


def calculate_mortality_rate(db: Session) -> float:
    """Recorded deaths as a percentage of all beds across every ward."""
    total_beds = beds.total_bed_count(db)
    if total_beds == 0:
        return 0
    died = db.scalar(
        select(func.count())
        .select_from(DischargeRecord)
        .where(DischargeRecord.discharge_reasons == DIED)
    ) or 0
    return (died / total_beds) * 100


def discharge_patient(db: Session, request: DischargeRequest) -> DischargeResponse:
    """Free the patient's bed, drop the patient record and log the discharge."""
    ward = db.scalars(
        select(WardRecord).where(WardRecord.ward_id == request.ward_id).order_by(WardRecord.id)
    ).first()
    if ward is None:
        logger.warning(f"Ward not found: {request.ward_id}")
        raise NotFoundError("Ward not found.")

    bed = next((b for b in ward.beds if b.bed_number == request.bed_number), None)
    if (
        bed is None
        or bed.status != BedStatus.OCCUPIED.value
        or bed.patient_id != request.patient_id
    ):
        logger.warning(f"Patient {request.patient_id} is not occupying {request.bed_number}")
        raise BadRequestError("Patient is not occupying the bed or already discharged.")

    if db.scalar(select(exists().where(DischargeRecord.patient_id == request.patient_id))):
        logger.warning(f"Patient {request.patient_id} is already discharged")
        raise BadRequestError("Patient is already discharged.")

    beds.release_bed(db, bed, request.patient_id)

    patient = get_patient(db, request.patient_id)
    contactno = None
    if patient is not None:
        contactno = patient.contactno
        db.delete(patient)

    mortality_rate = calculate_mortality_rate(db)
    logger.info(f"Calculated mortality rate: {mortality_rate}")

    discharge_id = unique_id(
        generate_discharge_id,
        lambda candidate: discharge_id_taken(db, candidate)
    )
    db.add(DischargeRecord(
        discharge_id=discharge_id,
        patient_id=request.patient_id,
        patient_name=request.patient_name,
        age=request.age,
        gender=request.gender,
        contactno=contactno,
        medical_acuity=request.medical_acuity,
        admission_date=request.admission_date,
        ward_id=request.ward_id,
        bed_number=request.bed_number,
        discharge_reasons=request.discharge_reasons,
        discharge_date=request.discharge_date,
        discharge_time=request.discharge_time,
        mortality_rate=mortality_rate,
    ))
    db.commit()

    logger.info(f"Patient {request.patient_id} discharged ({discharge_id})")

    return DischargeResponse(
        message="Patient discharged and bed record updated successfully.",
        mortality_rate=mortality_rate,
        discharge_id=discharge_id,
    )


def list_discharges(db: Session) -> List[DischargeOut]:
    records = list(db.scalars(select(DischargeRecord).order_by(DischargeRecord.id)))
    if not records:
        raise NotFoundError("No discharges found")
    return [DischargeOut.from_record(record) for record in records]
