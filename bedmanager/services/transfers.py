"""
Moving a patient from one bed to another.
"""
import logging
from typing import List

from sqlalchemy import select, exists
from sqlalchemy.orm import Session

from bedmanager.core.exceptions import BadRequestError, NotFoundError
from bedmanager.core.identifiers import generate_transfer_id, unique_id
from bedmanager.db.tables import TransferRecord
from bedmanager.models.hospital import BedStatus
from bedmanager.models.records import TransferOut, TransferRequest, TransferResponse
from bedmanager.services import beds
from bedmanager.services.patients import get_patient

logger = logging.getLogger(__name__)


def transfer_id_taken(db: Session, candidate: str) -> bool:
    return bool(db.scalar(select(exists().where(TransferRecord.transfer_id == candidate))))


def transfer_patient(db: Session, request: TransferRequest) -> TransferResponse:
    """
    Release the current bed, claim the transfer bed and log the move.

    All writes share the request transaction; a failure in any of them
    leaves both beds as they were.
    """
    current_bed = beds.find_bed(db, request.current_ward_id, request.current_bed_number)
    if current_bed is None:
        logger.warning(
            f"Current bed {request.current_ward_id}/{request.current_bed_number} does not exist"
        )
        raise BadRequestError("Current bed does not exist in the selected ward.")

    if current_bed.status != BedStatus.OCCUPIED.value:
        logger.warning(f"Current bed {request.current_bed_number} is already available")
        raise BadRequestError("Current bed is already available")

    transfer_bed = beds.find_bed(
        db,
        request.transfer_ward_id,
        request.transfer_bed_number,
        status=BedStatus.AVAILABLE,
    )
    if transfer_bed is None:
        logger.warning(
            f"Transfer bed {request.transfer_ward_id}/{request.transfer_bed_number} not available"
        )
        raise NotFoundError("Transfer bed not found or not available.")

    if current_bed.patient_id != request.patient_id:
        logger.warning(
            f"Patient {request.patient_id} does not occupy "
            f"{request.current_ward_id}/{request.current_bed_number}"
        )
        raise BadRequestError("Patient is not occupying the current bed.")

    beds.release_bed(db, current_bed, request.patient_id)
    beds.claim_bed(db, transfer_bed, request.patient_id)

    patient = get_patient(db, request.patient_id)
    if patient is not None:
        patient.ward_id = request.transfer_ward_id
        patient.ward_name = transfer_bed.ward.ward_name
        patient.bed_number = request.transfer_bed_number

    transfer_id = unique_id(generate_transfer_id, lambda candidate: transfer_id_taken(db, candidate))
    db.add(TransferRecord(
        transfer_id=transfer_id,
        patient_id=request.patient_id,
        patient_name=request.patient_name,
        age=request.age,
        gender=request.gender,
        contactno=request.contactno,
        medical_acuity=request.medical_acuity,
        current_ward_id=request.current_ward_id,
        current_bed_number=request.current_bed_number,
        transfer_ward_id=request.transfer_ward_id,
        transfer_bed_number=request.transfer_bed_number,
        transfer_reasons=request.transfer_reasons,
    ))
    db.commit()

    logger.info(
        f"Transfer {transfer_id}: {request.patient_id} moved from "
        f"{request.current_ward_id}/{request.current_bed_number} to "
        f"{request.transfer_ward_id}/{request.transfer_bed_number}"
    )

    return TransferResponse(
        message="Patient transfer successful. Transfer bed marked as occupied.",
        transfer_id=transfer_id,
    )


def list_transfers(db: Session) -> List[TransferOut]:
    records = list(db.scalars(select(TransferRecord).order_by(TransferRecord.id)))
    if not records:
        raise NotFoundError("No transfers found")
    return [TransferOut.from_record(record) for record in records]
