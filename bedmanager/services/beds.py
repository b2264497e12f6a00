"""
Bed registry: wards, bed labels and bed status changes.

Status changes go through conditional updates so that a bed can only be
claimed while it is still available and released while it is still
occupied.
"""
import logging
import re
from typing import List, Optional

from sqlalchemy import select, update, func
from sqlalchemy.orm import Session, selectinload

from bedmanager.core.exceptions import BadRequestError, ConflictError, NotFoundError
from bedmanager.db.tables import WardRecord, BedRecord
from bedmanager.models.hospital import (
    AddBedsRequest,
    AddBedsResponse,
    BedStatus,
    WardOut,
)

logger = logging.getLogger(__name__)

BED_LABEL = re.compile(r"^bed_(\d+)$")


def find_or_create_ward(
    db: Session,
    ward_name: str,
    ward_id: str,
    ward_type: str
) -> WardRecord:
    """Return the ward with this identity, creating it when missing."""
    ward = db.scalars(
        select(WardRecord)
        .options(selectinload(WardRecord.beds))
        .where(
            WardRecord.ward_name == ward_name,
            WardRecord.ward_id == ward_id,
            WardRecord.ward_type == ward_type,
        )
    ).first()
    if ward is None:
        ward = WardRecord(ward_name=ward_name, ward_id=ward_id, ward_type=ward_type)
        db.add(ward)
        logger.info(f"Created ward {ward_name} ({ward_id}, {ward_type})")
    return ward


def next_bed_index(beds: List[BedRecord]) -> int:
    """Next numeric suffix after the highest `bed_<n>` label."""
    numbers = []
    for bed in beds:
        match = BED_LABEL.match(bed.bed_number)
        if match:
            numbers.append(int(match.group(1)))
    return max(numbers, default=0) + 1


def add_beds(db: Session, request: AddBedsRequest) -> AddBedsResponse:
    """Append `count` available beds to a ward, creating the ward if needed."""
    if request.count < 0:
        logger.warning(f"Rejected bed count {request.count} for ward {request.ward_id}")
        raise BadRequestError("Invalid bed count found")

    ward = find_or_create_ward(db, request.ward_name, request.ward_id, request.ward_type)

    start = next_bed_index(ward.beds)
    position = len(ward.beds)
    labels = []
    for offset in range(request.count):
        label = f"bed_{start + offset}"
        ward.beds.append(
            BedRecord(
                bed_number=label,
                position=position + offset,
                status=BedStatus.AVAILABLE.value,
            )
        )
        labels.append(label)

    db.commit()
    logger.info(f"Added {request.count} beds to ward {request.ward_id}")

    return AddBedsResponse(
        message=f"Added {request.count} beds to the specified ward successfully",
        ward_id=request.ward_id,
        beds=labels,
    )


def get_all_wards(db: Session) -> List[WardRecord]:
    return list(
        db.scalars(
            select(WardRecord)
            .options(selectinload(WardRecord.beds))
            .order_by(WardRecord.id)
        )
    )


def list_wards(db: Session) -> List[WardOut]:
    """All wards with their beds. Raises NotFoundError when there are none."""
    wards = get_all_wards(db)
    if not wards:
        raise NotFoundError("No beds found")
    return [WardOut.from_record(ward) for ward in wards]


def find_bed(
    db: Session,
    ward_id: str,
    bed_number: str,
    status: Optional[BedStatus] = None
) -> Optional[BedRecord]:
    """Look up a bed by ward id and label, optionally requiring a status."""
    query = (
        select(BedRecord)
        .join(WardRecord)
        .where(WardRecord.ward_id == ward_id, BedRecord.bed_number == bed_number)
        .order_by(WardRecord.id)
    )
    if status is not None:
        query = query.where(BedRecord.status == status.value)
    return db.scalars(query).first()


def find_beds_by_label(db: Session, bed_number: str, ward_id: str = None) -> List[BedRecord]:
    """Every bed carrying this label, ordered by ward then position."""
    query = (
        select(BedRecord)
        .join(WardRecord)
        .where(BedRecord.bed_number == bed_number)
        .order_by(WardRecord.id, BedRecord.position)
    )
    if ward_id is not None:
        query = query.where(WardRecord.ward_id == ward_id)
    return list(db.scalars(query))


def claim_bed(db: Session, bed: BedRecord, patient_id: str) -> None:
    """
    Mark an available bed occupied by `patient_id`.

    Raises:
        ConflictError: The bed was no longer available
    """
    result = db.execute(
        update(BedRecord)
        .where(BedRecord.id == bed.id, BedRecord.status == BedStatus.AVAILABLE.value)
        .values(status=BedStatus.OCCUPIED.value, patient_id=patient_id)
    )
    if result.rowcount != 1:
        logger.warning(f"Bed {bed.bed_number} was claimed by another request")
        raise ConflictError("Selected bed is already occupied")


def release_bed(db: Session, bed: BedRecord, patient_id: str = None) -> None:
    """
    Mark an occupied bed available and clear its patient.

    When `patient_id` is given the bed must still hold that patient.

    Raises:
        ConflictError: The bed was no longer occupied as expected
    """
    conditions = [BedRecord.id == bed.id, BedRecord.status == BedStatus.OCCUPIED.value]
    if patient_id is not None:
        conditions.append(BedRecord.patient_id == patient_id)

    result = db.execute(
        update(BedRecord)
        .where(*conditions)
        .values(status=BedStatus.AVAILABLE.value, patient_id=None)
    )
    if result.rowcount != 1:
        logger.warning(f"Bed {bed.bed_number} changed state before it could be released")
        raise ConflictError("Bed is no longer occupied by this patient")


def total_bed_count(db: Session) -> int:
    return db.scalar(select(func.count()).select_from(BedRecord)) or 0
