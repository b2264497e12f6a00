"""
Ward and bed models for the bed registry.
"""
from enum import Enum
from typing import Optional, List

from pydantic import Field

from .base import ApiModel


class BedStatus(str, Enum):
    """Status of a hospital bed."""
    AVAILABLE = "available"
    OCCUPIED = "occupied"


class AddBedsRequest(ApiModel):
    ward_name: str = Field(..., alias="wardName")
    ward_id: str = Field(..., alias="wardId")
    ward_type: str = Field(..., alias="wardType")
    count: int = Field(..., alias="bedNumber", description="Number of beds to add")


class AddBedsResponse(ApiModel):
    message: str
    ward_id: str = Field(..., alias="wardId")
    beds: List[str] = Field(default_factory=list, description="Labels of the new beds")


class BedOut(ApiModel):
    """Individual hospital bed."""
    bed_number: str = Field(..., alias="bedNumber")
    status: BedStatus = BedStatus.AVAILABLE
    patient_id: Optional[str] = Field(None, alias="patientId")

    @classmethod
    def from_record(cls, record) -> "BedOut":
        return cls(
            bed_number=record.bed_number,
            status=record.status,
            patient_id=record.patient_id,
        )


class WardOut(ApiModel):
    """A ward and its beds in label order."""
    ward_name: Optional[str] = Field(None, alias="wardName")
    ward_id: Optional[str] = Field(None, alias="wardId")
    ward_type: Optional[str] = Field(None, alias="wardType")
    beds: List[BedOut] = Field(default_factory=list)

    @property
    def total_beds(self) -> int:
        return len(self.beds)

    @property
    def available_beds(self) -> int:
        return sum(1 for bed in self.beds if bed.status == BedStatus.AVAILABLE)

    @property
    def occupied_beds(self) -> int:
        return sum(1 for bed in self.beds if bed.status == BedStatus.OCCUPIED)

    @classmethod
    def from_record(cls, record) -> "WardOut":
        return cls(
            ward_name=record.ward_name,
            ward_id=record.ward_id,
            ward_type=record.ward_type,
            beds=[BedOut.from_record(bed) for bed in record.beds],
        )
