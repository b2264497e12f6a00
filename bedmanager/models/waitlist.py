"""
Waitlist models.

Entries are exposed as a single-element `WaitlistEntryfields` list, the
shape clients of the waiting board already read.
"""
from typing import Optional, List

from pydantic import Field

from .base import ApiModel
from .patient import PatientFields, Address, Task


class WaitlistRequest(PatientFields):
    ward_id: Optional[str] = Field(None, alias="wardId")
    ward_name: Optional[str] = Field(None, alias="wardName")
    bed_number: Optional[str] = Field(None, alias="bedNumber")
    priority: Optional[str] = None


class WaitlistFields(ApiModel):
    patient_id: str = Field(..., alias="patientId")
    patient_name: str = Field(..., alias="patientName")
    contactno: Optional[str] = None
    medical_acuity: Optional[str] = Field(None, alias="medicalAcuity")
    ward_id: Optional[str] = Field(None, alias="wardId")
    bed_number: Optional[str] = Field(None, alias="bedNumber")
    ward_name: Optional[str] = Field(None, alias="wardName")
    priority: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    admitting_doctors: Optional[str] = Field(None, alias="admittingDoctors")
    admission_date: Optional[str] = Field(None, alias="admissionDate")
    admission_time: Optional[str] = Field(None, alias="admissionTime")
    assigned_nurse: Optional[str] = Field(None, alias="assignedNurse")
    address: Optional[Address] = None
    tasks: List[Task] = Field(default_factory=list)
    abha_no: Optional[str] = Field(None, alias="abhaNo")

    @classmethod
    def from_record(cls, record) -> "WaitlistFields":
        return cls(
            patient_id=record.patient_id,
            patient_name=record.patient_name,
            contactno=record.contactno,
            medical_acuity=record.medical_acuity,
            ward_id=record.ward_id,
            bed_number=record.bed_number,
            ward_name=record.ward_name,
            priority=record.priority,
            age=record.age,
            gender=record.gender,
            admitting_doctors=record.admitting_doctors,
            admission_date=record.admission_date,
            admission_time=record.admission_time,
            assigned_nurse=record.assigned_nurse,
            address=record.address,
            tasks=record.tasks or [],
            abha_no=record.abha_no,
        )


class WaitlistEntryOut(ApiModel):
    entry_id: int = Field(..., alias="entryId")
    entry_fields: List[WaitlistFields] = Field(..., alias="WaitlistEntryfields")


class CreatedEntryResponse(ApiModel):
    created_entry: WaitlistEntryOut = Field(..., alias="createdEntry")


class WaitlistSummaryFields(ApiModel):
    """Fields shown on the waiting board."""
    patient_name: str = Field(..., alias="patientName")
    patient_id: str = Field(..., alias="patientId")
    age: Optional[int] = None
    gender: Optional[str] = None
    priority: Optional[str] = None
    admitting_doctors: Optional[str] = Field(None, alias="admittingDoctors")
    admission_date: Optional[str] = Field(None, alias="admissionDate")


class WaitlistSummary(ApiModel):
    entry_fields: List[WaitlistSummaryFields] = Field(..., alias="WaitlistEntryfields")


class PriorityUpdateRequest(ApiModel):
    patient_id: str = Field(..., alias="patientId")
    priority: str


class BedAssignmentRequest(ApiModel):
    bed_number: str = Field(..., alias="bedNumber")
    patient_id: str = Field(..., alias="patientId")
    ward_id: Optional[str] = Field(None, alias="wardId")
