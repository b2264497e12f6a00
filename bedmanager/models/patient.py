"""
Patient models for admission and the patient store.
"""
from datetime import datetime
from enum import Enum
from typing import Optional, List

from pydantic import Field

from .base import ApiModel


class PatientStatus(str, Enum):
    """Lifecycle stage of a patient record."""
    WAITING = "waiting"
    ADMITTED = "admitted"


class Acuity(str, Enum):
    """Clinical severity classification."""
    CRITICAL = "Critical"
    MODERATE = "Moderate"
    STABLE = "Stable"


class Address(ApiModel):
    doorno: Optional[str] = None
    streetname: Optional[str] = None
    district: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    pincode: Optional[str] = None


class Task(ApiModel):
    task_type: Optional[str] = Field(None, alias="taskType")
    description: Optional[str] = None


class PatientFields(ApiModel):
    """Fields shared by admission and waitlist submissions."""
    patient_name: str = Field(..., alias="patientName")
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[str] = None
    contactno: Optional[str] = None
    medical_acuity: Optional[str] = Field(None, alias="medicalAcuity")
    admitting_doctors: Optional[str] = Field(None, alias="admittingDoctors")
    admission_date: str = Field(..., alias="admissionDate", description="DD-MM-YYYY")
    admission_time: Optional[str] = Field(None, alias="admissionTime", description="HH:MM")
    assigned_nurse: Optional[str] = Field(None, alias="assignedNurse")
    tasks: List[Task] = Field(default_factory=list)
    address: Optional[Address] = None
    abha_no: Optional[str] = Field(None, alias="abhaNo")


class AdmitRequest(PatientFields):
    ward_id: str = Field(..., alias="wardId")
    ward_name: Optional[str] = Field(None, alias="wardName")
    bed_number: str = Field(..., alias="bedNumber")
    infection_status: Optional[str] = Field(None, alias="infectionStatus")


class PatientOut(ApiModel):
    """Core patient model as stored in the patient store."""
    patient_id: str = Field(..., alias="patientId")
    status: PatientStatus
    patient_name: str = Field(..., alias="patientName")
    age: Optional[int] = None
    gender: Optional[str] = None
    contactno: Optional[str] = None
    ward_id: Optional[str] = Field(None, alias="wardId")
    ward_name: Optional[str] = Field(None, alias="wardName")
    bed_number: Optional[str] = Field(None, alias="bedNumber")
    medical_acuity: Optional[str] = Field(None, alias="medicalAcuity")
    risk_score: float = Field(..., alias="riskScore")
    infection_status: Optional[str] = Field(None, alias="infectionStatus")
    admitting_doctors: Optional[str] = Field(None, alias="admittingDoctors")
    assigned_nurse: Optional[str] = Field(None, alias="assignedNurse")
    admission_date: Optional[str] = Field(None, alias="admissionDate")
    admission_time: Optional[str] = Field(None, alias="admissionTime")
    tasks: List[Task] = Field(default_factory=list)
    address: Optional[Address] = None
    abha_no: Optional[str] = Field(None, alias="abhaNo")
    priority: Optional[str] = None
    readmitted: bool = False
    first_seen_at: Optional[datetime] = Field(None, alias="firstSeenAt")

    @classmethod
    def from_record(cls, record) -> "PatientOut":
        return cls(
            patient_id=record.patient_id,
            status=record.status,
            patient_name=record.patient_name,
            age=record.age,
            gender=record.gender,
            contactno=record.contactno,
            ward_id=record.ward_id,
            ward_name=record.ward_name,
            bed_number=record.bed_number,
            medical_acuity=record.medical_acuity,
            risk_score=record.risk_score,
            infection_status=record.infection_status,
            admitting_doctors=record.admitting_doctors,
            assigned_nurse=record.assigned_nurse,
            admission_date=record.admission_date,
            admission_time=record.admission_time,
            tasks=record.tasks or [],
            address=record.address,
            abha_no=record.abha_no,
            priority=record.priority,
            readmitted=record.readmitted,
            first_seen_at=record.first_seen_at,
        )


class AdmitResponse(ApiModel):
    patient: PatientOut
    infection_rate: float = Field(..., alias="infectionRate")
