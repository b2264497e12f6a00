"""
Transfer and discharge log models.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class TransferRequest(ApiModel):
    current_ward_id: str = Field(..., alias="currentWardId")
    current_bed_number: str = Field(..., alias="currentBedNumber")
    transfer_ward_id: str = Field(..., alias="transferWardId")
    transfer_bed_number: str = Field(..., alias="transferBedNumber")
    patient_id: str = Field(..., alias="patientId")
    patient_name: Optional[str] = Field(None, alias="patientName")
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[str] = None
    contactno: Optional[str] = None
    medical_acuity: Optional[str] = Field(None, alias="medicalAcuity")
    transfer_reasons: Optional[str] = Field(None, alias="transferReasons")


class TransferOut(ApiModel):
    transfer_id: str = Field(..., alias="transferId")
    patient_id: str = Field(..., alias="patientId")
    patient_name: Optional[str] = Field(None, alias="patientName")
    age: Optional[int] = None
    gender: Optional[str] = None
    contactno: Optional[str] = None
    medical_acuity: Optional[str] = Field(None, alias="medicalAcuity")
    current_ward_id: str = Field(..., alias="currentWardId")
    current_bed_number: str = Field(..., alias="currentBedNumber")
    transfer_ward_id: str = Field(..., alias="transferWardId")
    transfer_bed_number: str = Field(..., alias="transferBedNumber")
    transfer_reasons: Optional[str] = Field(None, alias="transferReasons")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    @classmethod
    def from_record(cls, record) -> "TransferOut":
        return cls(
            transfer_id=record.transfer_id,
            patient_id=record.patient_id,
            patient_name=record.patient_name,
            age=record.age,
            gender=record.gender,
            contactno=record.contactno,
            medical_acuity=record.medical_acuity,
            current_ward_id=record.current_ward_id,
            current_bed_number=record.current_bed_number,
            transfer_ward_id=record.transfer_ward_id,
            transfer_bed_number=record.transfer_bed_number,
            transfer_reasons=record.transfer_reasons,
            created_at=record.created_at,
        )


class TransferResponse(ApiModel):
    message: str
    transfer_id: str = Field(..., alias="transferId")


class DischargeRequest(ApiModel):
    patient_id: str = Field(..., alias="patientId")
    ward_id: str = Field(..., alias="wardId")
    bed_number: str = Field(..., alias="bedNumber")
    patient_name: Optional[str] = Field(None, alias="patientName")
    medical_acuity: Optional[str] = Field(None, alias="medicalAcuity")
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[str] = None
    admission_date: Optional[str] = Field(None, alias="admissionDate")
    discharge_reasons: Optional[str] = Field(None, alias="dischargeReasons")
    discharge_date: Optional[str] = Field(None, alias="dischargeDate")
    discharge_time: Optional[str] = Field(None, alias="dischargeTime")


class DischargeOut(ApiModel):
    discharge_id: str = Field(..., alias="dischargeId")
    patient_id: str = Field(..., alias="patientId")
    patient_name: Optional[str] = Field(None, alias="patientName")
    age: Optional[int] = None
    gender: Optional[str] = None
    medical_acuity: Optional[str] = Field(None, alias="medicalAcuity")
    admission_date: Optional[str] = Field(None, alias="admissionDate")
    ward_id: str = Field(..., alias="wardId")
    bed_number: str = Field(..., alias="bedNumber")
    discharge_reasons: Optional[str] = Field(None, alias="dischargeReasons")
    discharge_date: Optional[str] = Field(None, alias="dischargeDate")
    discharge_time: Optional[str] = Field(None, alias="dischargeTime")
    mortality_rate: float = Field(..., alias="mortalityRate")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    @classmethod
    def from_record(cls, record) -> "DischargeOut":
        return cls(
            discharge_id=record.discharge_id,
            patient_id=record.patient_id,
            patient_name=record.patient_name,
            age=record.age,
            gender=record.gender,
            medical_acuity=record.medical_acuity,
            admission_date=record.admission_date,
            ward_id=record.ward_id,
            bed_number=record.bed_number,
            discharge_reasons=record.discharge_reasons,
            discharge_date=record.discharge_date,
            discharge_time=record.discharge_time,
            mortality_rate=record.mortality_rate,
            created_at=record.created_at,
        )


class DischargeResponse(ApiModel):
    message: str
    mortality_rate: float = Field(..., alias="mortalityRate")
    discharge_id: str = Field(..., alias="dischargeId")
