"""
ORM tables for wards, beds, patients, logs and the waitlist.
"""
from datetime import datetime

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    JSON,
    String,
    Boolean,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from bedmanager.db.connection import Base


class WardRecord(Base):
    __tablename__ = "wards"
    __table_args__ = (
        UniqueConstraint("ward_name", "ward_id", "ward_type", name="uq_ward_identity"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Nullable: wards created by an ad hoc bed assignment carry no identity
    ward_name = Column(String(120), nullable=True)
    ward_id = Column(String(64), nullable=True, index=True)
    ward_type = Column(String(64), nullable=True)
    created_at = Column(DateTime, default=datetime.now)

    beds = relationship(
        "BedRecord",
        back_populates="ward",
        order_by="BedRecord.position",
        cascade="all, delete-orphan",
    )


class BedRecord(Base):
    __tablename__ = "beds"
    __table_args__ = (
        UniqueConstraint("ward_pk", "bed_number", name="uq_bed_in_ward"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    ward_pk = Column(Integer, ForeignKey("wards.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    bed_number = Column(String(64), nullable=False, index=True)
    status = Column(String(16), nullable=False, default="available")
    patient_id = Column(String(32), nullable=True)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    ward = relationship("WardRecord", back_populates="beds")


class PatientRecord(Base):
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    patient_id = Column(String(32), unique=True, nullable=False, index=True)
    status = Column(String(16), nullable=False, default="admitted")

    patient_name = Column(String(200), nullable=False)
    age = Column(Integer, nullable=True)
    gender = Column(String(16), nullable=True)
    contactno = Column(String(32), nullable=True, index=True)
    abha_no = Column(String(64), nullable=True)
    address = Column(JSON, nullable=True)

    ward_id = Column(String(64), nullable=True)
    ward_name = Column(String(120), nullable=True)
    bed_number = Column(String(64), nullable=True)

    medical_acuity = Column(String(32), nullable=True)
    risk_score = Column(Float, nullable=False, default=0.1)
    infection_status = Column(String(32), nullable=True)
    admitting_doctors = Column(String(200), nullable=True)
    assigned_nurse = Column(String(200), nullable=True)
    tasks = Column(JSON, nullable=True)
    priority = Column(String(32), nullable=True)

    admission_date = Column(String(16), nullable=True)
    admission_time = Column(String(16), nullable=True)

    readmitted = Column(Boolean, nullable=False, default=False)
    first_seen_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.now)


class ContactHistoryRecord(Base):
    """Every contact number that has been admitted at least once."""
    __tablename__ = "contact_history"

    contactno = Column(String(32), primary_key=True)
    first_seen_at = Column(DateTime, nullable=False, default=datetime.now)
    last_admitted_at = Column(DateTime, nullable=False, default=datetime.now)
    admissions = Column(Integer, nullable=False, default=1)


class TransferRecord(Base):
    __tablename__ = "transfers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transfer_id = Column(String(32), unique=True, nullable=False, index=True)
    patient_id = Column(String(32), nullable=False, index=True)
    patient_name = Column(String(200), nullable=True)
    age = Column(Integer, nullable=True)
    gender = Column(String(16), nullable=True)
    contactno = Column(String(32), nullable=True)
    medical_acuity = Column(String(32), nullable=True)

    current_ward_id = Column(String(64), nullable=False)
    current_bed_number = Column(String(64), nullable=False)
    transfer_ward_id = Column(String(64), nullable=False)
    transfer_bed_number = Column(String(64), nullable=False)
    transfer_reasons = Column(String(500), nullable=True)

    created_at = Column(DateTime, default=datetime.now)


class DischargeRecord(Base):
    __tablename__ = "discharges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    discharge_id = Column(String(32), unique=True, nullable=False, index=True)
    patient_id = Column(String(32), nullable=False, index=True)
    patient_name = Column(String(200), nullable=True)
    age = Column(Integer, nullable=True)
    gender = Column(String(16), nullable=True)
    contactno = Column(String(32), nullable=True)
    medical_acuity = Column(String(32), nullable=True)
    admission_date = Column(String(16), nullable=True)

    ward_id = Column(String(64), nullable=False)
    bed_number = Column(String(64), nullable=False)

    discharge_reasons = Column(String(500), nullable=True)
    discharge_date = Column(String(16), nullable=True)
    discharge_time = Column(String(16), nullable=True)
    mortality_rate = Column(Float, nullable=False, default=0.0)

    created_at = Column(DateTime, default=datetime.now)


class WaitlistRecord(Base):
    __tablename__ = "waitlist"

    id = Column(Integer, primary_key=True, autoincrement=True)
    patient_id = Column(String(32), unique=True, nullable=False, index=True)
    patient_name = Column(String(200), nullable=False)
    contactno = Column(String(32), nullable=True)
    age = Column(Integer, nullable=True)
    gender = Column(String(16), nullable=True)
    medical_acuity = Column(String(32), nullable=True)
    admitting_doctors = Column(String(200), nullable=True)
    assigned_nurse = Column(String(200), nullable=True)
    ward_id = Column(String(64), nullable=True)
    ward_name = Column(String(120), nullable=True)
    bed_number = Column(String(64), nullable=True)
    priority = Column(String(32), nullable=True)
    admission_date = Column(String(16), nullable=True)
    admission_time = Column(String(16), nullable=True)
    address = Column(JSON, nullable=True)
    tasks = Column(JSON, nullable=True)
    abha_no = Column(String(64), nullable=True)

    created_at = Column(DateTime, default=datetime.now)
