"""
Admission and patient store routes.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bedmanager.db.connection import get_db_session
from bedmanager.models.patient import AdmitRequest, AdmitResponse, PatientOut
from bedmanager.services import patients

router = APIRouter(tags=["Patient"])


@router.post("/admitpt", response_model=AdmitResponse, status_code=201)
def admit_patient(request: AdmitRequest, db: Session = Depends(get_db_session)):
    """
    Admit a patient into a bed.

    Returns the stored patient and the current infection rate.
    """
    return patients.admit_patient(db, request)


@router.get("/patientGet", response_model=List[PatientOut])
def patient_get(db: Session = Depends(get_db_session)):
    """Get all patient records, waiting and admitted."""
    return patients.list_patients(db)
