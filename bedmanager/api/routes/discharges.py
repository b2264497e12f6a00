"""
Discharge routes.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bedmanager.db.connection import get_db_session
from bedmanager.models.records import DischargeOut, DischargeRequest, DischargeResponse
from bedmanager.services import discharges

router = APIRouter(tags=["Discharge"])


@router.post("/distaa", response_model=DischargeResponse)
def discharge_patient(request: DischargeRequest, db: Session = Depends(get_db_session)):
    """Discharge a patient and free their bed."""
    return discharges.discharge_patient(db, request)


@router.get("/dischargeGet", response_model=List[DischargeOut])
def discharge_get(db: Session = Depends(get_db_session)):
    return discharges.list_discharges(db)
