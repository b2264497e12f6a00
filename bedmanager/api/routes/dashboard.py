"""
Dashboard routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bedmanager.db.connection import get_db_session
from bedmanager.services import dashboard

router = APIRouter(tags=["Dashboard"])


@router.get("/wardoccupancys")
def ward_occupancy(db: Session = Depends(get_db_session)):
    """Occupied-bed counts per ward."""
    return dashboard.ward_occupancy(db)


@router.get("/realtimeavail")
def realtime_availability(db: Session = Depends(get_db_session)):
    """Available-bed counts per ward."""
    return dashboard.realtime_availability(db)


@router.get("/paaG")
def acuity_breakdown(db: Session = Depends(get_db_session)):
    """Patients per ward broken down by medical acuity."""
    return dashboard.acuity_breakdown(db)


@router.get("/admdis")
def admission_discharge_trend(db: Session = Depends(get_db_session)):
    """Admission and discharge counts per date."""
    return dashboard.admission_discharge_trend(db)


@router.get("/patientCareDashboard")
def patient_care(db: Session = Depends(get_db_session)):
    return dashboard.patient_care(db)


@router.get("/availbilityboard")
def bed_availability_board(db: Session = Depends(get_db_session)):
    return dashboard.bed_availability_board(db)
