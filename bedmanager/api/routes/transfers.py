"""
Transfer routes.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bedmanager.db.connection import get_db_session
from bedmanager.models.records import TransferOut, TransferRequest, TransferResponse
from bedmanager.services import transfers

router = APIRouter(tags=["Transfers"])


@router.post("/tpsss", response_model=TransferResponse)
def transfer_patient(request: TransferRequest, db: Session = Depends(get_db_session)):
    """Transfer a patient from their current bed to an available bed."""
    return transfers.transfer_patient(db, request)


@router.get("/transferGet", response_model=List[TransferOut])
def transfer_get(db: Session = Depends(get_db_session)):
    return transfers.list_transfers(db)
