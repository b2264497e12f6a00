"""
Bed registry routes.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bedmanager.db.connection import get_db_session
from bedmanager.models.hospital import AddBedsRequest, AddBedsResponse, WardOut
from bedmanager.services import beds

router = APIRouter(tags=["Beds"])


@router.post("/adbeds1", response_model=AddBedsResponse)
def add_beds(request: AddBedsRequest, db: Session = Depends(get_db_session)):
    """Add a number of beds to a ward, creating the ward on first use."""
    return beds.add_beds(db, request)


@router.get("/bedGet", response_model=List[WardOut])
def bed_get(db: Session = Depends(get_db_session)):
    """Get every ward with its beds."""
    return beds.list_wards(db)
