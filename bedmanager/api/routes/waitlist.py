"""
Waitlist routes.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bedmanager.db.connection import get_db_session
from bedmanager.models.base import MessageResponse
from bedmanager.models.waitlist import (
    BedAssignmentRequest,
    CreatedEntryResponse,
    PriorityUpdateRequest,
    WaitlistRequest,
    WaitlistSummary,
)
from bedmanager.services import waitlist

router = APIRouter(tags=["Waitlist"])


@router.post("/waitingentry1", response_model=CreatedEntryResponse, status_code=201)
def add_waiting_entry(request: WaitlistRequest, db: Session = Depends(get_db_session)):
    """Add a patient to the waitlist."""
    return waitlist.add_waiting_entry(db, request)


@router.put("/pro", response_model=MessageResponse)
def priority_update(request: PriorityUpdateRequest, db: Session = Depends(get_db_session)):
    """Change the priority of a waitlist entry."""
    return waitlist.update_priority(db, request)


@router.put("/assignbedss", response_model=MessageResponse)
def bed_assign_update(request: BedAssignmentRequest, db: Session = Depends(get_db_session)):
    """Assign a bed to a waiting patient."""
    return waitlist.assign_bed(db, request)


@router.get("/Waiting", response_model=List[WaitlistSummary])
def wait_get(db: Session = Depends(get_db_session)):
    return waitlist.list_waitlist(db)
