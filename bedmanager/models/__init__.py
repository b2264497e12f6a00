"""
Models package for the bed management backend.
"""

from .base import ApiModel, MessageResponse

from .hospital import (
    BedStatus,
    AddBedsRequest,
    AddBedsResponse,
    BedOut,
    WardOut
)

from .patient import (
    PatientStatus,
    Acuity,
    Address,
    Task,
    PatientFields,
    AdmitRequest,
    PatientOut,
    AdmitResponse
)

from .records import (
    TransferRequest,
    TransferOut,
    TransferResponse,
    DischargeRequest,
    DischargeOut,
    DischargeResponse
)

from .waitlist import (
    WaitlistRequest,
    WaitlistFields,
    WaitlistEntryOut,
    CreatedEntryResponse,
    WaitlistSummaryFields,
    WaitlistSummary,
    PriorityUpdateRequest,
    BedAssignmentRequest
)

__all__ = [
    "ApiModel",
    "MessageResponse",

    # Hospital
    "BedStatus",
    "AddBedsRequest",
    "AddBedsResponse",
    "BedOut",
    "WardOut",

    # Patient
    "PatientStatus",
    "Acuity",
    "Address",
    "Task",
    "PatientFields",
    "AdmitRequest",
    "PatientOut",
    "AdmitResponse",

    # Records
    "TransferRequest",
    "TransferOut",
    "TransferResponse",
    "DischargeRequest",
    "DischargeOut",
    "DischargeResponse",

    # Waitlist
    "WaitlistRequest",
    "WaitlistFields",
    "WaitlistEntryOut",
    "CreatedEntryResponse",
    "WaitlistSummaryFields",
    "WaitlistSummary",
    "PriorityUpdateRequest",
    "BedAssignmentRequest"
]
