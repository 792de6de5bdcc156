"""Casting, casting application and booking request models."""

from enum import Enum
from typing import Optional
from datetime import date
from pydantic import BaseModel, Field


class CastingStatus(str, Enum):
    """Casting status as stored in the castings table."""
    DRAFT = "draft"
    UNDER_REVIEW = "under_review"
    OPEN = "open"
    CLOSED = "closed"


class CastingUiStatus(str, Enum):
    """Three-value status shown to admins."""
    UNDER_VERIFICATION = "UNDER_VERIFICATION"
    ONLINE = "ONLINE"
    CLOSED = "CLOSED"


CASTING_STATUS_LABELS = {
    CastingUiStatus.UNDER_VERIFICATION: "Under Verification",
    CastingUiStatus.ONLINE: "Online",
    CastingUiStatus.CLOSED: "Closed",
}


class ApplicationStatus(str, Enum):
    APPLIED = "applied"
    SHORTLISTED = "shortlisted"
    BOOKED = "booked"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class BookingStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


def casting_status_to_ui(status: Optional[str]) -> CastingUiStatus:
    """Map a db casting status to the admin UI status.

    draft and under_review (and anything unknown) show as under verification.
    """
    if status == CastingStatus.OPEN.value:
        return CastingUiStatus.ONLINE
    if status == CastingStatus.CLOSED.value:
        return CastingUiStatus.CLOSED
    return CastingUiStatus.UNDER_VERIFICATION


def casting_status_from_ui(status: CastingUiStatus) -> CastingStatus:
    """Map an admin UI status to the db status written on update."""
    return {
        CastingUiStatus.UNDER_VERIFICATION: CastingStatus.UNDER_REVIEW,
        CastingUiStatus.ONLINE: CastingStatus.OPEN,
        CastingUiStatus.CLOSED: CastingStatus.CLOSED,
    }[CastingUiStatus(status)]


class Casting(BaseModel):
    """Brand-posted casting opportunity."""
    id: str = Field(..., description="Casting ID")
    brand_profile_id: Optional[str] = Field(None, description="Posting brand")
    title: str = Field(..., description="Casting title")
    description: Optional[str] = None
    status: CastingStatus = Field(default=CastingStatus.DRAFT, description="draft, under_review, open, closed")
    budget_min: Optional[int] = Field(None, ge=0)
    budget_max: Optional[int] = Field(None, ge=0)
    application_deadline: Optional[date] = None
    shoot_date: Optional[date] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def ui_status(self) -> CastingUiStatus:
        return casting_status_to_ui(self.status.value)


class CastingApplication(BaseModel):
    """A model applying to a casting."""
    id: str = Field(..., description="Application ID")
    casting_id: str = Field(..., description="Casting ID")
    model_user_id: str = Field(..., description="Applying model's user ID")
    status: ApplicationStatus = Field(default=ApplicationStatus.APPLIED)
    message: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class BookingRequest(BaseModel):
    """A client/brand asking to book a model."""
    id: Optional[str] = None
    model_user_id: str = Field(..., description="Requested model's user ID")
    client_user_id: str = Field(..., description="Requesting client's user ID")
    brand_profile_id: Optional[str] = Field(None, description="Requesting brand profile")
    message: Optional[str] = None
    status: BookingStatus = Field(default=BookingStatus.PENDING)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
