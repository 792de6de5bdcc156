"""Profile models - talent and brand records (model_profiles / brand_profiles tables)."""

from enum import Enum
from typing import Optional, Literal
from pydantic import BaseModel, Field


class ProfileStatus(str, Enum):
    """Moderation status of a talent profile."""
    UNDER_REVIEW = "UNDER_REVIEW"
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"


PROFILE_STATUS_LABELS = {
    ProfileStatus.UNDER_REVIEW: "Under Review",
    ProfileStatus.ONLINE: "Online",
    ProfileStatus.OFFLINE: "Offline",
}

FollowerBucket = Literal["under_5k", "5k_20k", "20k_50k", "50k_100k", "100k_plus"]


class InstagramHandle(BaseModel):
    """One Instagram account with its follower bucket."""
    handle: str = Field("", description="Instagram handle")
    followers: FollowerBucket = Field("under_5k", description="Follower count bucket")


class Profile(BaseModel):
    """Talent profile - primary people table for models and clients."""
    id: Optional[str] = Field(None, description="Profile ID (uuid)")
    user_id: Optional[str] = Field(None, description="Auth user ID")
    model_code: Optional[str] = Field(None, description="Human-facing code, e.g. M-1000001")
    full_name: str = Field(..., description="Full name")
    dob: Optional[str] = Field(None, description="Date of birth (ISO date)")
    gender: Literal["male", "female", "other"] = Field("female", description="Gender")
    phone: str = Field("", description="Phone number")
    email: str = Field("", description="Email address")
    country: str = Field("", description="Country ISO code")
    state: str = Field("", description="State ISO code")
    city: str = Field("", description="City name")
    category: Literal["model", "client"] = Field("model", description="Profile category")
    instagram: list[InstagramHandle] = Field(default_factory=list, description="Instagram accounts")
    # Professional
    experience_level: Optional[Literal["lt_1", "1_3", "3_5", "gt_5"]] = None
    languages: Optional[list[str]] = None
    skills: Optional[list[str]] = None
    open_to_travel: Optional[bool] = None
    ramp_walk_experience: Optional[bool] = None
    ramp_walk_description: Optional[str] = None
    # Measurements
    height_feet: Optional[int] = None
    height_inches: Optional[int] = None
    bust_chest: Optional[int] = None
    waist: Optional[int] = None
    hips: Optional[int] = None
    weight: Optional[int] = None
    shoe_size: Optional[str] = Field(None, description="Shoe size, e.g. UK-8")
    size: Optional[str] = Field(None, description="Garment size")
    # Commercial minimums
    min_budget_half_day: Optional[int] = None
    min_budget_full_day: Optional[int] = None
    # Media
    cover_photo_url: Optional[str] = None
    portfolio_folder_link: Optional[str] = None
    intro_video_url: Optional[str] = None
    status: ProfileStatus = Field(default=ProfileStatus.UNDER_REVIEW, description="Moderation status")
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class BrandProfile(BaseModel):
    """Brand/client profile used for booking requests."""
    id: str = Field(..., description="Brand profile ID")
    user_id: str = Field(..., description="Auth user ID of the brand owner")
    brand_name: str = Field(..., description="Brand name")
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
