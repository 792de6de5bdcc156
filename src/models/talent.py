"""Talent directory view-model and filter models."""

from enum import Enum
from typing import Optional, Literal
from pydantic import BaseModel, Field


class TalentCategory(str, Enum):
    """Category pills shown above the directory."""
    ALL = "All"
    MALE = "Male"
    FEMALE = "Female"
    KIDS = "Kids"


GenderLabel = Literal["Male", "Female", "Other"]

KIDS_AGE_LIMIT = 15


class Talent(BaseModel):
    """A profile mapped for display and filtering."""
    id: str = Field("", description="Profile ID")
    name: str = Field("", description="Display name")
    category: Optional[TalentCategory] = Field(None, description="Derived display category")
    image: str = Field("", description="Cover image URL")
    height: str = Field("N/A", description="Height label, e.g. 5'7\"")
    size: str = Field("N/A", description="Size label")
    location: str = Field("Location TBA", description="City, state, country")
    age: int = Field(0, description="Age in whole years")
    gender: GenderLabel = Field("Other", description="Gender label")
    height_cm: int = Field(0, description="Height in centimeters")
    instagram_handle: Optional[str] = None
    portfolio_url: Optional[str] = None


class AdvancedFilters(BaseModel):
    """Advanced search panel values."""
    location: str = Field("", description="Case-insensitive location substring")
    min_age: int = Field(0, ge=0, description="Inclusive lower age bound")
    max_age: int = Field(80, ge=0, description="Inclusive upper age bound")
    gender: Literal["All", "Male", "Female", "Other"] = Field("All", description="Exact gender or All")
    min_height: int = Field(0, ge=0, description="Minimum height in cm; 0 disables")
