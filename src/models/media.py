"""Media models - rows of the model_media table served by the media endpoint."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class MediaRole(str, Enum):
    """Semantic slot a media record fills on a profile."""
    PROFILE = "profile"
    PORTFOLIO = "portfolio"
    INTRO_VIDEO = "intro_video"
    PORTFOLIO_VIDEO = "portfolio_video"


class MediaItem(BaseModel):
    """Uploaded media record."""
    id: str = Field(..., description="Media record ID")
    model_id: str = Field(..., description="Owning model ID")
    media_type: MediaType = Field(..., description="image or video")
    media_role: MediaRole = Field(..., description="Slot: profile, portfolio, intro_video, portfolio_video")
    media_url: str = Field(..., description="Media URL (absolute after normalization)")
    sort_order: Optional[int] = Field(0, description="Position within the portfolio")
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class DerivedMedia(BaseModel):
    """Media grouped into named slots."""
    profile_image: Optional[MediaItem] = None
    intro_video: Optional[MediaItem] = None
    portfolio: list[MediaItem] = Field(default_factory=list)


class DerivedProfileMedia(DerivedMedia):
    """Profile page variant that also carries portfolio videos."""
    portfolio_videos: list[MediaItem] = Field(default_factory=list)
