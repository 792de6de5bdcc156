"""Talent directory - load online models, attach thumbnails, book talent."""

import asyncio
from typing import Optional

from src.models.talent import Talent
from src.services.drive_links import normalize_drive_image_link
from src.services.media_api import fetch_media_records
from src.services.media_roles import derive_media
from src.services.session import Session
from src.services.supabase_client import (
    list_online_profiles,
    get_brand_profile_by_user_id,
    create_booking_request,
)
from src.services.talent_mapper import profile_to_talent
from src.utils.errors import SessionError, ElgraceError
from src.utils.logging import get_structured_logger, log_timing, mask_user_id, timed

logger = get_structured_logger(__name__)

THUMBNAIL_CONCURRENCY = 6


def cover_image(profile: dict) -> str:
    """Initial card image from the profile's cover photo link."""
    url = profile.get("cover_photo_url") or ""
    return normalize_drive_image_link(url) or url


async def load_talents() -> list[Talent]:
    """Online model profiles mapped for the directory, in backend order."""
    with log_timing("load_talents", logger=logger):
        profiles = await list_online_profiles()
        talents = [
            profile_to_talent(profile, image=cover_image(profile))
            for profile in profiles
            if profile.get("category") == "model"
        ]
    logger.info("Loaded talents", total_profiles=len(profiles), talents=len(talents))
    return talents


@timed("load_thumbnails", logger=logger)
async def load_thumbnails(talents: list[Talent], concurrency: int = THUMBNAIL_CONCURRENCY) -> list[Talent]:
    """Replace card images with each talent's profile image where one exists.

    Failures for a single card leave that card's image unchanged.
    """
    semaphore = asyncio.Semaphore(max(concurrency, 1))

    async def thumbnail(talent: Talent) -> Optional[str]:
        if not talent.id:
            return None
        async with semaphore:
            try:
                media = derive_media(await fetch_media_records(talent.id))
            except Exception as e:
                logger.warning("Thumbnail lookup failed", talent_id=talent.id, error=str(e))
                return None
        return media.profile_image.media_url if media.profile_image else None

    images = await asyncio.gather(*(thumbnail(talent) for talent in talents))
    return [
        talent.model_copy(update={"image": image}) if image else talent
        for talent, image in zip(talents, images)
    ]


async def request_booking(session: Session, talent: Talent, message: Optional[str] = None) -> dict:
    """Send a booking request from the signed-in client to ``talent``."""
    if not session.is_authenticated:
        raise SessionError("Sign in to request a booking")
    if session.role != "client":
        raise SessionError("Please login as a client to request a booking")

    brand = await get_brand_profile_by_user_id(session.user_id)
    if not brand:
        raise ElgraceError("Complete your brand profile before sending booking requests")

    booking = await create_booking_request({
        "model_user_id": talent.id,
        "client_user_id": session.user_id,
        "brand_profile_id": brand["id"],
        "message": message or None,
    })
    logger.info(
        "Booking request created",
        talent_id=talent.id,
        client_user_id=mask_user_id(session.user_id),
        booking_id=booking.get("id"),
    )
    return booking
