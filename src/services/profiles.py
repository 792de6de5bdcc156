"""Model profile entry - load, validate, save and self-submit profiles."""

from typing import Optional

from src.models.profile import ProfileStatus
from src.services.model_codes import get_next_model_code
from src.services.supabase_client import (
    get_profile_by_model_code,
    upsert_profile,
    create_public_profile,
)
from src.utils.errors import ProfileValidationError
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


def empty_profile(model_code: Optional[str] = None) -> dict:
    """Blank admin entry form."""
    return {
        "full_name": "",
        "dob": "",
        "gender": "female",
        "phone": "",
        "email": "",
        "country": "",
        "state": "",
        "city": "",
        "category": "model",
        "instagram": [{"handle": "", "followers": "under_5k"}],
        "status": ProfileStatus.UNDER_REVIEW.value,
        "model_code": model_code,
    }


def validate_model_entry(profile: dict) -> None:
    """Raise ProfileValidationError naming the first missing required field."""
    if not str(profile.get("model_code") or "").strip():
        raise ProfileValidationError("Model code is required")
    if not str(profile.get("full_name") or "").strip():
        raise ProfileValidationError("Full name is required")
    if not str(profile.get("email") or "").strip():
        raise ProfileValidationError("Email is required")


async def load_or_start_profile(model_code: Optional[str] = None) -> tuple[dict, bool]:
    """Existing profile for ``model_code``, or a blank one with the next code.

    Returns ``(profile, existed)``.
    """
    code = (model_code or "").strip()
    if code:
        existing = await get_profile_by_model_code(code)
        if existing:
            logger.info("Loaded existing model profile", model_code=code)
            return existing, True
    next_code = await get_next_model_code()
    logger.info("Starting new model profile", model_code=next_code)
    return empty_profile(next_code), False


async def save_model_profile(profile: dict) -> dict:
    """Admin save: validate, force category model, upsert on model_code."""
    validate_model_entry(profile)
    payload = {
        **profile,
        "model_code": str(profile["model_code"]).strip(),
        "email": str(profile["email"]).strip(),
        "category": "model",
    }
    saved = await upsert_profile(payload)
    logger.info("Model profile saved", model_code=payload["model_code"])
    return saved


async def submit_talent_profile(data: dict) -> dict:
    """Self-submitted onboarding profile; always starts under review."""
    if not str(data.get("full_name") or "").strip():
        raise ProfileValidationError("Full name is required")
    if not str(data.get("email") or "").strip():
        raise ProfileValidationError("Email is required")

    payload = {
        **data,
        "email": str(data["email"]).strip(),
        "model_code": await get_next_model_code(),
        "category": "model",
        "status": ProfileStatus.UNDER_REVIEW.value,
    }
    created = await create_public_profile(payload)
    logger.info("Talent profile submitted", model_code=payload["model_code"])
    return created
