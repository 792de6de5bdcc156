"""Map raw profile rows to directory Talent view-models.

Every helper here is total: missing or malformed fields degrade to 0, empty
strings or None, never an exception.
"""

import math
from datetime import date, datetime
from typing import Any, Optional, Union

from src.models.profile import Profile
from src.models.talent import Talent, TalentCategory, GenderLabel, KIDS_AGE_LIMIT

CM_PER_FOOT = 30.48
CM_PER_INCH = 2.54
LOCATION_FALLBACK = "Location TBA"


def _to_number(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return number if math.isfinite(number) else 0


def parse_dob(dob: Any) -> Optional[date]:
    """Parse an ISO date or datetime; None if missing or malformed."""
    if isinstance(dob, datetime):
        return dob.date()
    if isinstance(dob, date):
        return dob
    if not isinstance(dob, str) or not dob.strip():
        return None
    try:
        return date.fromisoformat(dob.strip()[:10])
    except ValueError:
        return None


def compute_age(dob: Any, today: Optional[date] = None) -> int:
    """Whole years since ``dob``; 0 when dob is missing or unparseable."""
    birth = parse_dob(dob)
    if birth is None:
        return 0
    today = today or date.today()
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return max(age, 0)


def height_to_cm(feet: Any, inches: Any) -> int:
    """Round feet+inches to whole centimeters."""
    return int(round(_to_number(feet) * CM_PER_FOOT + _to_number(inches) * CM_PER_INCH))


def height_label(feet: Any, inches: Any) -> str:
    feet_n = int(_to_number(feet))
    inches_n = int(_to_number(inches))
    if not feet_n and not inches_n:
        return "N/A"
    return f"{feet_n}'{inches_n}\""


def gender_label(gender: Any) -> GenderLabel:
    value = str(gender or "").strip().lower()
    if value == "male":
        return "Male"
    if value == "female":
        return "Female"
    return "Other"


def derive_category(age: int, gender: GenderLabel) -> Optional[TalentCategory]:
    """Kids below the age limit, else Male/Female; adult Other has none."""
    if age < KIDS_AGE_LIMIT:
        return TalentCategory.KIDS
    if gender == "Male":
        return TalentCategory.MALE
    if gender == "Female":
        return TalentCategory.FEMALE
    return None


def compose_location(city: Any, state: Any, country: Any) -> str:
    parts = [str(part).strip() for part in (city, state, country) if part and str(part).strip()]
    return ", ".join(parts) or LOCATION_FALLBACK


def _first_instagram_handle(instagram: Any) -> Optional[str]:
    if not isinstance(instagram, list) or not instagram:
        return None
    first = instagram[0]
    handle = first.get("handle") if isinstance(first, dict) else getattr(first, "handle", None)
    return str(handle) if handle else None


def profile_to_talent(
    profile: Union[Profile, dict],
    image: str = "",
    today: Optional[date] = None,
) -> Talent:
    """Build the directory view-model for one profile."""
    row = profile.model_dump(mode="json") if isinstance(profile, Profile) else dict(profile or {})

    age = compute_age(row.get("dob"), today)
    gender = gender_label(row.get("gender"))
    feet = row.get("height_feet")
    inches = row.get("height_inches")
    size = row.get("size")

    return Talent(
        id=str(row.get("id") or ""),
        name=str(row.get("full_name") or ""),
        category=derive_category(age, gender),
        image=image or "",
        height=height_label(feet, inches),
        size=str(size) if size else "N/A",
        location=compose_location(row.get("city"), row.get("state"), row.get("country")),
        age=age,
        gender=gender,
        height_cm=height_to_cm(feet, inches),
        instagram_handle=_first_instagram_handle(row.get("instagram")),
        portfolio_url=str(row["portfolio_folder_link"]) if row.get("portfolio_folder_link") else None,
    )
