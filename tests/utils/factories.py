"""Test data factories using Faker."""

from faker import Faker
from typing import Optional
from datetime import date

from src.models.talent import Talent

fake = Faker()


def dob_for_age(age: int, today: Optional[date] = None) -> str:
    """ISO date of birth for someone who turned ``age`` on Jan 1 this year."""
    today = today or date.today()
    return date(today.year - age, 1, 1).isoformat()


def create_profile_row(
    gender: str = "female",
    age: int = 25,
    height_feet: int = 5,
    height_inches: int = 6,
    city: Optional[str] = None,
    category: str = "model",
    status: str = "ONLINE",
) -> dict:
    """Create a raw model_profiles row."""
    return {
        "id": fake.uuid4(),
        "user_id": fake.uuid4(),
        "model_code": f"M-{fake.random_int(min=1000001, max=1999999)}",
        "full_name": fake.name(),
        "dob": dob_for_age(age),
        "gender": gender,
        "phone": fake.phone_number(),
        "email": fake.email(),
        "country": "India",
        "state": fake.state(),
        "city": city or fake.city(),
        "category": category,
        "instagram": [{"handle": f"@{fake.user_name()}", "followers": "5k_20k"}],
        "height_feet": height_feet,
        "height_inches": height_inches,
        "status": status,
    }


def create_talent(
    gender: str = "Female",
    age: int = 25,
    height_cm: int = 170,
    location: str = "Mumbai, Maharashtra, India",
) -> Talent:
    """Create a mapped Talent directly."""
    return Talent(
        id=fake.uuid4(),
        name=fake.name(),
        age=age,
        gender=gender,
        height_cm=height_cm,
        location=location,
    )


def create_media_row(model_id: str, role: str = "portfolio", sort_order: int = 0) -> dict:
    """Create a raw media record."""
    media_type = "video" if "video" in role else "image"
    return {
        "id": fake.uuid4(),
        "model_id": model_id,
        "media_type": media_type,
        "media_role": role,
        "media_url": f"/media/{model_id}/{fake.file_name(category=media_type)}",
        "sort_order": sort_order,
        "created_at": fake.iso8601(),
        "updated_at": fake.iso8601(),
    }
