"""Supabase client wrapper with async context manager support."""

import os
from typing import Optional
from supabase import create_client, Client
from supabase.client import ClientOptions
from src.models.casting import CastingUiStatus, casting_status_from_ui
from src.utils.errors import SupabaseError
import logging

logger = logging.getLogger(__name__)

PROFILE_TABLE = "model_profiles"
BRAND_TABLE = "brand_profiles"
CASTING_TABLE = "castings"
APPLICATION_TABLE = "casting_applications"
BOOKING_TABLE = "booking_requests"

# Global client instance (singleton pattern)
_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """Get or create Supabase client singleton."""
    global _client

    if _client is None:
        url = os.environ.get("SUPABASE_URL")
        key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

        if not url or not key:
            raise SupabaseError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        options = ClientOptions(
            auto_refresh_token=False,
            persist_session=False,
        )

        _client = create_client(url, key, options)
        logger.info("Supabase client initialized", extra={"url": url})

    return _client


class SupabaseClient:
    """Async context manager for Supabase client."""

    def __init__(self):
        self.client: Optional[Client] = None

    async def __aenter__(self) -> Client:
        self.client = get_supabase_client()
        return self.client

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            logger.error(
                "Supabase operation error",
                extra={"error": str(exc_val), "type": exc_type.__name__}
            )
        return False


def _first(result) -> Optional[dict]:
    return result.data[0] if result.data and len(result.data) > 0 else None


# Profile operations (model_profiles table)
async def get_profile_by_user_id(user_id: str) -> Optional[dict]:
    """Get a profile by auth user ID."""
    async with SupabaseClient() as client:
        try:
            result = client.table(PROFILE_TABLE).select("*").eq("user_id", user_id).limit(1).execute()
            return _first(result)
        except Exception as e:
            raise SupabaseError(f"Failed to get profile by user_id: {e}")


async def get_profile_by_model_code(model_code: str) -> Optional[dict]:
    """Get a profile by its model code."""
    async with SupabaseClient() as client:
        try:
            result = client.table(PROFILE_TABLE).select("*").eq("model_code", model_code).limit(1).execute()
            return _first(result)
        except Exception as e:
            raise SupabaseError(f"Failed to get profile by model_code: {e}")


async def upsert_profile(profile_data: dict) -> dict:
    """Insert or update a profile keyed on model_code."""
    async with SupabaseClient() as client:
        try:
            result = client.table(PROFILE_TABLE).upsert(profile_data, on_conflict="model_code").execute()
            row = _first(result)
            if row:
                return row
            raise SupabaseError("Failed to upsert profile: no data returned")
        except SupabaseError:
            raise
        except Exception as e:
            raise SupabaseError(f"Failed to upsert profile: {e}")


async def create_public_profile(profile_data: dict) -> dict:
    """Insert a self-submitted profile."""
    async with SupabaseClient() as client:
        try:
            result = client.table(PROFILE_TABLE).insert(profile_data).execute()
            row = _first(result)
            if row:
                return row
            raise SupabaseError("Failed to create profile: no data returned")
        except SupabaseError:
            raise
        except Exception as e:
            raise SupabaseError(f"Failed to create profile: {e}")


async def list_online_profiles() -> list[dict]:
    """Get all profiles visible in the public directory."""
    async with SupabaseClient() as client:
        try:
            result = client.table(PROFILE_TABLE).select("*").eq("status", "ONLINE").order("created_at", desc=True).execute()
            return result.data if result.data else []
        except Exception as e:
            raise SupabaseError(f"Failed to list online profiles: {e}")


async def list_all_profiles_admin() -> list[dict]:
    """Get every profile regardless of status."""
    async with SupabaseClient() as client:
        try:
            result = client.table(PROFILE_TABLE).select("*").order("created_at", desc=True).execute()
            return result.data if result.data else []
        except Exception as e:
            raise SupabaseError(f"Failed to list profiles: {e}")


async def update_profile_status(profile_id: str, status: str) -> dict:
    """Set a profile's moderation status."""
    async with SupabaseClient() as client:
        try:
            result = client.table(PROFILE_TABLE).update({"status": status}).eq("id", profile_id).execute()
            row = _first(result)
            if row:
                return row
            raise SupabaseError(f"Failed to update profile status: {profile_id}")
        except SupabaseError:
            raise
        except Exception as e:
            raise SupabaseError(f"Failed to update profile status: {e}")


# Brand profiles
async def get_brand_profile_by_user_id(user_id: str) -> Optional[dict]:
    """Get the brand profile owned by a client user."""
    async with SupabaseClient() as client:
        try:
            result = client.table(BRAND_TABLE).select("*").eq("user_id", user_id).limit(1).execute()
            return _first(result)
        except Exception as e:
            raise SupabaseError(f"Failed to get brand profile: {e}")


# Castings
async def list_all_castings_admin() -> list[dict]:
    """Get every casting, newest first."""
    async with SupabaseClient() as client:
        try:
            result = client.table(CASTING_TABLE).select("*").order("created_at", desc=True).execute()
            return result.data if result.data else []
        except Exception as e:
            raise SupabaseError(f"Failed to list castings: {e}")


async def update_casting_status(casting_id: str, status: CastingUiStatus) -> dict:
    """Set a casting's status from its admin UI value."""
    db_status = casting_status_from_ui(status)
    async with SupabaseClient() as client:
        try:
            result = client.table(CASTING_TABLE).update({"status": db_status.value}).eq("id", casting_id).execute()
            row = _first(result)
            if row:
                return row
            raise SupabaseError(f"Failed to update casting status: {casting_id}")
        except SupabaseError:
            raise
        except Exception as e:
            raise SupabaseError(f"Failed to update casting status: {e}")


# Casting applications
async def list_all_casting_applications_admin() -> list[dict]:
    """Get every casting application, newest first."""
    async with SupabaseClient() as client:
        try:
            result = client.table(APPLICATION_TABLE).select("*").order("created_at", desc=True).execute()
            return result.data if result.data else []
        except Exception as e:
            raise SupabaseError(f"Failed to list casting applications: {e}")


async def update_casting_application_status(application_id: str, status: str) -> dict:
    """Set a casting application's status."""
    async with SupabaseClient() as client:
        try:
            result = client.table(APPLICATION_TABLE).update({"status": status}).eq("id", application_id).execute()
            row = _first(result)
            if row:
                return row
            raise SupabaseError(f"Failed to update application status: {application_id}")
        except SupabaseError:
            raise
        except Exception as e:
            raise SupabaseError(f"Failed to update application status: {e}")


# Booking requests
async def create_booking_request(booking_data: dict) -> dict:
    """Create a booking request from a client to a model."""
    async with SupabaseClient() as client:
        try:
            result = client.table(BOOKING_TABLE).insert(booking_data).execute()
            row = _first(result)
            if row:
                return row
            raise SupabaseError("Failed to create booking request: no data returned")
        except SupabaseError:
            raise
        except Exception as e:
            raise SupabaseError(f"Failed to create booking request: {e}")


async def list_all_booking_requests_admin() -> list[dict]:
    """Get every booking request, newest first."""
    async with SupabaseClient() as client:
        try:
            result = client.table(BOOKING_TABLE).select("*").order("created_at", desc=True).execute()
            return result.data if result.data else []
        except Exception as e:
            raise SupabaseError(f"Failed to list booking requests: {e}")


async def update_booking_status(booking_id: str, status: str) -> dict:
    """Set a booking request's status."""
    async with SupabaseClient() as client:
        try:
            result = client.table(BOOKING_TABLE).update({"status": status}).eq("id", booking_id).execute()
            row = _first(result)
            if row:
                return row
            raise SupabaseError(f"Failed to update booking status: {booking_id}")
        except SupabaseError:
            raise
        except Exception as e:
            raise SupabaseError(f"Failed to update booking status: {e}")
