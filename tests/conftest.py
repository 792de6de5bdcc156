"""Shared pytest fixtures and configuration."""

import os
import pytest
from unittest.mock import MagicMock, patch
from freezegun import freeze_time

from tests.utils.helpers import make_query

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")
os.environ.setdefault("UPLOAD_API_URL", "https://media.test")
os.environ.setdefault("MEDIA_BASE_URL", "https://cdn.test/media")


@pytest.fixture
def mock_supabase_client():
    """Mock Supabase client; each table returns the same chainable query."""
    client = MagicMock()
    client.query = make_query([])
    client.table.return_value = client.query
    return client


@pytest.fixture
def patch_supabase(mock_supabase_client):
    """Route every SupabaseClient context to the mock client."""
    with patch("src.services.supabase_client.get_supabase_client", return_value=mock_supabase_client):
        yield mock_supabase_client


@pytest.fixture
def sample_profile_row():
    """Raw model_profiles row as returned by Supabase."""
    return {
        "id": "4f1c2b7e-0000-4000-8000-000000000001",
        "user_id": "9a8b7c6d-0000-4000-8000-000000000001",
        "model_code": "M-1000001",
        "full_name": "Aisha Kapoor",
        "dob": "2000-06-15",
        "gender": "female",
        "phone": "+91 98765 43210",
        "email": "aisha@example.com",
        "country": "India",
        "state": "Maharashtra",
        "city": "Mumbai",
        "category": "model",
        "instagram": [{"handle": "@aisha.k", "followers": "20k_50k"}],
        "height_feet": 5,
        "height_inches": 7,
        "size": "S",
        "portfolio_folder_link": "https://drive.google.com/drive/folders/abc",
        "status": "ONLINE",
    }


@pytest.fixture
def sample_media_rows():
    """Raw media records for one model, unordered."""
    return [
        {"id": "m1", "model_id": "p1", "media_type": "image", "media_role": "portfolio",
         "media_url": "/media/p1/b.jpg", "sort_order": 2, "updated_at": "2025-01-02T00:00:00Z"},
        {"id": "m2", "model_id": "p1", "media_type": "image", "media_role": "profile",
         "media_url": "https://cdn.test/media/p1/cover.jpg", "sort_order": 0, "updated_at": "2025-01-01T00:00:00Z"},
        {"id": "m3", "model_id": "p1", "media_type": "image", "media_role": "portfolio",
         "media_url": "media/p1/a.jpg", "sort_order": 0, "updated_at": None},
        {"id": "m4", "model_id": "p1", "media_type": "video", "media_role": "intro_video",
         "media_url": "p1/intro.mp4", "sort_order": 0, "updated_at": "2025-01-03T00:00:00Z"},
        {"id": "m5", "model_id": "p1", "media_type": "image", "media_role": "portfolio",
         "media_url": "p1/c.jpg", "sort_order": 1, "updated_at": "2025-01-04T00:00:00Z"},
    ]


@pytest.fixture
def freeze_time_fixture():
    """Fixture for freezing time in tests."""
    with freeze_time("2025-03-10 12:00:00") as frozen_time:
        yield frozen_time


@pytest.fixture
def authenticated_session():
    """Signed-in client session."""
    from src.services.session import Session

    session = Session()
    session.begin_login()
    session.complete_login("client-user-1", "test-token", role="client")
    return session
