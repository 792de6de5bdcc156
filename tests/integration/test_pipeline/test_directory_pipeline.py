"""End-to-end tests: Supabase rows and media endpoint to the directory."""

import pytest
import httpx
from unittest.mock import patch
from freezegun import freeze_time
from src.models.talent import AdvancedFilters
from src.services.admin_board import ProfileBoard
from src.services.profiles import load_or_start_profile, save_model_profile
from src.services.talent_directory import load_talents, load_thumbnails
from src.services.talent_filters import filter_talents
from tests.fixtures.profiles import directory_profile_rows, media_payloads
from tests.utils.assertions import assert_valid_talent
from tests.utils.helpers import make_query, make_rpc, mock_http_client


def media_endpoint(request: httpx.Request) -> httpx.Response:
    payload = media_payloads().get(request.url.params["model_id"])
    if payload is None:
        return httpx.Response(404)
    return httpx.Response(200, json=payload)


@pytest.mark.integration
@pytest.mark.asyncio
@freeze_time("2025-03-10 12:00:00")
async def test_directory_from_rows_to_filtered_cards(patch_supabase):
    """Test rows are mapped, thumbnailed and filtered."""
    patch_supabase.table.return_value = make_query(directory_profile_rows())

    with patch("src.services.media_api._client", side_effect=lambda: mock_http_client(media_endpoint)):
        talents = await load_thumbnails(await load_talents())

    assert [t.id for t in talents] == ["p-arjun", "p-kabir", "p-meera"]
    for talent in talents:
        assert_valid_talent(talent)

    arjun, kabir, meera = talents
    assert (arjun.age, arjun.category.value, arjun.height_cm) == (21, "Male", 180)
    assert arjun.location == "Mumbai, Maharashtra, India"
    assert arjun.image.startswith("https://cdn.test/media/p-arjun/profile.jpg?v=")
    assert kabir.image == ""
    assert (kabir.age, kabir.height_cm) == (16, 188)
    assert meera.category.value == "Kids"
    assert meera.image.startswith("https://cdn.test/media/p-meera/profile.jpg?v=")

    tall_men = filter_talents(talents, "Male", advanced_active=True, filters=AdvancedFilters(min_height=185))
    assert [t.id for t in tall_men] == ["p-kabir"]
    assert [t.id for t in filter_talents(talents, "Kids")] == ["p-meera"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_model_entry_then_publish(patch_supabase):
    """Test a new model is coded, saved, then approved from the admin board."""
    patch_supabase.rpc = make_rpc(error=Exception("function next_model_code does not exist"))
    patch_supabase.table.return_value = make_query([{"model_code": "M-1000005"}])
    profile, existed = await load_or_start_profile(None)
    assert existed is False
    assert profile["model_code"] == "M-1000006"

    profile.update(full_name="Rohan Das", email="rohan@example.com")
    saved_row = {**profile, "id": "p-rohan"}
    patch_supabase.table.return_value = make_query([saved_row])
    saved = await save_model_profile(profile)
    assert saved["status"] == "UNDER_REVIEW"

    board = ProfileBoard([saved])
    update = make_query([{**saved_row, "status": "ONLINE"}])
    patch_supabase.table.return_value = update
    notice = await board.change_status("p-rohan", "ONLINE")

    assert notice.ok
    assert board.rows[0]["status"] == "ONLINE"
    update.update.assert_called_once_with({"status": "ONLINE"})
