"""Tests for media URL normalization."""

import pytest
from freezegun import freeze_time
from src.services.media_normalizer import (
    add_cache_buster,
    to_absolute_media_url,
    normalize_media_records,
)

BASE = "https://cdn.test/media"


@pytest.mark.unit
def test_absolute_url_unchanged():
    """Test http(s) URLs are returned as-is."""
    assert to_absolute_media_url("https://other.test/a.jpg", BASE) == "https://other.test/a.jpg"
    assert to_absolute_media_url("HTTP://other.test/a.jpg", BASE) == "HTTP://other.test/a.jpg"


@pytest.mark.unit
def test_relative_url_prefixed():
    """Test relative paths are joined to the base with one slash."""
    assert to_absolute_media_url("p1/a.jpg", "https://api.test") == "https://api.test/p1/a.jpg"
    assert to_absolute_media_url("/uploads/a.jpg", "https://api.test/") == "https://api.test/uploads/a.jpg"


@pytest.mark.unit
def test_media_segment_not_duplicated():
    """Test base ending in /media absorbs a leading media/ segment."""
    assert to_absolute_media_url("media/p1/a.jpg", BASE) == "https://cdn.test/media/p1/a.jpg"
    assert to_absolute_media_url("/media/p1/a.jpg", BASE) == "https://cdn.test/media/p1/a.jpg"
    assert to_absolute_media_url("/Media/p1/a.jpg", BASE) == "https://cdn.test/media/p1/a.jpg"


@pytest.mark.unit
def test_empty_base_leaves_url():
    """Test no base configured means no rewrite."""
    assert to_absolute_media_url("p1/a.jpg", "") == "p1/a.jpg"
    assert to_absolute_media_url("", BASE) == ""


@pytest.mark.unit
def test_base_defaults_to_environment(monkeypatch):
    """Test MEDIA_BASE_URL then UPLOAD_API_URL is used as the base."""
    monkeypatch.setenv("MEDIA_BASE_URL", "https://env-cdn.test/")
    assert to_absolute_media_url("a.jpg") == "https://env-cdn.test/a.jpg"

    monkeypatch.setenv("MEDIA_BASE_URL", "")
    monkeypatch.setenv("UPLOAD_API_URL", "https://upload.test")
    assert to_absolute_media_url("a.jpg") == "https://upload.test/a.jpg"


@pytest.mark.unit
def test_cache_buster_prefers_timestamp():
    """Test the version token order: updated_at, then id."""
    assert add_cache_buster("https://x.test/a.jpg", "2025-01-01", "m1") == "https://x.test/a.jpg?v=2025-01-01"
    assert add_cache_buster("https://x.test/a.jpg", None, "m1") == "https://x.test/a.jpg?v=m1"
    assert add_cache_buster("https://x.test/a.jpg?w=200", "t", None) == "https://x.test/a.jpg?w=200&v=t"
    assert add_cache_buster("", "t", "m1") == ""


@pytest.mark.unit
@freeze_time("2025-03-10 12:00:00")
def test_cache_buster_falls_back_to_clock():
    """Test the current time in milliseconds is used as a last resort."""
    assert add_cache_buster("https://x.test/a.jpg") == "https://x.test/a.jpg?v=1741608000000"


@pytest.mark.unit
def test_normalize_media_records(sample_media_rows):
    """Test records become MediaItems with absolute cache-busted URLs, order kept."""
    items = normalize_media_records(sample_media_rows, base=BASE)

    assert [item.id for item in items] == ["m1", "m2", "m3", "m4", "m5"]
    assert items[0].media_url == "https://cdn.test/media/p1/b.jpg?v=2025-01-02T00:00:00Z"
    assert items[1].media_url == "https://cdn.test/media/p1/cover.jpg?v=2025-01-01T00:00:00Z"
    assert items[2].media_url == "https://cdn.test/media/p1/a.jpg?v=m3"
    assert items[3].media_url == "https://cdn.test/media/p1/intro.mp4?v=2025-01-03T00:00:00Z"
