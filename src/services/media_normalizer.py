"""Turn raw media records into absolute, cache-busted URLs."""

import re
import time
from typing import Optional

from src.models.media import MediaItem
from src.utils.settings import MediaConfig

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


def add_cache_buster(url: str, timestamp: Optional[str] = None, media_id: Optional[str] = None) -> str:
    """Append a ``v=`` query parameter so browsers refetch changed media.

    The token is the record's ``updated_at``, else its id, else the current
    time in milliseconds.
    """
    if not url:
        return url
    param = timestamp or media_id or str(int(time.time() * 1000))
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}v={param}"


def to_absolute_media_url(url: str, base: Optional[str] = None) -> str:
    """Resolve a possibly-relative media URL against the media base."""
    if not url:
        return url
    if _ABSOLUTE_URL.match(url):
        return url

    base = (MediaConfig.media_base_url() if base is None else base).rstrip("/")
    if not base:
        return url

    trimmed = url.strip()
    without_leading_slash = trimmed.lstrip("/")

    # base ".../media" + path "media/x" must not become ".../media/media/x"
    if base.lower().endswith("/media") and without_leading_slash.lower().startswith("media/"):
        return f"{base}/{without_leading_slash[len('media/'):]}"

    return f"{base}/{without_leading_slash}"


def normalize_media_record(record: dict, base: Optional[str] = None) -> MediaItem:
    """Build a MediaItem with an absolute, cache-busted URL."""
    url = to_absolute_media_url(record.get("media_url") or "", base)
    return MediaItem(
        id=str(record["id"]),
        model_id=str(record["model_id"]),
        media_type=record["media_type"],
        media_role=record["media_role"],
        media_url=add_cache_buster(url, record.get("updated_at"), str(record["id"])),
        sort_order=record.get("sort_order"),
        created_at=record.get("created_at"),
        updated_at=record.get("updated_at"),
    )


def normalize_media_records(records: list[dict], base: Optional[str] = None) -> list[MediaItem]:
    """Normalize every record, preserving input order."""
    return [normalize_media_record(record, base) for record in records]
