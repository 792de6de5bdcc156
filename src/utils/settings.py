"""Media endpoint and site configuration read from the environment."""

import os
from typing import Optional


class MediaConfig:
    """Media endpoint configuration.

    Values are read on every call so tests and serverless cold starts pick up
    the current environment.
    """

    DEFAULT_MAX_IMAGE_MB = 5
    DEFAULT_MAX_VIDEO_MB = 20

    @classmethod
    def upload_api_url(cls) -> str:
        return os.environ.get("UPLOAD_API_URL", "").strip().rstrip("/")

    @classmethod
    def media_base_url(cls) -> str:
        """Base for relative media URLs, falling back to the upload API."""
        base = os.environ.get("MEDIA_BASE_URL", "").strip() or cls.upload_api_url()
        return base.rstrip("/")

    @classmethod
    def max_image_mb(cls) -> float:
        return float(os.environ.get("MEDIA_MAX_IMAGE_MB", cls.DEFAULT_MAX_IMAGE_MB))

    @classmethod
    def max_video_mb(cls) -> float:
        return float(os.environ.get("MEDIA_MAX_VIDEO_MB", cls.DEFAULT_MAX_VIDEO_MB))

    @classmethod
    def request_timeout(cls) -> Optional[float]:
        """Timeout for media requests in seconds; 0 disables it."""
        value = float(os.environ.get("MEDIA_REQUEST_TIMEOUT_SECONDS", "60"))
        return value if value > 0 else None


# 1 = view shown in navigation, 0 = hidden
SITE_VIEWS: dict[str, int] = {
    "home": 1,
    "services": 1,
    "talents": 1,
    "gallery": 0,
    "castings": 0,
    "auth": 1,
    "profile": 1,
}


def is_view_enabled(view: str) -> bool:
    """Return True when the named view is switched on."""
    return SITE_VIEWS.get(view, 0) == 1


def enabled_views() -> list[str]:
    """Enabled views in navigation order."""
    return [view for view, flag in SITE_VIEWS.items() if flag == 1]
