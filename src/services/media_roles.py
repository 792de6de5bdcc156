"""Classify media records into profile slots by role."""

from typing import Iterable, Optional, Union

from src.models.media import MediaItem, MediaRole, DerivedMedia, DerivedProfileMedia


def _sort_key(item: MediaItem) -> int:
    return item.sort_order or 0


def _first_with_role(items: list[MediaItem], role: MediaRole) -> Optional[MediaItem]:
    # First match in received order; duplicates are not resolved by recency.
    return next((item for item in items if item.media_role == role), None)


def filter_media_by_role(items: Iterable[MediaItem], role: Union[MediaRole, str]) -> list[MediaItem]:
    """Items with ``role``, stable-sorted by sort_order ascending."""
    role = MediaRole(role)
    return sorted((item for item in items if item.media_role == role), key=_sort_key)


def derive_media(items: Iterable[MediaItem]) -> DerivedMedia:
    """Pick the profile image, intro video and ordered portfolio."""
    items = list(items)
    return DerivedMedia(
        profile_image=_first_with_role(items, MediaRole.PROFILE),
        intro_video=_first_with_role(items, MediaRole.INTRO_VIDEO),
        portfolio=filter_media_by_role(items, MediaRole.PORTFOLIO),
    )


def derive_profile_media(items: Iterable[MediaItem]) -> DerivedProfileMedia:
    """Profile page variant of derive_media that also returns portfolio videos."""
    items = list(items)
    base = derive_media(items)
    return DerivedProfileMedia(
        profile_image=base.profile_image,
        intro_video=base.intro_video,
        portfolio=base.portfolio,
        portfolio_videos=filter_media_by_role(items, MediaRole.PORTFOLIO_VIDEO),
    )
