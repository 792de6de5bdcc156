"""Google Drive share-link helpers for portfolio folders and images."""

import re
from typing import Optional
from urllib.parse import urlparse, parse_qs

_ID_IN_TEXT = re.compile(r"(?:file/d/|id=)([a-zA-Z0-9_-]{10,})")


def extract_drive_file_id(url: str) -> Optional[str]:
    """File ID from a Drive share URL.

    Handles /file/d/<id>/view, uc?id=, open?id= and thumbnail?id= forms, and
    falls back to scanning pasted text.
    """
    if not url:
        return None
    parsed = urlparse(url.strip())
    if parsed.scheme and parsed.netloc:
        parts = [part for part in parsed.path.split("/") if part]
        if len(parts) >= 3 and parts[0] == "file" and parts[1] == "d":
            return parts[2]
        ids = parse_qs(parsed.query).get("id")
        if ids and ids[0]:
            return ids[0]
    match = _ID_IN_TEXT.search(url)
    return match.group(1) if match else None


def normalize_drive_image_link(url: str) -> Optional[str]:
    """Direct image URL for a Drive share link, or None if unrecognised."""
    file_id = extract_drive_file_id(url)
    if not file_id:
        return None
    return f"https://drive.google.com/uc?export=view&id={file_id}"


def build_drive_image_urls(url: str) -> list[str]:
    """Candidate image URLs to try in order."""
    file_id = extract_drive_file_id(url)
    if not file_id:
        return []
    return [
        f"https://drive.google.com/uc?export=view&id={file_id}",
        f"https://drive.google.com/thumbnail?id={file_id}&sz=w2000",
        f"https://drive.google.com/uc?export=download&id={file_id}",
        f"https://lh3.googleusercontent.com/d/{file_id}=s2000",
        f"https://drive.googleusercontent.com/uc?id={file_id}&export=view",
        f"https://lh3.googleusercontent.com/u/0/d/{file_id}=s2000",
    ]
