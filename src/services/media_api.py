"""HTTP client for the media endpoint (/upload, /media)."""

import io
import json
from typing import Callable, Optional

import httpx

from src.models.media import MediaItem, MediaRole
from src.services.media_normalizer import normalize_media_records
from src.utils.errors import ConfigurationError, MediaUploadError
from src.utils.logging import get_structured_logger, log_timing, mask_sensitive_data
from src.utils.settings import MediaConfig

logger = get_structured_logger(__name__)

ProgressCallback = Callable[[int], None]


class _ProgressReader(io.BytesIO):
    """File object that reports read progress as a 0-100 percentage."""

    def __init__(self, data: bytes, on_progress: Optional[ProgressCallback]):
        super().__init__(data)
        self._total = len(data)
        self._on_progress = on_progress
        self._last_pct = -1

    def read(self, size: Optional[int] = -1) -> bytes:
        chunk = super().read(size)
        if self._on_progress:
            pct = round(self.tell() / self._total * 100) if self._total else 100
            if pct != self._last_pct:
                self._last_pct = pct
                self._on_progress(pct)
        return chunk


def _api_base() -> str:
    base = MediaConfig.upload_api_url()
    if not base:
        raise ConfigurationError("UPLOAD_API_URL missing")
    return base


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=MediaConfig.request_timeout())


def _auth_headers(token: Optional[str]) -> dict:
    return {"Authorization": f"Bearer {token}"} if token else {}


async def upload_file(
    content: bytes,
    filename: str,
    content_type: str,
    token: str,
    media_role: MediaRole,
    model_id: Optional[str] = None,
    on_progress: Optional[ProgressCallback] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> dict:
    """Upload one file; the endpoint writes the media record itself.

    Returns the endpoint's JSON, which carries ``media_url``.
    """
    base = _api_base()
    if not token:
        raise MediaUploadError("Missing auth token")

    form = {"media_role": MediaRole(media_role).value}
    if model_id:
        form["model_id"] = model_id
    files = {"file": (filename, _ProgressReader(content, on_progress), content_type)}

    owns_client = client is None
    client = client or _client()
    try:
        with log_timing("media_upload", logger=logger, media_role=form["media_role"], size_bytes=len(content)):
            try:
                response = await client.post(
                    f"{base}/upload",
                    data=form,
                    files=files,
                    headers=_auth_headers(token),
                )
            except httpx.HTTPError as e:
                raise MediaUploadError(f"Network error during upload: {e}")
    finally:
        if owns_client:
            await client.aclose()

    if not response.is_success:
        logger.warning(
            "Media upload rejected",
            status_code=response.status_code,
            body=mask_sensitive_data(response.text[:200]),
        )
        raise MediaUploadError(
            response.text or f"Upload failed with {response.status_code}",
            status_code=response.status_code,
        )
    try:
        payload = response.json()
    except ValueError:
        raise MediaUploadError("Invalid upload response", status_code=response.status_code)
    if not isinstance(payload, dict) or not payload.get("media_url"):
        raise MediaUploadError("Invalid upload response", status_code=response.status_code)
    return payload


def _extract_records(payload) -> list[dict]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("records", "data"):
            if isinstance(payload.get(key), list):
                return payload[key]
    return []


async def fetch_media_for_model(
    model_id: str,
    token: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> list[dict]:
    """Raw media records for a model; any failure yields an empty list."""
    owns_client = client is None
    try:
        base = _api_base()
        client = client or _client()
        response = await client.get(
            f"{base}/media",
            params={"model_id": model_id},
            headers=_auth_headers(token),
        )
        if not response.is_success:
            logger.warning(
                "Failed to fetch media",
                model_id=model_id,
                status_code=response.status_code,
            )
            return []
        records = _extract_records(response.json())
        logger.debug("Fetched media records", model_id=model_id, count=len(records))
        return records
    except Exception as e:
        logger.error("Error fetching media", model_id=model_id, error=str(e))
        return []
    finally:
        if owns_client and client is not None:
            await client.aclose()


async def fetch_media_records(
    model_id: str,
    token: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> list[MediaItem]:
    """Fetch a model's media and normalize URLs."""
    records = await fetch_media_for_model(model_id, token, client=client)
    return normalize_media_records(records)


async def delete_media(
    media_id: str,
    token: str,
    client: Optional[httpx.AsyncClient] = None,
) -> dict:
    """Delete one media record. Empty or non-JSON bodies count as success."""
    base = _api_base()
    owns_client = client is None
    client = client or _client()
    try:
        response = await client.delete(
            f"{base}/media",
            params={"id": media_id},
            headers=_auth_headers(token),
        )
    except httpx.HTTPError as e:
        raise MediaUploadError(f"Network error during delete: {e}")
    finally:
        if owns_client:
            await client.aclose()

    if not response.is_success:
        raise MediaUploadError(
            response.text or f"Delete failed with {response.status_code}",
            status_code=response.status_code,
        )
    if not response.text:
        return {"ok": True}
    try:
        return json.loads(response.text)
    except ValueError:
        return {"ok": True}
