"""Upload queue for one media slot (profile image, portfolio, intro video)."""

from dataclasses import dataclass
from typing import Iterable, Optional

from src.models.media import MediaRole, MediaType
from src.services.media_api import upload_file, delete_media
from src.services.session import Session
from src.utils.errors import MediaUploadError, MediaValidationError
from src.utils.logging import get_structured_logger
from src.utils.settings import MediaConfig

logger = get_structured_logger(__name__)

IMAGE_MIMES = ["image/jpeg", "image/png", "image/webp"]
VIDEO_MIMES = ["video/mp4", "video/quicktime", "video/webm"]


@dataclass
class LocalFile:
    """A file picked for upload."""
    name: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class UploadItem:
    file: LocalFile
    sort_order: int
    status: str = "idle"  # idle, uploading, done, error
    progress: int = 0
    uploaded_url: Optional[str] = None
    record_id: Optional[str] = None
    error: Optional[str] = None


def _mime_accepted(content_type: str, accept_mimes: Iterable[str]) -> bool:
    for mime in accept_mimes:
        if mime.endswith("/*"):
            if content_type.startswith(mime[:-1]):
                return True
        elif content_type == mime:
            return True
    return False


def validate_file(file: LocalFile, accept_mimes: Iterable[str], max_size_mb: float) -> Optional[str]:
    """Rejection message for ``file``, or None if it may be uploaded."""
    if not _mime_accepted(file.content_type, accept_mimes):
        return f"Invalid file type: {file.content_type}"
    if file.size > max_size_mb * 1024 * 1024:
        return f"File too large. Max {max_size_mb:g}MB"
    return None


class MediaUploadQueue:
    """Files queued for one media role, uploaded one at a time."""

    def __init__(
        self,
        model_id: str,
        media_role: MediaRole,
        media_type: MediaType,
        multiple: bool = False,
        max_files: Optional[int] = None,
        max_size_mb: Optional[float] = None,
        accept_mimes: Optional[list[str]] = None,
    ):
        self.model_id = model_id
        self.media_role = MediaRole(media_role)
        self.media_type = MediaType(media_type)
        self.multiple = multiple
        self.max_files = max_files
        if max_size_mb is None:
            max_size_mb = MediaConfig.max_video_mb() if self.media_type == MediaType.VIDEO else MediaConfig.max_image_mb()
        self.max_size_mb = max_size_mb
        if accept_mimes is None:
            accept_mimes = VIDEO_MIMES if self.media_type == MediaType.VIDEO else IMAGE_MIMES
        self.accept_mimes = accept_mimes
        self.items: list[UploadItem] = []

    @property
    def remaining_slots(self) -> float:
        limit = (self.max_files if self.max_files is not None else float("inf")) if self.multiple else 1
        return limit - len(self.items)

    def validate(self, file: LocalFile) -> Optional[str]:
        return validate_file(file, self.accept_mimes, self.max_size_mb)

    def check(self, file: LocalFile) -> None:
        """Raise MediaValidationError if ``file`` would be rejected."""
        error = self.validate(file)
        if error:
            raise MediaValidationError(error)

    def _renumber(self) -> None:
        for index, item in enumerate(self.items):
            item.sort_order = index

    def add_files(self, files: Iterable[LocalFile]) -> list[UploadItem]:
        """Queue files; rejected files are kept with an error status."""
        files = list(files)
        if not self.multiple:
            files = files[:1]

        added: list[UploadItem] = []
        for file in files:
            if self.remaining_slots <= len(added):
                break
            error = self.validate(file)
            item = UploadItem(
                file=file,
                sort_order=len(self.items) + len(added),
                status="error" if error else "idle",
                error=error,
            )
            if error:
                logger.warning("Rejected media file", file_name=file.name, reason=error)
            added.append(item)
        self.items.extend(added)
        return added

    def remove_at(self, index: int) -> None:
        del self.items[index]
        self._renumber()

    def replace_at(self, index: int, file: LocalFile) -> UploadItem:
        error = self.validate(file)
        old = self.items[index]
        item = UploadItem(
            file=file,
            sort_order=old.sort_order,
            status="error" if error else "idle",
            error=error,
            record_id=old.record_id,
        )
        self.items[index] = item
        return item

    def move(self, from_index: int, to_index: int) -> None:
        item = self.items.pop(from_index)
        self.items.insert(to_index, item)
        self._renumber()

    async def delete_at(self, index: int, session: Session) -> None:
        """Remove an item, deleting its server record when one exists."""
        if index >= len(self.items):
            return
        target = self.items[index]
        if target.record_id:
            await delete_media(target.record_id, session.require_token())
        self.remove_at(index)

    async def upload_one(self, index: int, session: Session) -> UploadItem:
        item = self.items[index]
        error = self.validate(item.file)
        if error:
            item.status = "error"
            item.error = error
            raise MediaValidationError(error)

        token = session.require_token()
        item.status = "uploading"
        item.progress = 0
        item.error = None

        def on_progress(pct: int) -> None:
            item.progress = pct

        try:
            response = await upload_file(
                item.file.content,
                item.file.name,
                item.file.content_type,
                token=token,
                media_role=self.media_role,
                model_id=self.model_id,
                on_progress=on_progress,
            )
        except MediaUploadError as e:
            item.status = "error"
            item.error = str(e) or "Upload failed"
            logger.error("Media upload failed", file_name=item.file.name, error=item.error)
            raise

        item.uploaded_url = response["media_url"]
        item.record_id = response.get("id")
        item.status = "done"
        item.progress = 100
        return item

    async def upload_all(self, session: Session) -> list[UploadItem]:
        """Upload pending items in order, awaiting each before the next."""
        for index, item in enumerate(self.items):
            if item.status == "done":
                continue
            await self.upload_one(index, session)
        return self.items
