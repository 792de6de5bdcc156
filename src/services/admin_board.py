"""Admin moderation boards with optimistic status changes.

A status change is applied to the local rows first, then persisted. When the
backend call fails the local change is reverted and an error notice returned.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Mapping, Optional

from src.models.casting import (
    CastingUiStatus,
    ApplicationStatus,
    BookingStatus,
    CastingStatus,
    CASTING_STATUS_LABELS,
    casting_status_to_ui,
    casting_status_from_ui,
)
from src.models.profile import ProfileStatus, PROFILE_STATUS_LABELS
from src.models.transitions import (
    PROFILE_TRANSITIONS,
    CASTING_TRANSITIONS,
    APPLICATION_TRANSITIONS,
    BOOKING_TRANSITIONS,
    check_transition,
)
from src.services import supabase_client as db
from src.utils.errors import ElgraceError, InvalidStatusTransitionError
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


@dataclass
class Notice:
    """Transient message shown to the admin after an action."""
    message: str
    level: str = "success"  # success, error, info

    @property
    def ok(self) -> bool:
        return self.level != "error"


class OptimisticPatch:
    """A local row change that can be undone."""

    def __init__(self, rows: list[dict], index: int, changes: dict):
        self.rows = rows
        self.index = index
        self.changes = changes
        self._previous: Optional[dict] = None

    def apply(self) -> None:
        self._previous = self.rows[self.index]
        self.rows[self.index] = {**self._previous, **self.changes}

    def revert(self) -> None:
        if self._previous is not None:
            self.rows[self.index] = self._previous

    def commit(self, server_row: Optional[dict]) -> None:
        """Reconcile with the row the backend returned."""
        if server_row:
            self.rows[self.index] = {**self.rows[self.index], **server_row}


class StatusBoard:
    """Rows of one table plus status-change handling."""

    entity = "record"
    transitions: Mapping[Enum, frozenset] = {}
    default_status: Optional[Enum] = None

    def __init__(self, rows: Optional[list[dict]] = None):
        self.rows: list[dict] = list(rows or [])

    async def _fetch(self) -> list[dict]:
        raise NotImplementedError

    async def _persist(self, row_id: str, target: Enum) -> dict:
        raise NotImplementedError

    def _db_status(self, target: Enum) -> Enum:
        return target

    def _label(self, target: Enum) -> str:
        return target.value

    def _current(self, row: dict) -> str:
        return row.get("status") or self.default_status.value

    async def refresh(self) -> Notice:
        try:
            self.rows = await self._fetch()
        except ElgraceError as e:
            logger.error(f"Failed to load {self.entity}s", error=str(e))
            return Notice(f"Failed to load {self.entity}s", "error")
        return Notice(f"Loaded {len(self.rows)} {self.entity}s", "info")

    def _index_of(self, row_id: str) -> Optional[int]:
        return next((i for i, row in enumerate(self.rows) if row.get("id") == row_id), None)

    async def change_status(self, row_id: str, target) -> Notice:
        index = self._index_of(row_id)
        if index is None:
            return Notice(f"Unknown {self.entity}: {row_id}", "error")

        db_target = self._db_status(target)
        current = self._current(self.rows[index])
        try:
            check_transition(self.entity, self.transitions, current, db_target)
        except InvalidStatusTransitionError as e:
            logger.warning("Rejected status transition", entity=self.entity, row_id=row_id, error=str(e))
            return Notice(str(e), "error")

        patch = OptimisticPatch(self.rows, index, {"status": db_target.value})
        patch.apply()
        try:
            server_row = await self._persist(row_id, target)
        except ElgraceError as e:
            patch.revert()
            logger.error(
                f"Failed to update {self.entity} status",
                row_id=row_id,
                target=db_target.value,
                error=str(e),
            )
            return Notice(f"Failed to update {self.entity} status", "error")

        patch.commit(server_row)
        logger.info(f"{self.entity.capitalize()} status updated", row_id=row_id, status=db_target.value)
        return Notice(f"{self.entity.capitalize()} set to {self._label(target)}")


class ProfileBoard(StatusBoard):
    entity = "profile"
    transitions = PROFILE_TRANSITIONS
    default_status = ProfileStatus.UNDER_REVIEW

    async def _fetch(self) -> list[dict]:
        return await db.list_all_profiles_admin()

    async def change_status(self, row_id: str, target) -> Notice:
        return await super().change_status(row_id, ProfileStatus(target))

    async def _persist(self, row_id: str, target: ProfileStatus) -> dict:
        return await db.update_profile_status(row_id, target.value)

    def _label(self, target: ProfileStatus) -> str:
        return PROFILE_STATUS_LABELS[target]


class CastingBoard(StatusBoard):
    """Castings keep db statuses in their rows; admins pick UI statuses."""
    entity = "casting"
    transitions = CASTING_TRANSITIONS
    default_status = CastingStatus.DRAFT

    async def _fetch(self) -> list[dict]:
        return await db.list_all_castings_admin()

    async def change_status(self, row_id: str, target) -> Notice:
        return await super().change_status(row_id, CastingUiStatus(target))

    def _db_status(self, target: CastingUiStatus) -> CastingStatus:
        return casting_status_from_ui(target)

    async def _persist(self, row_id: str, target: CastingUiStatus) -> dict:
        return await db.update_casting_status(row_id, target)

    def _label(self, target: CastingUiStatus) -> str:
        return CASTING_STATUS_LABELS[target]


class ApplicationBoard(StatusBoard):
    entity = "application"
    transitions = APPLICATION_TRANSITIONS
    default_status = ApplicationStatus.APPLIED

    async def _fetch(self) -> list[dict]:
        return await db.list_all_casting_applications_admin()

    async def change_status(self, row_id: str, target) -> Notice:
        return await super().change_status(row_id, ApplicationStatus(target))

    async def _persist(self, row_id: str, target: ApplicationStatus) -> dict:
        return await db.update_casting_application_status(row_id, target.value)


class BookingBoard(StatusBoard):
    entity = "booking"
    transitions = BOOKING_TRANSITIONS
    default_status = BookingStatus.PENDING

    async def _fetch(self) -> list[dict]:
        return await db.list_all_booking_requests_admin()

    async def change_status(self, row_id: str, target) -> Notice:
        return await super().change_status(row_id, BookingStatus(target))

    async def _persist(self, row_id: str, target: BookingStatus) -> dict:
        return await db.update_booking_status(row_id, target.value)


def pending_review(profiles: list[dict], castings: list[dict]) -> dict[str, list[dict]]:
    """Profiles under review and castings awaiting verification."""
    return {
        "profiles": [
            p for p in profiles
            if (p.get("status") or ProfileStatus.UNDER_REVIEW.value) == ProfileStatus.UNDER_REVIEW.value
        ],
        "castings": [
            c for c in castings
            if casting_status_to_ui(c.get("status")) == CastingUiStatus.UNDER_VERIFICATION
        ],
    }
