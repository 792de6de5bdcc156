"""Allowed status transitions for moderated records.

Each table maps a current status to the set of statuses it may move to.
Setting a record to its current status is always accepted as a no-op.
"""

from enum import Enum
from typing import Mapping, Union

from src.models.profile import ProfileStatus
from src.models.casting import CastingStatus, ApplicationStatus, BookingStatus
from src.utils.errors import InvalidStatusTransitionError


PROFILE_TRANSITIONS: Mapping[ProfileStatus, frozenset] = {
    ProfileStatus.UNDER_REVIEW: frozenset({ProfileStatus.ONLINE, ProfileStatus.OFFLINE}),
    ProfileStatus.ONLINE: frozenset({ProfileStatus.OFFLINE, ProfileStatus.UNDER_REVIEW}),
    ProfileStatus.OFFLINE: frozenset({ProfileStatus.ONLINE, ProfileStatus.UNDER_REVIEW}),
}

CASTING_TRANSITIONS: Mapping[CastingStatus, frozenset] = {
    CastingStatus.DRAFT: frozenset({CastingStatus.UNDER_REVIEW, CastingStatus.OPEN, CastingStatus.CLOSED}),
    CastingStatus.UNDER_REVIEW: frozenset({CastingStatus.OPEN, CastingStatus.CLOSED}),
    CastingStatus.OPEN: frozenset({CastingStatus.UNDER_REVIEW, CastingStatus.CLOSED}),
    CastingStatus.CLOSED: frozenset({CastingStatus.OPEN}),
}

# rejected and cancelled are terminal
APPLICATION_TRANSITIONS: Mapping[ApplicationStatus, frozenset] = {
    ApplicationStatus.APPLIED: frozenset({
        ApplicationStatus.SHORTLISTED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.CANCELLED,
    }),
    ApplicationStatus.SHORTLISTED: frozenset({
        ApplicationStatus.BOOKED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.CANCELLED,
    }),
    ApplicationStatus.BOOKED: frozenset({ApplicationStatus.CANCELLED}),
    ApplicationStatus.REJECTED: frozenset(),
    ApplicationStatus.CANCELLED: frozenset(),
}

BOOKING_TRANSITIONS: Mapping[BookingStatus, frozenset] = {
    BookingStatus.PENDING: frozenset({
        BookingStatus.APPROVED,
        BookingStatus.REJECTED,
        BookingStatus.CANCELLED,
    }),
    BookingStatus.APPROVED: frozenset({BookingStatus.CANCELLED}),
    BookingStatus.REJECTED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}


def can_transition(table: Mapping[Enum, frozenset], current: Union[Enum, str], target: Union[Enum, str]) -> bool:
    """Return True if ``current -> target`` is allowed by ``table``."""
    status_type = type(next(iter(table)))
    try:
        current = status_type(current)
        target = status_type(target)
    except ValueError:
        return False
    if current == target:
        return True
    return target in table.get(current, frozenset())


def check_transition(
    entity: str,
    table: Mapping[Enum, frozenset],
    current: Union[Enum, str],
    target: Union[Enum, str],
) -> None:
    """Raise InvalidStatusTransitionError if the move is not allowed."""
    if not can_transition(table, current, target):
        raise InvalidStatusTransitionError(
            entity,
            getattr(current, "value", str(current)),
            getattr(target, "value", str(target)),
        )
