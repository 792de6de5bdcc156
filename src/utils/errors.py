"""Error handling utilities."""

from typing import Optional


class ElgraceError(Exception):
    """Base exception for the Elgrace talents backend."""
    pass


class ConfigurationError(ElgraceError):
    """Required configuration is missing or invalid."""
    pass


class SupabaseError(ElgraceError):
    """Supabase operation error."""
    pass


class MediaValidationError(ElgraceError):
    """File rejected by client-side media validation."""
    pass


class MediaUploadError(ElgraceError):
    """Media endpoint request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProfileValidationError(ElgraceError):
    """Profile form failed required-field validation."""
    pass


class InvalidStatusTransitionError(ElgraceError):
    """Status change not allowed by the transition table."""

    def __init__(self, entity: str, current: str, target: str):
        super().__init__(f"Cannot move {entity} from {current} to {target}")
        self.entity = entity
        self.current = current
        self.target = target


class SessionError(ElgraceError):
    """Operation requires an authenticated session."""
    pass
