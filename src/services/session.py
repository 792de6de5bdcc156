"""Current-actor session with explicit lifecycle states.

anonymous -> authenticating -> authenticated -> expired, and logout from any
state back to anonymous. The session is passed to the operations that need
it instead of living in a global.
"""

import time
from enum import Enum
from typing import Optional

from src.utils.errors import SessionError
from src.utils.logging import get_structured_logger, mask_user_id

logger = get_structured_logger(__name__)


class SessionState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    EXPIRED = "expired"


class Session:
    """Who the current actor is and the token they act with."""

    def __init__(self):
        self.state = SessionState.ANONYMOUS
        self.user_id: Optional[str] = None
        self.role: Optional[str] = None
        self.access_token: Optional[str] = None
        self.expires_at: Optional[float] = None

    def _move(self, allowed: tuple, target: SessionState) -> None:
        if self.state not in allowed:
            raise SessionError(f"Cannot move session from {self.state.value} to {target.value}")
        self.state = target

    def begin_login(self) -> None:
        self._move((SessionState.ANONYMOUS, SessionState.EXPIRED), SessionState.AUTHENTICATING)

    def complete_login(
        self,
        user_id: str,
        access_token: str,
        role: Optional[str] = None,
        expires_at: Optional[float] = None,
    ) -> None:
        self._move((SessionState.AUTHENTICATING,), SessionState.AUTHENTICATED)
        self.user_id = user_id
        self.access_token = access_token
        self.role = role
        self.expires_at = expires_at
        logger.info("Session authenticated", user_id=mask_user_id(user_id), role=role)

    def fail_login(self) -> None:
        self._move((SessionState.AUTHENTICATING,), SessionState.ANONYMOUS)

    def refresh(self, access_token: str, expires_at: Optional[float] = None) -> None:
        """Swap in a refreshed token; also revives an expired session."""
        self._move((SessionState.AUTHENTICATED, SessionState.EXPIRED), SessionState.AUTHENTICATED)
        self.access_token = access_token
        self.expires_at = expires_at

    def expire(self) -> None:
        self._move((SessionState.AUTHENTICATED,), SessionState.EXPIRED)

    def logout(self) -> None:
        self.state = SessionState.ANONYMOUS
        self.user_id = None
        self.role = None
        self.access_token = None
        self.expires_at = None

    @property
    def is_authenticated(self) -> bool:
        if self.state == SessionState.AUTHENTICATED and self.expires_at is not None and time.time() >= self.expires_at:
            self.expire()
        return self.state == SessionState.AUTHENTICATED

    def require_token(self) -> str:
        """Access token of an authenticated, unexpired session."""
        if not self.is_authenticated or not self.access_token:
            raise SessionError("Sign in to continue")
        return self.access_token
