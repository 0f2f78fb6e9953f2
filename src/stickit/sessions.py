"""In-memory registry mapping session tokens to logged-in usernames."""

import logging
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from prometheus_client import Gauge

from .config import settings

logger = logging.getLogger(__name__)

# Latest instant representable as a signed 32-bit epoch.
FAR_FUTURE = datetime.fromtimestamp(2147483647, tz=timezone.utc)

ACTIVE_SESSIONS = Gauge("active_sessions", "Number of live login sessions")


@dataclass(frozen=True)
class UserSession:
    token: str
    username: str
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at < (now or datetime.now(timezone.utc))


class SessionRegistry:
    """Process-wide token map. Entries are lost when the process restarts."""

    def __init__(self, lifetime_minutes: Optional[int] = None):
        self.lifetime_minutes = lifetime_minutes
        self._sessions: Dict[str, UserSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def _expiry(self) -> datetime:
        if self.lifetime_minutes is None:
            return FAR_FUTURE
        return datetime.now(timezone.utc) + timedelta(minutes=self.lifetime_minutes)

    def create(self, username: str) -> str:
        """Start a session for ``username`` and return its token."""
        token = uuid.uuid4().hex
        with self._lock:
            self._sessions[token] = UserSession(token, username, self._expiry())
            ACTIVE_SESSIONS.set(len(self._sessions))
        logger.info("session created for %s", username)
        return token

    def check(self, token: Optional[str]) -> Optional[UserSession]:
        """Return the live session for ``token``; expired entries are dropped."""
        if not token:
            return None
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.is_expired():
                del self._sessions[token]
                ACTIVE_SESSIONS.set(len(self._sessions))
                logger.info("session for %s expired", session.username)
                return None
            return session

    def destroy(self, token: Optional[str]) -> None:
        with self._lock:
            session = self._sessions.pop(token, None)
            ACTIVE_SESSIONS.set(len(self._sessions))
        if session is not None:
            logger.info("session destroyed for %s", session.username)

    def destroy_user(self, username: str) -> int:
        """Remove every session belonging to ``username``."""
        with self._lock:
            tokens = [t for t, s in self._sessions.items() if s.username == username]
            for token in tokens:
                del self._sessions[token]
            ACTIVE_SESSIONS.set(len(self._sessions))
        return len(tokens)

    def rename_user(self, old_username: str, new_username: str) -> None:
        """Point the sessions of a renamed user at the new username."""
        with self._lock:
            for token, session in list(self._sessions.items()):
                if session.username == old_username:
                    self._sessions[token] = UserSession(token, new_username, session.expires_at)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()
            ACTIVE_SESSIONS.set(0)


sessions = SessionRegistry(settings.session_lifetime_minutes)
