"""
In-memory store of live workout sessions.

Sessions are owned by the process that created them and are never
shared or persisted. A session is removed when it is discarded (exit
confirmed), once its summary has been read after completion, or after
it has sat idle for longer than the idle TTL. Idle sessions are evicted
lazily on create and get.
"""
import logging
import threading
import time
from typing import Callable, Dict, List, Tuple

from application.use_cases.run_session import WorkoutSessionService

logger = logging.getLogger(__name__)

DEFAULT_IDLE_TTL_SECONDS = 2 * 60 * 60


class SessionNotFoundError(KeyError):
    """Raised when a session id is not (or no longer) in the store."""

    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id


class InMemorySessionStore:
    """Thread-safe map of session id to WorkoutSessionService."""

    def __init__(
        self,
        idle_ttl_seconds: float = DEFAULT_IDLE_TTL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._idle_ttl = idle_ttl_seconds
        self._clock = clock
        self._sessions: Dict[str, Tuple[WorkoutSessionService, float]] = {}
        self._lock = threading.Lock()

    def _evict_idle(self, now: float) -> None:
        # Caller holds the lock
        expired = [
            session_id
            for session_id, (_, last_seen) in self._sessions.items()
            if now - last_seen > self._idle_ttl
        ]
        for session_id in expired:
            del self._sessions[session_id]
        if expired:
            logger.info(f"Evicted {len(expired)} idle session(s)")

    def create(self, session: WorkoutSessionService) -> WorkoutSessionService:
        with self._lock:
            now = self._clock()
            self._evict_idle(now)
            self._sessions[session.id] = (session, now)
        logger.debug(f"Stored session {session.id}")
        return session

    def get(self, session_id: str) -> WorkoutSessionService:
        """Return a live session and mark it as seen."""
        with self._lock:
            now = self._clock()
            self._evict_idle(now)
            entry = self._sessions.get(session_id)
            if entry is None:
                raise SessionNotFoundError(session_id)
            session = entry[0]
            self._sessions[session_id] = (session, now)
        return session

    def discard(self, session_id: str) -> WorkoutSessionService:
        """Remove a session without persisting anything."""
        with self._lock:
            entry = self._sessions.pop(session_id, None)
        if entry is None:
            raise SessionNotFoundError(session_id)
        logger.info(f"Discarded session {session_id}")
        return entry[0]

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
