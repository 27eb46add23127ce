import logging
import time
import uuid
from typing import Callable, Dict, Optional

from .config import get_settings
from .editor import ResumeEditor

logger = logging.getLogger(__name__)


class SessionStore:
    """In-memory editors keyed by session id. Nothing outlives the process.

    Sessions idle for longer than ``ttl`` seconds are dropped the next time the
    store is touched. An editor with a reorder in flight is never dropped.
    """

    def __init__(self, ttl: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self.ttl = get_settings().session_ttl if ttl is None else ttl
        self._clock = clock
        self._editors: Dict[str, ResumeEditor] = {}
        self._last_used: Dict[str, float] = {}

    def _evict_idle(self) -> None:
        now = self._clock()
        for session_id, last in list(self._last_used.items()):
            if now - last > self.ttl and not self._editors[session_id].optimizing:
                self.discard(session_id)
                logger.info(f"Session {session_id} expired after {self.ttl:.0f}s idle")

    def create(self) -> str:
        self._evict_idle()
        session_id = uuid.uuid4().hex
        self._editors[session_id] = ResumeEditor()
        self._last_used[session_id] = self._clock()
        return session_id

    def get(self, session_id: str) -> ResumeEditor:
        self._evict_idle()
        editor = self._editors[session_id]
        self._last_used[session_id] = self._clock()
        return editor

    def discard(self, session_id: str) -> None:
        self._editors.pop(session_id, None)
        self._last_used.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._editors)


SESSIONS = SessionStore()

def get_session_store() -> SessionStore:
    return SESSIONS
