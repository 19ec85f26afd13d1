import logging
import threading
import time

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    One live builder session per seller, local to this process.

    Sessions left untouched for `idle_timeout` seconds are dropped on the
    next `open`, as long as they hold no unsaved edits.
    """

    def __init__(self, factory, *, idle_timeout=None, clock=time.monotonic):
        self._factory = factory
        self._idle_timeout = idle_timeout
        self._clock = clock
        self._sessions = {}
        self._last_used = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._sessions)

    def __contains__(self, seller_id):
        with self._lock:
            return seller_id in self._sessions

    def get(self, seller_id):
        with self._lock:
            return self._sessions.get(seller_id)

    def open(self, seller_id):
        """Return the seller's session, loading the design on first use."""
        with self._lock:
            evicted = self._pop_idle_locked(exclude=seller_id)

            session = self._sessions.get(seller_id)
            if session is None:
                session = self._factory(seller_id)
                session.load()
                self._sessions[seller_id] = session
                logger.debug("Opened builder session", extra={"seller_id": seller_id})
            self._last_used[seller_id] = self._clock()

        for idle in evicted:
            idle.close()
        return session

    def close(self, seller_id):
        with self._lock:
            session = self._sessions.pop(seller_id, None)
            self._last_used.pop(seller_id, None)
        if session is None:
            return False
        session.close()
        return True

    def close_all(self):
        with self._lock:
            sessions, self._sessions = list(self._sessions.values()), {}
            self._last_used = {}
        for session in sessions:
            session.close()

    def evict_idle(self):
        """Close idle sessions with nothing left to save. Returns how many were dropped."""
        with self._lock:
            evicted = self._pop_idle_locked()
        for session in evicted:
            session.close()
        return len(evicted)

    def _pop_idle_locked(self, exclude=None):
        if self._idle_timeout is None:
            return []

        cutoff = self._clock() - self._idle_timeout
        evicted = []
        for seller_id, last_used in list(self._last_used.items()):
            session = self._sessions[seller_id]
            if seller_id == exclude or last_used > cutoff:
                continue
            # Dirty sessions stay until auto-save or a manual save lands
            if session.dirty or session.autosave_pending:
                continue
            del self._sessions[seller_id]
            del self._last_used[seller_id]
            evicted.append(session)
            logger.info("Evicted idle builder session", extra={"seller_id": seller_id})
        return evicted
