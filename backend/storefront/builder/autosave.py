import logging
import threading

logger = logging.getLogger(__name__)

DEFAULT_AUTOSAVE_DELAY = 2.0


class DebouncedSaver:
    """
    Restartable single-shot timer.

    Every `schedule()` cancels the pending timer and starts a new one, so
    only the last trigger inside the quiet window reaches `callback`.
    """

    def __init__(self, callback, delay=DEFAULT_AUTOSAVE_DELAY, timer_factory=threading.Timer):
        self._callback = callback
        self._delay = delay
        self._timer_factory = timer_factory
        self._timer = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def delay(self):
        return self._delay

    @property
    def pending(self):
        with self._lock:
            return self._timer is not None

    def schedule(self):
        with self._lock:
            self._cancel_locked()
            generation = self._generation
            timer = self._timer_factory(self._delay, self._fire, args=(generation,))
            timer.daemon = True
            self._timer = timer
        timer.start()

    def cancel(self):
        with self._lock:
            was_pending = self._timer is not None
            self._cancel_locked()
        return was_pending

    def flush(self):
        """Run the pending callback now instead of waiting for the timer."""
        if not self.cancel():
            return False
        self._callback()
        return True

    def _cancel_locked(self):
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, generation):
        with self._lock:
            # A newer schedule()/cancel() superseded this timer
            if generation != self._generation:
                return
            self._timer = None

        try:
            self._callback()
        except Exception:
            logger.exception("Auto-save callback failed")
