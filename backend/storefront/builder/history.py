import copy

DEFAULT_HISTORY_LIMIT = 50


class HistoryStack:
    """
    Bounded linear undo/redo buffer over design snapshots.

    The entry at `index` always mirrors the live design. A push made while
    an undo/redo is being applied is swallowed once, so restoring a snapshot
    is never recorded as a new action.
    """

    def __init__(self, initial, limit=DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self._limit = limit
        self._entries = []
        self._index = -1
        self._skip_next = False
        self.reset(initial)

    def reset(self, snapshot):
        self._entries = [copy.deepcopy(snapshot)]
        self._index = 0
        self._skip_next = False

    @property
    def index(self):
        return self._index

    @property
    def limit(self):
        return self._limit

    def __len__(self):
        return len(self._entries)

    @property
    def can_undo(self):
        return self._index > 0

    @property
    def can_redo(self):
        return self._index < len(self._entries) - 1

    @property
    def current(self):
        return copy.deepcopy(self._entries[self._index])

    def push(self, snapshot):
        if self._skip_next:
            self._skip_next = False
            return False

        del self._entries[self._index + 1:]
        self._entries.append(copy.deepcopy(snapshot))

        # Drop oldest on overflow
        if len(self._entries) > self._limit:
            del self._entries[:len(self._entries) - self._limit]

        self._index = len(self._entries) - 1
        return True

    def undo(self):
        if self._index <= 0:
            return None
        self._skip_next = True
        self._index -= 1
        return copy.deepcopy(self._entries[self._index])

    def redo(self):
        if self._index >= len(self._entries) - 1:
            return None
        self._skip_next = True
        self._index += 1
        return copy.deepcopy(self._entries[self._index])
