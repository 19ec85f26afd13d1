"""
Builder session: the single owner of one seller's in-memory design.

Section operations stay pure; the session applies them, records history,
tracks selection and the dirty flag, and drives the debounced auto-save.
Validation failures propagate as `BuilderError` with the design untouched.
Persistence failures on save are turned into notifications and the
in-memory design is kept as is.
"""
from __future__ import annotations

import copy
import logging
import threading
from collections import namedtuple
from datetime import datetime, timezone

from storefront.domain.invariants import InvariantViolation
from storefront.domain.lifecycle.design import (
    DRAFT,
    PUBLISHED,
    assert_design_transition,
    design_status,
)
from storefront.utils.order import compact_order
from storefront.utils.versioning import apply_snapshot, new_document, snapshot_design, to_record
from . import operations, versions
from .autosave import DEFAULT_AUTOSAVE_DELAY, DebouncedSaver
from .clipboard import SettingsClipboard
from .exceptions import PersistenceError
from .history import DEFAULT_HISTORY_LIMIT, HistoryStack

logger = logging.getLogger(__name__)

Notification = namedtuple("Notification", ["level", "message"])


class BuilderSession:
    def __init__(
        self,
        seller_id,
        gateway,
        *,
        history_limit=DEFAULT_HISTORY_LIMIT,
        autosave_delay=DEFAULT_AUTOSAVE_DELAY,
        autosave_enabled=True,
        timer_factory=threading.Timer,
    ):
        self.seller_id = seller_id
        self._gateway = gateway
        self._lock = threading.RLock()
        self._document = new_document(seller_id)
        self._history = HistoryStack(snapshot_design(self._document), limit=history_limit)
        self._clipboard = SettingsClipboard()
        self._autosave = (
            DebouncedSaver(self.autosave, delay=autosave_delay, timer_factory=timer_factory)
            if autosave_enabled
            else None
        )
        self._notifications = []
        self.selected_section_id = None
        self.dirty = False
        self.loaded = False
        self.closed = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def document(self):
        with self._lock:
            return copy.deepcopy(self._document)

    @property
    def history(self):
        return self._history

    @property
    def clipboard_type(self):
        return self._clipboard.section_type

    @property
    def autosave_pending(self):
        return bool(self._autosave and self._autosave.pending)

    def drain_notifications(self):
        with self._lock:
            drained, self._notifications = self._notifications, []
            return drained

    def _notify(self, level, message):
        self._notifications.append(Notification(level, message))

    def _mark_dirty(self):
        self.dirty = True
        if self._autosave is not None:
            self._autosave.schedule()

    def _commit(self, updated, record=True):
        self._document = updated
        if record:
            self._history.push(snapshot_design(updated))
        self._mark_dirty()

    def _drop_stale_selection(self):
        ids = {s["id"] for s in self._document["sections"]}
        if self.selected_section_id not in ids:
            self.selected_section_id = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self):
        """Fetch the seller's design; a seller without one starts empty."""
        with self._lock:
            record = self._gateway.load(self.seller_id)
            self._document = record if record is not None else new_document(self.seller_id)
            # Stored designs may carry gaps in `order`
            compact_order(self._document["sections"])
            self._history.reset(snapshot_design(self._document))
            self._clipboard.clear()
            self.selected_section_id = None
            self.dirty = False
            self.loaded = True
            self.closed = False

            logger.info(
                "Opened store design",
                extra={"seller_id": self.seller_id, "design_id": self._document.get("id")},
            )
            return self.document

    # ------------------------------------------------------------------
    # Section operations
    # ------------------------------------------------------------------
    def select_section(self, section_id):
        with self._lock:
            if section_id is not None:
                operations.find_section(self._document, section_id)
            self.selected_section_id = section_id

    def add_section(self, section_type):
        with self._lock:
            updated, section_id = operations.add_section(self._document, section_type)
            self._commit(updated)
            self.selected_section_id = section_id
            return section_id

    def add_from_template(self, template_id):
        with self._lock:
            updated, section_id = operations.add_from_template(self._document, template_id)
            self._commit(updated)
            self.selected_section_id = section_id
            return section_id

    def duplicate_section(self, section_id):
        with self._lock:
            updated, clone_id = operations.duplicate_section(self._document, section_id)
            self._commit(updated)
            self.selected_section_id = clone_id
            return clone_id

    def remove_section(self, section_id):
        with self._lock:
            self._commit(operations.remove_section(self._document, section_id))
            if self.selected_section_id == section_id:
                self.selected_section_id = None

    def toggle_visibility(self, section_id):
        with self._lock:
            self._commit(operations.toggle_visibility(self._document, section_id))

    def move_section(self, section_id, direction):
        with self._lock:
            updated = operations.move_section(self._document, section_id, direction)
            if updated is self._document:
                return False
            self._commit(updated)
            return True

    def move_section_to(self, section_id, index):
        with self._lock:
            updated = operations.move_section_to(self._document, section_id, index)
            if updated is self._document:
                return False
            self._commit(updated)
            return True

    def update_section_settings(self, section_id, patch):
        with self._lock:
            self._commit(operations.update_section_settings(self._document, section_id, patch))

    def update_section_styles(self, section_id, patch):
        with self._lock:
            self._commit(operations.update_section_styles(self._document, section_id, patch))

    def update_global_styles(self, patch):
        with self._lock:
            self._commit(operations.update_global_styles(self._document, patch))

    def apply_preset(self, preset_id):
        with self._lock:
            self._commit(operations.apply_preset(self._document, preset_id))
            self.selected_section_id = None

    def copy_settings(self, section_id):
        with self._lock:
            return self._clipboard.copy_from(self._document, section_id)

    def paste_settings(self, section_id):
        with self._lock:
            self._commit(self._clipboard.paste_into(self._document, section_id))

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------
    def undo(self):
        with self._lock:
            snapshot = self._history.undo()
            if snapshot is None:
                return False
            # The push inside _commit consumes the history skip flag
            self._commit(apply_snapshot(self._document, snapshot))
            self._drop_stale_selection()
            return True

    def redo(self):
        with self._lock:
            snapshot = self._history.redo()
            if snapshot is None:
                return False
            self._commit(apply_snapshot(self._document, snapshot))
            self._drop_stale_selection()
            return True

    # ------------------------------------------------------------------
    # Versions
    # ------------------------------------------------------------------
    def save_version(self, name=None):
        with self._lock:
            updated, version = versions.save_version(self._document, name)
            self._commit(updated, record=False)
            logger.info(
                "Saved design version",
                extra={"seller_id": self.seller_id, "action": "design.version"},
            )
            return version

    def restore_version(self, version_id):
        with self._lock:
            self._commit(versions.restore_version(self._document, version_id))
            self._drop_stale_selection()

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------
    def export_design(self):
        with self._lock:
            return operations.export_design(self._document)

    def import_design(self, payload):
        with self._lock:
            self._commit(operations.import_design(self._document, payload))
            self._drop_stale_selection()

    # ------------------------------------------------------------------
    # Persistence & lifecycle
    # ------------------------------------------------------------------
    def save(self):
        """Upsert the whole design. Returns False (and queues an error) on failure."""
        with self._lock:
            record = to_record(self._document)
            try:
                result = self._gateway.save(record)
            except (PersistenceError, InvariantViolation) as exc:
                logger.error(
                    "Failed to save store design: %s",
                    exc,
                    extra={"seller_id": self.seller_id, "design_id": record.get("id")},
                )
                self._notify("error", "Failed to save")
                return False

            if not self._document.get("id"):
                self._document["id"] = result["id"]
            self.dirty = False
            self._notify("success", "Saved")
            logger.info(
                "Saved store design",
                extra={"seller_id": self.seller_id, "design_id": self._document["id"]},
            )
            return True

    def autosave(self):
        """Timer callback: save unless the session was closed meanwhile."""
        with self._lock:
            if self.closed:
                logger.info(
                    "Skipped auto-save of closed session",
                    extra={"seller_id": self.seller_id},
                )
                return False
            return self.save()

    def publish(self):
        """Checkpoint as "Pre-publish …", flip the design live and save immediately."""
        with self._lock:
            assert_design_transition(from_status=design_status(self._document), to_status=PUBLISHED)

            now = datetime.now(timezone.utc)
            updated, _ = versions.save_version(self._document, versions.pre_publish_name(now), now=now)
            updated["is_active"] = True
            self._document = updated
            self.dirty = True

            if self._autosave is not None:
                self._autosave.cancel()

            if not self.save():
                return False
            self._notify("success", "Store design published!")
            return True

    def unpublish(self):
        with self._lock:
            assert_design_transition(from_status=design_status(self._document), to_status=DRAFT)
            updated = copy.deepcopy(self._document)
            updated["is_active"] = False
            self._commit(updated, record=False)

    def close(self):
        """Drop any pending auto-save without a final save."""
        with self._lock:
            self.closed = True
            cancelled = self._autosave.cancel() if self._autosave is not None else False
            if cancelled:
                logger.info(
                    "Discarded pending auto-save on close",
                    extra={"seller_id": self.seller_id},
                )
            return cancelled
