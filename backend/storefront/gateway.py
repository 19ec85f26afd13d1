"""
Persistence gateway: the two calls the builder makes against the design store.

    load(seller_id) -> document | None
    save(document)  -> {"id": ...}   (raises PersistenceError on failure)
"""
from __future__ import annotations

import copy
import logging
import threading
import uuid
from contextlib import nullcontext
from typing import Any, Dict, Optional, Protocol

from flask import current_app, has_app_context
from sqlalchemy.exc import SQLAlchemyError

from storefront.builder.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class DesignGateway(Protocol):
    def load(self, seller_id: str) -> Optional[Dict[str, Any]]: ...

    def save(self, document: Dict[str, Any]) -> Dict[str, str]: ...


class InMemoryDesignGateway:
    """Process-local design store for development and tests."""

    def __init__(self) -> None:
        self._designs: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()
        self.save_count = 0

    def load(self, seller_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            design = self._designs.get(seller_id)
            return copy.deepcopy(design) if design else None

    def save(self, document: Dict[str, Any]) -> Dict[str, str]:
        with self._lock:
            stored = copy.deepcopy(document)
            existing = self._designs.get(stored["seller_id"])
            stored["id"] = stored.get("id") or (existing or {}).get("id") or str(uuid.uuid4())
            self._designs[stored["seller_id"]] = stored
            self.save_count += 1
            return {"id": stored["id"]}


class SqlAlchemyDesignGateway:
    """Design store backed by the `store_designs` table."""

    def __init__(self, app) -> None:
        self._app = app

    def _context(self):
        # Auto-save fires on a timer thread with no app context of its own
        if has_app_context() and current_app._get_current_object() is self._app:
            return nullcontext()
        return self._app.app_context()

    def load(self, seller_id: str) -> Optional[Dict[str, Any]]:
        from storefront.application.designs.load_design import load_design

        with self._context():
            try:
                return load_design(seller_id=seller_id)
            except SQLAlchemyError as exc:
                logger.error("Failed to load store design", extra={"seller_id": seller_id}, exc_info=True)
                raise PersistenceError("Failed to load store design") from exc

    def save(self, document: Dict[str, Any]) -> Dict[str, str]:
        from storefront.application.designs.save_design import save_design

        with self._context():
            try:
                return save_design(document=document)
            except SQLAlchemyError as exc:
                logger.error(
                    "Failed to save store design",
                    extra={"seller_id": document.get("seller_id")},
                    exc_info=True,
                )
                raise PersistenceError("Failed to save store design") from exc


__all__ = ["DesignGateway", "InMemoryDesignGateway", "SqlAlchemyDesignGateway"]
