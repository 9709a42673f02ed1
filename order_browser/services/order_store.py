from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from order_browser.core.exceptions import OrderNotFoundError
from order_browser.core.record import Record, RecordId, records_from_document
from order_browser.core.source import RecordSource
from order_browser.services.storage import StorageBackend
from order_browser.validation.order_validation import (
    validate_order_payload,
    validate_orders_document,
)

logger = logging.getLogger(__name__)


class OrderStore:
    """
    CRUD over a single JSON array of orders.

    The file is the single source of truth: every operation re-reads it, every
    mutation writes it back and re-delivers the full collection to the RecordSource,
    so downstream views are always rebuilt from the canonical data.
    """

    def __init__(self, storage: StorageBackend, source: RecordSource, path: str = "orders.json"):
        self.storage = storage
        self.source = source
        self.path = path
        # Change marker of the file as of the last load or write
        self._seen_marker: Optional[int] = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _read(self) -> List[Dict[str, Any]]:
        if not self.storage.exists(self.path):
            return []
        try:
            doc = self.storage.read_json(self.path)
        except Exception:
            logger.exception("Failed to read orders", extra={"path": self.path})
            raise

        validate_orders_document(doc)
        orders = (doc.get("orders") or []) if isinstance(doc, dict) else doc
        return [dict(o) for o in orders]

    def _write(self, orders: List[Dict[str, Any]]) -> None:
        try:
            self.storage.write_json(self.path, {"orders": orders})
            self._seen_marker = self.storage.modified_at(self.path)
        except Exception:
            logger.exception("Failed to persist orders", extra={"path": self.path})
            raise

    def _deliver(self, orders: List[Dict[str, Any]]) -> Tuple[Record, ...]:
        records = records_from_document(orders)
        self.source.deliver(records)
        return records

    @staticmethod
    def _index_of(orders: List[Dict[str, Any]], order_id: RecordId) -> Optional[int]:
        key = str(order_id)
        return next((i for i, o in enumerate(orders) if str(o.get("id")) == key), None)

    @staticmethod
    def _next_id(orders: List[Dict[str, Any]]) -> RecordId:
        numeric = []
        for o in orders:
            try:
                numeric.append(int(o.get("id")))
            except (TypeError, ValueError):
                continue

        next_id = max(numeric) + 1 if numeric else 1
        # Keep the id kind already used by the file
        if orders and all(isinstance(o.get("id"), str) for o in orders):
            return str(next_id)
        return next_id

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def load(self) -> Tuple[Record, ...]:
        """Read the file and deliver its orders. A missing file delivers an empty collection."""
        self._seen_marker = self.storage.modified_at(self.path)
        orders = self._read()
        logger.info("Orders loaded", extra={"path": self.path, "n_orders": len(orders)})
        return self._deliver(orders)

    def refresh(self) -> bool:
        """
        Reload and re-deliver if the file changed since it was last loaded or written
        (edited by hand, replaced by another process, deleted).

        :return: True if the file was reloaded.
        """
        if self.storage.modified_at(self.path) == self._seen_marker:
            return False

        logger.info("Orders file changed on disk", extra={"path": self.path})
        self.load()
        return True

    def list_orders(self) -> List[Dict[str, Any]]:
        return self._read()

    def get_order(self, order_id: RecordId) -> Optional[Dict[str, Any]]:
        orders = self._read()
        idx = self._index_of(orders, order_id)
        return orders[idx] if idx is not None else None

    def add_order(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        orders = self._read()
        new_order = {"id": self._next_id(orders), **{k: v for k, v in payload.items() if k != "id"}}
        validate_order_payload(new_order)

        orders.append(new_order)
        self._write(orders)
        self._deliver(orders)

        logger.info("Order added", extra={"order_id": new_order["id"]})
        return new_order

    def update_order(self, order_id: RecordId, changes: Dict[str, Any]) -> Dict[str, Any]:
        orders = self._read()
        idx = self._index_of(orders, order_id)
        if idx is None:
            raise OrderNotFoundError(f"Order '{order_id}' not found")

        updated = {**orders[idx], **{k: v for k, v in changes.items() if k != "id"}}
        validate_order_payload(updated)

        orders[idx] = updated
        self._write(orders)
        self._deliver(orders)

        logger.info("Order updated", extra={"order_id": updated["id"]})
        return updated

    def delete_order(self, order_id: RecordId) -> bool:
        orders = self._read()
        remaining = [o for o in orders if str(o.get("id")) != str(order_id)]
        if len(remaining) == len(orders):
            return False

        self._write(remaining)
        self._deliver(remaining)

        logger.info("Order deleted", extra={"order_id": order_id})
        return True
