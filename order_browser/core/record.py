from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .exceptions import RecordSchemaError

RecordId = Union[str, int]

# Fields the query pipeline inspects. Anything else on a raw order is payload.
CORE_FIELDS = ("id", "type", "status", "date")


class Status(str, Enum):
    """
    Closed vocabulary of order statuses.
    """
    COMPLETED = "Completed"
    PROCESSING = "Processing"
    REJECTED = "Rejected"
    ON_HOLD = "On Hold"
    IN_TRANSIT = "In Transit"


STATUSES: Tuple[str, ...] = tuple(s.value for s in Status)


def status_class(status: Optional[str]) -> str:
    """
    Map a status label to a normalised identifier used for badge styling.

    "On Hold" -> "on-hold", "Completed" -> "completed"; None or "" -> "".
    """
    if not status:
        return ""
    return str(status).lower().replace(" ", "-")


@dataclass(frozen=True)
class Record:
    """
    One order row flowing through the query pipeline.

    Fields:

    - id: unique order identifier (string or number)
    - type: category label used by the type filter
    - status: one of STATUSES
    - date: raw point in time (ISO string, datetime, ...); parsed lazily by the query engine
    - payload: opaque display-only fields (name, address, ...) never inspected by the core
    """

    id: RecordId
    type: str = ""
    status: Optional[str] = None
    date: Any = None
    payload: Mapping[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Record:
        if not isinstance(raw, Mapping):
            raise RecordSchemaError(f"Order row must be an object, got {type(raw).__name__}")
        if raw.get("id") is None:
            raise RecordSchemaError("Order row is missing an 'id'")

        return cls(
            id=raw["id"],
            type=raw.get("type") or "",
            status=raw.get("status"),
            date=raw.get("date"),
            payload={k: v for k, v in raw.items() if k not in CORE_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "status": self.status,
            "date": self.date,
        }
        out.update(self.payload)
        return out

    def get(self, key: str, default: Any = None) -> Any:
        """Read a display field, core fields first, then payload."""
        if key in CORE_FIELDS:
            return getattr(self, key)
        return self.payload.get(key, default)


def records_from_document(doc: Any) -> Tuple[Record, ...]:
    """
    Build Records from an orders document.

    Accepts both shapes in use:
    - a bare JSON array of orders
    - an object with an "orders" array

    None (nothing fetched yet) yields an empty tuple.
    """
    if doc is None:
        return ()

    if isinstance(doc, Mapping):
        rows = doc.get("orders") or []
    else:
        rows = doc

    if not isinstance(rows, (list, tuple)):
        raise RecordSchemaError(f"Orders must be a list, got {type(rows).__name__}")

    return tuple(Record.from_dict(row) for row in rows)
