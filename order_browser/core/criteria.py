from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 9

FILTER_FIELDS = ("type", "status", "date_mode", "range_from", "range_to")


class DateMode(str, Enum):
    NONE = "none"
    NEWEST = "newest"
    OLDEST = "oldest"
    RANGE = "range"

    @classmethod
    def coerce(cls, value: Any) -> DateMode:
        """Unknown or empty values fall back to NONE."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower()) if value else cls.NONE
        except ValueError:
            return cls.NONE


@dataclass(frozen=True)
class Criteria:
    """
    The current combination of filter/sort settings.

    - type: exact-match type filter ("" = no constraint)
    - status: exact-match status filter ("" = no constraint)
    - date_mode: none / newest / oldest / range
    - range_from, range_to: inclusive bounds, only meaningful for date_mode=range
    """

    type: str = ""
    status: str = ""
    date_mode: DateMode = DateMode.NONE
    range_from: Any = None
    range_to: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "date_mode", DateMode.coerce(self.date_mode))

    @property
    def has_range(self) -> bool:
        return (
            self.date_mode is DateMode.RANGE
            and _present(self.range_from)
            and _present(self.range_to)
        )

    @property
    def effective_date_mode(self) -> DateMode:
        """A range without both bounds behaves as no date constraint."""
        if self.date_mode is DateMode.RANGE and not self.has_range:
            return DateMode.NONE
        return self.date_mode


@dataclass(frozen=True)
class PageState:
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {self.page_size}")
        if self.current_page < 1:
            raise ValueError(f"current_page must be >= 1, got {self.current_page}")


Listener = Callable[[Criteria, PageState], None]


class CriteriaStore:
    """
    Holds the current Criteria and PageState for one session.

    Each setter swaps in new immutable values and notifies subscribers once.
    Any filter change resets the page to 1; page navigation never touches filters.
    """

    def __init__(
            self,
            criteria: Optional[Criteria] = None,
            page: Optional[PageState] = None,
    ):
        self._criteria = criteria or Criteria()
        self._page = page or PageState()
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def criteria(self) -> Criteria:
        return self._criteria

    @property
    def page(self) -> PageState:
        return self._page

    @property
    def type(self) -> str:
        return self._criteria.type

    @property
    def status(self) -> str:
        return self._criteria.status

    @property
    def date_mode(self) -> DateMode:
        return self._criteria.date_mode

    @property
    def range_from(self) -> Any:
        return self._criteria.range_from

    @property
    def range_to(self) -> Any:
        return self._criteria.range_to

    @property
    def current_page(self) -> int:
        return self._page.current_page

    @property
    def page_size(self) -> int:
        return self._page.page_size

    # ------------------------------------------------------------------
    # Filter setters (all reset the page)
    # ------------------------------------------------------------------
    def set_type(self, value: Optional[str]) -> None:
        self.update_filters(type=value)

    def set_status(self, value: Optional[str]) -> None:
        self.update_filters(status=value)

    def set_date_mode(self, mode: Any) -> None:
        self.update_filters(date_mode=mode)

    def set_date_range(self, range_from: Any, range_to: Any) -> None:
        """Set both bounds in one transition."""
        self.update_filters(range_from=range_from, range_to=range_to)

    def update_filters(self, **changes: Any) -> None:
        unknown = set(changes) - set(FILTER_FIELDS)
        if unknown:
            raise TypeError(f"Unknown filter field(s): {', '.join(sorted(unknown))}")

        if "type" in changes:
            changes["type"] = changes["type"] or ""
        if "status" in changes:
            changes["status"] = changes["status"] or ""

        self._commit(
            replace(self._criteria, **changes),
            replace(self._page, current_page=1),
        )

    def reset_filters(self) -> None:
        self._commit(Criteria(), replace(self._page, current_page=1))

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------
    def set_page(self, page: int) -> None:
        self._commit(self._criteria, replace(self._page, current_page=max(1, int(page))))

    def next_page(self) -> None:
        # No upper bound: paging past the end yields empty pages.
        self.set_page(self._page.current_page + 1)

    def prev_page(self) -> None:
        self.set_page(self._page.current_page - 1)

    def set_page_size(self, page_size: int) -> None:
        self._commit(self._criteria, PageState(current_page=1, page_size=int(page_size)))

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, criteria: Criteria, page: PageState) -> None:
        if criteria == self._criteria and page == self._page:
            return

        self._criteria = criteria
        self._page = page
        logger.debug(
            "criteria_changed",
            extra={"criteria": _criteria_to_dict(criteria), "current_page": page.current_page},
        )
        for listener in list(self._listeners):
            listener(criteria, page)

    # ------------------------------------------------------------------
    # Serialisation (dcc.Store round-trip)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data = _criteria_to_dict(self._criteria)
        data.update(asdict(self._page))
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], *, page_size: int = DEFAULT_PAGE_SIZE) -> CriteriaStore:
        data = data or {}
        criteria = Criteria(
            type=data.get("type") or "",
            status=data.get("status") or "",
            date_mode=DateMode.coerce(data.get("date_mode")),
            range_from=data.get("range_from") or None,
            range_to=data.get("range_to") or None,
        )
        page = PageState(
            current_page=_positive_int(data.get("current_page"), 1),
            page_size=_positive_int(data.get("page_size"), page_size),
        )
        return cls(criteria=criteria, page=page)


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _positive_int(value: Any, default: int) -> int:
    try:
        out = int(value)
    except (TypeError, ValueError):
        return default
    return out if out >= 1 else default


def _criteria_to_dict(criteria: Criteria) -> Dict[str, Any]:
    return {
        "type": criteria.type,
        "status": criteria.status,
        "date_mode": criteria.date_mode.value,
        "range_from": criteria.range_from,
        "range_to": criteria.range_to,
    }
