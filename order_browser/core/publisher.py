"""
View composition. `ViewPublisher` is the in-process composition point that
pushes snapshots to subscribers; the stateless Dash callbacks call
`compose_view` directly with criteria rebuilt from the dcc.Store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .criteria import Criteria, CriteriaStore, PageState
from .paginator import Page, paginate
from .query_engine import apply_criteria
from .record import Record, status_class
from .source import RecordSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewSnapshot:
    """
    The pair of derived views published to presentation code.
    Always recomputed in full; never patched.
    """
    filtered_view: Tuple[Record, ...]
    page: Page

    @property
    def page_view(self) -> Tuple[Record, ...]:
        return self.page.items

    @property
    def start_index(self) -> int:
        return self.page.start_index

    @property
    def end_index(self) -> int:
        return self.page.end_index

    @property
    def current_page(self) -> int:
        return self.page.current_page

    @property
    def total(self) -> int:
        return self.page.total


def compose_view(
        records: Optional[Sequence[Record]],
        criteria: Criteria,
        page_state: PageState,
) -> ViewSnapshot:
    """
    Recombine the latest records with the latest criteria into the next snapshot.
    Pure: the same inputs always produce an equal snapshot.
    """
    filtered = apply_criteria(records, criteria)
    page = paginate(filtered, page_state.current_page, page_state.page_size)
    return ViewSnapshot(filtered_view=filtered, page=page)


SnapshotListener = Callable[[ViewSnapshot], None]


class ViewPublisher:
    """
    Composition point of the query pipeline.

    Subscribes to a RecordSource and a CriteriaStore (both passed in explicitly) and,
    whenever either changes, recomputes the whole ViewSnapshot synchronously before
    notifying its own subscribers. Subscribers never observe a half-updated snapshot.
    """

    def __init__(self, source: RecordSource, store: CriteriaStore):
        self._source = source
        self._store = store
        self._listeners: List[SnapshotListener] = []
        self._snapshot = compose_view(source.records, store.criteria, store.page)

        self._detach = [
            source.subscribe(self._on_records),
            store.subscribe(self._on_criteria),
        ]

    # ------------------------------------------------------------------
    # Published views
    # ------------------------------------------------------------------
    @property
    def snapshot(self) -> ViewSnapshot:
        return self._snapshot

    @property
    def filtered_view(self) -> Tuple[Record, ...]:
        return self._snapshot.filtered_view

    @property
    def page_view(self) -> Tuple[Record, ...]:
        return self._snapshot.page_view

    @property
    def start_index(self) -> int:
        return self._snapshot.start_index

    @property
    def end_index(self) -> int:
        return self._snapshot.end_index

    @property
    def current_page(self) -> int:
        return self._snapshot.current_page

    @property
    def store(self) -> CriteriaStore:
        return self._store

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def next_page(self) -> None:
        self._store.next_page()

    def prev_page(self) -> None:
        self._store.prev_page()

    def set_date_range(self, range_from: Any, range_to: Any) -> None:
        self._store.set_date_range(range_from, range_to)

    def reset_filters(self) -> None:
        self._store.reset_filters()

    status_class = staticmethod(status_class)

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------
    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Detach from the source and the store."""
        for detach in self._detach:
            detach()
        self._detach = []

    # ------------------------------------------------------------------
    # Recompute
    # ------------------------------------------------------------------
    def _on_records(self, records: Tuple[Record, ...]) -> None:
        self._publish(records, self._store.criteria, self._store.page)

    def _on_criteria(self, criteria: Criteria, page: PageState) -> None:
        self._publish(self._source.records, criteria, page)

    def _publish(self, records: Sequence[Record], criteria: Criteria, page: PageState) -> None:
        self._snapshot = compose_view(records, criteria, page)

        logger.debug(
            "view_published",
            extra={
                "n_filtered": self._snapshot.total,
                "current_page": self._snapshot.current_page,
                "start_index": self._snapshot.start_index,
                "end_index": self._snapshot.end_index,
            },
        )

        for listener in list(self._listeners):
            listener(self._snapshot)
