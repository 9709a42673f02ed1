from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Tuple

from .record import Record

logger = logging.getLogger(__name__)

RecordsListener = Callable[[Tuple[Record, ...]], None]


class RecordSource:
    """
    Holds the last delivered record collection.

    Whoever fetches records (file store, HTTP client, test) calls `deliver`
    zero or more times; every delivery replaces the collection wholesale and
    notifies subscribers. Until the first delivery the collection is empty.
    """

    def __init__(self) -> None:
        self._records: Optional[Tuple[Record, ...]] = None
        self._version = 0
        self._listeners: List[RecordsListener] = []

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records if self._records is not None else ()

    @property
    def has_delivered(self) -> bool:
        return self._records is not None

    @property
    def version(self) -> int:
        """Incremented on every delivery; lets pollers detect redelivery."""
        return self._version

    def deliver(self, records: Optional[Iterable[Record]]) -> None:
        self._records = tuple(records or ())
        self._version += 1

        logger.info(
            "records_delivered",
            extra={"n_records": len(self._records), "version": self._version},
        )

        for listener in list(self._listeners):
            listener(self._records)

    def subscribe(self, listener: RecordsListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
