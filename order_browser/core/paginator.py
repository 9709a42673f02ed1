from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from .record import Record


@dataclass(frozen=True)
class Page:
    """
    One window of the filtered view.

    start_index/end_index are 0-based, end exclusive, and always within [0, total].
    """
    items: Tuple[Record, ...]
    current_page: int
    page_size: int
    start_index: int
    end_index: int
    total: int

    @property
    def page_count(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.page_count


def paginate(filtered: Sequence[Record], current_page: int, page_size: int) -> Page:
    """
    Window `filtered` for the given 1-based page.

    A page beyond the data yields an empty window rather than an error; the
    paginator does not stop callers from paging past the last page.

    :raises ValueError: if page_size is not positive
    """
    if page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size}")

    total = len(filtered)
    raw_start = (current_page - 1) * page_size
    start = _clamp(raw_start, total)
    end = max(start, _clamp(raw_start + page_size, total))

    return Page(
        items=tuple(filtered[start:end]),
        current_page=current_page,
        page_size=page_size,
        start_index=start,
        end_index=end,
        total=total,
    )


def _clamp(index: int, total: int) -> int:
    return max(0, min(index, total))
