from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        CRITERIA = "criteria-state"
        SOURCE_VERSION = "source-version"

    class Control:
        # Filters
        TYPE_SELECT = "type-select"
        STATUS_SELECT = "status-select"
        DATE_MODE_SELECT = "date-mode-select"
        DATE_RANGE = "date-range"
        DATE_RANGE_CONTAINER = "date-range-container"
        RESET_BTN = "reset-filters-btn"

        # Pagination
        PREV_BTN = "prev-page-btn"
        NEXT_BTN = "next-page-btn"
        PAGE_LABEL = "page-label"
        SHOWING_TEXT = "showing-text"

        # Table
        ORDERS_TABLE = "orders-table"

        # Record source polling
        SOURCE_POLL = "source-poll"

        # Status bar
        STATUS_BAR = "status-bar"
