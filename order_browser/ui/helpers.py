from __future__ import annotations

from typing import Iterable, List, Sequence

import dash_bootstrap_components as dbc
import pandas as pd
from dash import html

from order_browser.core.criteria import DateMode
from order_browser.core.publisher import ViewSnapshot
from order_browser.core.query_engine import to_timestamp
from order_browser.core.record import STATUSES, Record, status_class

TABLE_COLUMNS = [
    ("ID", "id"),
    ("NAME", "name"),
    ("ADDRESS", "address"),
    ("DATE", "date"),
    ("TYPE", "type"),
    ("STATUS", "status"),
]

DATE_MODE_OPTIONS = [
    {"label": "Newest → Oldest", "value": DateMode.NEWEST.value},
    {"label": "Oldest → Newest", "value": DateMode.OLDEST.value},
    {"label": "Range", "value": DateMode.RANGE.value},
]


def type_options(types: Iterable[str]) -> List[dict]:
    return [{"label": t, "value": t} for t in types]


def status_options() -> List[dict]:
    return [{"label": s, "value": s} for s in STATUSES]


def format_order_date(value) -> str:
    ts = to_timestamp(value)
    if pd.isna(ts):
        return "" if value is None else str(value)
    return ts.strftime("%d %b %Y")


def showing_text(snapshot: ViewSnapshot) -> str:
    """'Showing X–Y of Z' line under the orders table."""
    if snapshot.total == 0:
        return "No orders match the current filters"
    if snapshot.page.is_empty:
        return f"No orders on page {snapshot.current_page} ({snapshot.total} in total)"
    return f"Showing {snapshot.start_index + 1}–{snapshot.end_index} of {snapshot.total}"


def page_label(snapshot: ViewSnapshot) -> str:
    page_count = snapshot.page.page_count
    if page_count == 0:
        return f"Page {snapshot.current_page}"
    return f"Page {snapshot.current_page} of {page_count}"


def status_badge(status) -> html.Span:
    return html.Span(
        status or "",
        className=f"order-status {status_class(status)}".strip(),
    )


def _cell(record: Record, key: str):
    if key == "date":
        return format_order_date(record.date)
    if key == "status":
        return status_badge(record.status)
    value = record.get(key)
    return "" if value is None else str(value)


def build_orders_table(rows: Sequence[Record]) -> dbc.Table:
    header = html.Thead(html.Tr([html.Th(label) for label, _ in TABLE_COLUMNS]))

    if rows:
        body_rows = [
            html.Tr([html.Td(_cell(record, key)) for _, key in TABLE_COLUMNS])
            for record in rows
        ]
    else:
        body_rows = [
            html.Tr(
                html.Td(
                    "No orders to display.",
                    colSpan=len(TABLE_COLUMNS),
                    className="text-center text-muted",
                )
            )
        ]

    return dbc.Table(
        [header, html.Tbody(body_rows)],
        hover=True,
        responsive=True,
        className="order-table mb-0",
    )
