from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence

import dash
from dash import Input, Output, State, exceptions, html

from order_browser.core.criteria import CriteriaStore
from order_browser.core.publisher import ViewSnapshot, compose_view
from order_browser.core.record import Record
from order_browser.ui.helpers import build_orders_table, page_label, showing_text
from order_browser.ui.ids import IDs

if TYPE_CHECKING:
    from order_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def snapshot_for(records: Sequence[Record], data: Optional[dict[str, Any]], *, page_size: int) -> ViewSnapshot:
    """Rebuild the session's criteria and compose the view over the current records."""
    store = CriteriaStore.from_dict(data, page_size=page_size)
    return compose_view(records, store.criteria, store.page)


def poll_source(ctx: AppConfig, known_version: Optional[int]) -> bool:
    """
    Pick up external changes to the orders file and report whether the
    orders view needs re-rendering (the source was redelivered since `known_version`).
    """
    if ctx.order_store is not None:
        try:
            ctx.order_store.refresh()
        except Exception:
            # Keep serving the last good collection until the file is fixed
            logger.exception("Failed to reload orders", extra={"path": ctx.order_store.path})
    return ctx.source.version != known_version


def _error_panel(details: str) -> html.Div:
    return html.Div(
        [
            html.Strong("Something went wrong while loading orders."),
            html.Div(details, className="small"),
        ],
        className="text-danger p-3",
    )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    page_size = ctx.global_config.page_size

    # ---------------------------------------------------------
    # Criteria + records -> table, pagination, summary
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.ORDERS_TABLE, "children"),
        Output(IDs.Control.SHOWING_TEXT, "children"),
        Output(IDs.Control.PAGE_LABEL, "children"),
        Output(IDs.Control.PREV_BTN, "disabled"),
        Output(IDs.Store.SOURCE_VERSION, "data"),
        Input(IDs.Store.CRITERIA, "data"),
        Input(IDs.Control.SOURCE_POLL, "n_intervals"),
        State(IDs.Store.SOURCE_VERSION, "data"),
    )
    def render_orders(data, _n_intervals, known_version):
        source = ctx.source

        # Polling only re-renders after a redelivery
        if dash.ctx.triggered_id == IDs.Control.SOURCE_POLL and not poll_source(ctx, known_version):
            raise exceptions.PreventUpdate
        version = source.version

        try:
            snapshot = snapshot_for(source.records, data, page_size=page_size)
        except Exception:
            logger.exception("Error composing order view", extra={"criteria": data})
            return (
                _error_panel("Try resetting the filters or reloading the page."),
                "",
                "",
                True,
                version,
            )

        logger.info(
            "render_orders",
            extra={
                "n_filtered": snapshot.total,
                "current_page": snapshot.current_page,
                "source_version": version,
            },
        )

        return (
            build_orders_table(snapshot.page_view),
            showing_text(snapshot),
            page_label(snapshot),
            not snapshot.page.has_previous,
            version,
        )

    # ---------------------------------------------------------
    # Status bar (pure reflection of criteria)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.CRITERIA, "data"),
    )
    def update_status_bar(data):
        store = CriteriaStore.from_dict(data, page_size=page_size)
        criteria = store.criteria

        date_label = criteria.effective_date_mode.value
        if criteria.has_range:
            date_label = f"{criteria.range_from} → {criteria.range_to}"

        return html.Span(
            [
                html.Strong("Type: "), criteria.type or "All", " • ",
                html.Strong("Status: "), criteria.status or "All", " • ",
                html.Strong("Date: "), date_label,
            ]
        )
