from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Collection, Optional

import dash
from dash import Input, Output, State

from order_browser.core.criteria import CriteriaStore, DateMode
from order_browser.ui.ids import IDs

if TYPE_CHECKING:
    from order_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def apply_ui_event(
        data: Optional[dict[str, Any]],
        triggered: Collection[str],
        inputs: dict[str, Any],
        *,
        page_size: int,
) -> dict[str, Any]:
    """
    Pure helper: rebuild the CriteriaStore from its dcc.Store dict, apply the
    operation matching what the user touched, and return the new dict.

    - reset button  -> reset_filters
    - prev / next   -> page navigation only
    - filter inputs -> update only the dimensions whose value actually changed
    """
    store = CriteriaStore.from_dict(data, page_size=page_size)

    if IDs.Control.RESET_BTN in triggered:
        store.reset_filters()
    elif IDs.Control.PREV_BTN in triggered:
        store.prev_page()
    elif IDs.Control.NEXT_BTN in triggered:
        store.next_page()
    else:
        incoming = {
            "type": inputs.get("type") or "",
            "status": inputs.get("status") or "",
            "date_mode": DateMode.coerce(inputs.get("date_mode")),
            "range_from": inputs.get("range_from") or None,
            "range_to": inputs.get("range_to") or None,
        }
        current = {
            "type": store.type,
            "status": store.status,
            "date_mode": store.date_mode,
            "range_from": store.range_from,
            "range_to": store.range_to,
        }
        changes = {k: v for k, v in incoming.items() if v != current[k]}
        if changes:
            store.update_filters(**changes)

    return store.to_dict()


def register_criteria_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    page_size = ctx.global_config.page_size

    # ---------------------------------------------------------
    # UI -> criteria store (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.CRITERIA, "data"),
        Input(IDs.Control.TYPE_SELECT, "value"),
        Input(IDs.Control.STATUS_SELECT, "value"),
        Input(IDs.Control.DATE_MODE_SELECT, "value"),
        Input(IDs.Control.DATE_RANGE, "start_date"),
        Input(IDs.Control.DATE_RANGE, "end_date"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        Input(IDs.Control.PREV_BTN, "n_clicks"),
        Input(IDs.Control.NEXT_BTN, "n_clicks"),
        State(IDs.Store.CRITERIA, "data"),
        prevent_initial_call=True,
    )
    def sync_criteria_from_ui(
            type_val, status_val, mode_val, start_val, end_val,
            _reset, _prev, _next, data,
    ):
        triggered = set(dash.ctx.triggered_prop_ids.values())
        inputs = {
            "type": type_val,
            "status": status_val,
            "date_mode": mode_val,
            "range_from": start_val,
            "range_to": end_val,
        }
        return apply_ui_event(data, triggered, inputs, page_size=page_size)

    # ---------------------------------------------------------
    # Reset button -> clear the filter controls themselves
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TYPE_SELECT, "value"),
        Output(IDs.Control.STATUS_SELECT, "value"),
        Output(IDs.Control.DATE_MODE_SELECT, "value"),
        Output(IDs.Control.DATE_RANGE, "start_date"),
        Output(IDs.Control.DATE_RANGE, "end_date"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filter_controls(_n_clicks):
        logger.info("filters_reset")
        return None, None, DateMode.NONE.value, None, None

    # ---------------------------------------------------------
    # Date range picker only shown in range mode
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DATE_RANGE_CONTAINER, "style"),
        Input(IDs.Control.DATE_MODE_SELECT, "value"),
    )
    def toggle_date_range(mode_val):
        if DateMode.coerce(mode_val) is DateMode.RANGE:
            return {}
        return {"display": "none"}
