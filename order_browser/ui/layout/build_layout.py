from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from order_browser.core.criteria import CriteriaStore
from order_browser.ui.ids import IDs
from order_browser.ui.layout.build_filter_panel import build_filter_panel
from order_browser.ui.layout.build_navbar import build_navbar
from order_browser.ui.layout.build_orders_panel import build_orders_panel

if TYPE_CHECKING:
    from order_browser.ui.config import AppConfig


def initial_criteria_data(page_size: int) -> dict:
    """Default criteria store contents for a fresh session."""
    return CriteriaStore.from_dict({}, page_size=page_size).to_dict()


def build_layout(ctx: AppConfig):
    cfg = ctx.global_config

    return dbc.Container(
        fluid=True,
        className="ob-root",
        children=[
            build_navbar(cfg),

            # Per-page-load criteria; records live server-side in the RecordSource
            dcc.Store(
                id=IDs.Store.CRITERIA,
                storage_type="memory",
                data=initial_criteria_data(cfg.page_size),
            ),
            dcc.Store(id=IDs.Store.SOURCE_VERSION, storage_type="memory"),
            dcc.Interval(id=IDs.Control.SOURCE_POLL, interval=cfg.refresh_interval_ms),

            html.Div(
                [
                    build_filter_panel(cfg),
                    build_orders_panel(),
                    html.Div(id=IDs.Control.STATUS_BAR, className="text-muted small mt-2"),
                ],
                className="mt-3",
            ),
        ],
    )
