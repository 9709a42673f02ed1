from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from order_browser.config.model import GlobalConfig
from order_browser.core.criteria import DateMode
from order_browser.ui.helpers import DATE_MODE_OPTIONS, status_options, type_options
from order_browser.ui.ids import IDs


def build_filter_panel(global_config: GlobalConfig) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filter By", className="fw-semibold"),
            dbc.CardBody(
                dbc.Row(
                    [
                        dbc.Col(
                            [
                                html.Label("Order type", className="form-label"),
                                dcc.Dropdown(
                                    id=IDs.Control.TYPE_SELECT,
                                    options=type_options(global_config.type_options),
                                    placeholder="All types",
                                ),
                            ],
                            md=3,
                        ),
                        dbc.Col(
                            [
                                html.Label("Order status", className="form-label"),
                                dcc.Dropdown(
                                    id=IDs.Control.STATUS_SELECT,
                                    options=status_options(),
                                    placeholder="All statuses",
                                ),
                            ],
                            md=3,
                        ),
                        dbc.Col(
                            [
                                html.Label("Date", className="form-label"),
                                dcc.Dropdown(
                                    id=IDs.Control.DATE_MODE_SELECT,
                                    options=DATE_MODE_OPTIONS,
                                    value=DateMode.NONE.value,
                                    placeholder="Any date",
                                ),
                                html.Div(
                                    id=IDs.Control.DATE_RANGE_CONTAINER,
                                    children=dcc.DatePickerRange(
                                        id=IDs.Control.DATE_RANGE,
                                        clearable=True,
                                        display_format="YYYY-MM-DD",
                                        className="mt-2",
                                    ),
                                    style={"display": "none"},
                                ),
                            ],
                            md=4,
                        ),
                        dbc.Col(
                            dbc.Button(
                                "Reset Filter",
                                id=IDs.Control.RESET_BTN,
                                n_clicks=0,
                                color="danger",
                                outline=True,
                                className="w-100",
                            ),
                            md=2,
                            className="d-flex align-items-end",
                        ),
                    ],
                    className="g-3",
                )
            ),
        ],
        className="ob-filter-card mb-3",
    )
