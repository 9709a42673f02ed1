from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from order_browser.ui.ids import IDs


def build_orders_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardBody(
                [
                    dcc.Loading(
                        type="default",
                        children=html.Div(id=IDs.Control.ORDERS_TABLE),
                    ),
                ],
                className="p-0",
            ),
            dbc.CardFooter(
                html.Div(
                    [
                        html.Small(id=IDs.Control.SHOWING_TEXT, className="text-muted"),
                        html.Div(
                            [
                                dbc.Button(
                                    "Prev",
                                    id=IDs.Control.PREV_BTN,
                                    n_clicks=0,
                                    color="secondary",
                                    outline=True,
                                    size="sm",
                                    className="me-2",
                                ),
                                html.Span(id=IDs.Control.PAGE_LABEL, className="me-2"),
                                dbc.Button(
                                    "Next",
                                    id=IDs.Control.NEXT_BTN,
                                    n_clicks=0,
                                    color="secondary",
                                    outline=True,
                                    size="sm",
                                ),
                            ],
                            className="d-flex align-items-center ms-auto",
                        ),
                    ],
                    className="d-flex align-items-center",
                )
            ),
        ],
        className="ob-orders-card",
    )
