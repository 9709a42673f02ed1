from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from order_browser.config.loader import load_global_config
from order_browser.core.source import RecordSource
from order_browser.services.order_store import OrderStore
from order_browser.services.storage import LocalFileSystemStorage
from order_browser.ui.callbacks.callbacks_criteria import register_criteria_callbacks
from order_browser.ui.callbacks.callbacks_render import register_render_callbacks
from order_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Record source + order store (the store feeds the source)
    source = RecordSource()
    orders_path = global_config.orders_path
    storage = LocalFileSystemStorage(orders_path.parent)
    order_store = OrderStore(storage, source, path=orders_path.name)
    order_store.load()

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        source=source,
        order_store=order_store,
    )
    ctx.validate()

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_criteria_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_orders": len(source.records)},
    )
    return app
