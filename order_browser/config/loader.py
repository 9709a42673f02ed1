from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from order_browser.config.model import DEFAULT_TYPE_OPTIONS, GlobalConfig
from order_browser.core.criteria import DEFAULT_PAGE_SIZE
from order_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _positive_int(raw: dict, key: str, default: int) -> int:
    value: Any = raw.get(key, default)
    if isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
    try:
        out = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
    if out < 1:
        raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
    return out


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json
            orders.json      (or whatever 'orders_file' points at)

    Recognised keys in global.json (all optional):

    - ui_title: navbar title, defaults to 'Order Lists'
    - subtitle: navbar subtitle
    - page_size: rows per page, defaults to 9
    - orders_file: orders JSON file; relative paths resolve against root
    - type_options: list of order types offered in the type filter
    - refresh_interval_ms: UI polling interval for the record source

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if a value is malformed.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    # Absolute paths are used as-is, relative ones resolve against the config root.
    orders_path = Path(raw.get("orders_file", "orders.json"))
    if not orders_path.is_absolute():
        orders_path = (root / orders_path).resolve()

    type_options = raw.get("type_options", DEFAULT_TYPE_OPTIONS)
    if not isinstance(type_options, list) or not all(isinstance(t, str) for t in type_options):
        raise ConfigError("'type_options' must be a list of strings")

    config = GlobalConfig(
        orders_path=orders_path,
        ui_title=raw.get("ui_title", "Order Lists"),
        subtitle=raw.get("subtitle", "Orders overview"),
        page_size=_positive_int(raw, "page_size", DEFAULT_PAGE_SIZE),
        type_options=list(type_options),
        refresh_interval_ms=_positive_int(raw, "refresh_interval_ms", 5000),
    )

    logger.info(
        "Global config loaded",
        extra={
            "config_root": str(root),
            "orders_path": str(config.orders_path),
            "page_size": config.page_size,
        },
    )
    return config
