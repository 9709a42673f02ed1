import json
from pathlib import Path

import pytest

from order_browser.config import load_global_config
from order_browser.config.model import DEFAULT_TYPE_OPTIONS
from order_browser.core.exceptions import ConfigError


def _write_global(root: Path, data) -> None:
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps(data))


def test_defaults_from_empty_global(tmp_path):
    config_root = tmp_path / "config"
    _write_global(config_root, {})

    config = load_global_config(config_root)

    assert config.ui_title == "Order Lists"
    assert config.page_size == 9
    assert config.type_options == DEFAULT_TYPE_OPTIONS
    assert config.refresh_interval_ms == 5000
    assert config.orders_path == (config_root / "orders.json").resolve()


def test_values_from_global(tmp_path):
    config_root = tmp_path / "config"
    orders_file = tmp_path / "elsewhere" / "orders.json"
    _write_global(
        config_root,
        {
            "ui_title": "Shop Orders",
            "subtitle": "Back office",
            "page_size": 4,
            "orders_file": str(orders_file),
            "type_options": ["Book", "Toy"],
            "refresh_interval_ms": 1000,
        },
    )

    config = load_global_config(str(config_root))

    assert config.ui_title == "Shop Orders"
    assert config.subtitle == "Back office"
    assert config.page_size == 4
    assert config.orders_path == orders_file
    assert config.type_options == ["Book", "Toy"]
    assert config.refresh_interval_ms == 1000


def test_relative_orders_file_resolves_against_root(tmp_path):
    config_root = tmp_path / "config"
    _write_global(config_root, {"orders_file": "data/orders.json"})

    config = load_global_config(config_root)

    assert config.orders_path == (config_root / "data" / "orders.json").resolve()


def test_missing_global_json(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


@pytest.mark.parametrize(
    "data",
    [
        ["not", "an", "object"],
        {"page_size": 0},
        {"page_size": "many"},
        {"page_size": True},
        {"refresh_interval_ms": -5},
        {"type_options": "Book"},
        {"type_options": ["Book", 3]},
    ],
)
def test_malformed_values_raise_config_error(tmp_path, data):
    _write_global(tmp_path, data)

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_invalid_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{ nope")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_global_config(tmp_path)
