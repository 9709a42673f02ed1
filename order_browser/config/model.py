from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from order_browser.core.criteria import DEFAULT_PAGE_SIZE

DEFAULT_TYPE_OPTIONS = ["Book", "Medicine", "Electric", "Mobile", "Watch"]


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: navbar text
    - page_size: rows per page of the orders table
    - orders_path: resolved path of the JSON orders file
    - type_options: values offered by the type filter
    - refresh_interval_ms: how often the UI re-reads the record source
    """
    orders_path: Path
    ui_title: str = "Order Lists"
    subtitle: str = "Orders overview"
    page_size: int = DEFAULT_PAGE_SIZE
    type_options: List[str] = field(default_factory=lambda: list(DEFAULT_TYPE_OPTIONS))
    refresh_interval_ms: int = 5000
