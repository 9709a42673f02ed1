from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from order_browser.config.model import GlobalConfig
from order_browser.core.source import RecordSource
from order_browser.services.order_store import OrderStore


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    source: Optional[RecordSource] = None
    order_store: Optional[OrderStore] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.source is None:
            raise RuntimeError("AppConfig.source must be initialized.")
        if self.order_store is None:
            raise RuntimeError("AppConfig.order_store must be initialized.")
