"""
Config package for order_browser.

Responsible for:
- the GlobalConfig model
- loading global.json from a config root
"""

from .loader import load_global_config
from .model import GlobalConfig

__all__ = ["GlobalConfig", "load_global_config"]
