"""
Top-level package for the order browser dashboard.

This package exposes the core query pipeline, its storage adapters and the
Dash UI. Most code should import from submodules such as:
    order_browser.core
    order_browser.services
    order_browser.ui
"""

__all__: list[str] = []
