"""
Adapters around the core: storage backends and the JSON-file order store.
"""

from .order_store import OrderStore
from .storage import LocalFileSystemStorage, StorageBackend

__all__ = ["OrderStore", "LocalFileSystemStorage", "StorageBackend"]
