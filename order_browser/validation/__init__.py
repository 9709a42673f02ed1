"""
Structural checks applied to raw order documents before they reach the core.
"""

from .errors import ValidationError, ValidationIssue
from .order_validation import validate_order_payload, validate_orders_document

__all__ = [
    "ValidationError",
    "ValidationIssue",
    "validate_order_payload",
    "validate_orders_document",
]
