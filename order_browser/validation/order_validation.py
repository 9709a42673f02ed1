from __future__ import annotations

from typing import Any, List

from order_browser.core.record import STATUSES
from order_browser.validation.errors import ValidationError, ValidationIssue


def _order_issues(obj: Any, where: str) -> List[ValidationIssue]:
    if not isinstance(obj, dict):
        return [ValidationIssue("ORDER_TYPE", f"{where} must be an object.")]

    issues: List[ValidationIssue] = []
    if obj.get("id") is None or obj.get("id") == "":
        issues.append(ValidationIssue("ORDER_ID", f"{where}.id missing."))

    status = obj.get("status")
    if status not in (None, "") and status not in STATUSES:
        issues.append(
            ValidationIssue(
                "ORDER_STATUS",
                f"{where}.status {status!r} is not one of {', '.join(STATUSES)}.",
            )
        )
    return issues


def validate_orders_document(obj: Any) -> None:
    """
    Validate a raw orders document BEFORE building Records from it.

    Accepted shapes: a JSON array of orders, or an object with an "orders" array.
    All issues are collected and raised together so a bad file is reported in one go.
    """
    if isinstance(obj, dict):
        orders = obj.get("orders", [])
        if orders is None:
            orders = []
    else:
        orders = obj

    if not isinstance(orders, list):
        raise ValidationError(
            [ValidationIssue("ORDERS_TYPE", "Orders document must be a list or an object with an 'orders' list.")]
        )

    issues: List[ValidationIssue] = []
    seen: set[str] = set()

    for i, order in enumerate(orders):
        issues.extend(_order_issues(order, f"orders[{i}]"))

        if isinstance(order, dict) and order.get("id") not in (None, ""):
            key = str(order["id"])
            if key in seen:
                issues.append(ValidationIssue("ORDER_ID_DUPLICATE", f"orders[{i}].id {key!r} is duplicated."))
            seen.add(key)

    if issues:
        raise ValidationError(issues)


def validate_order_payload(obj: Any) -> None:
    """Per-order checks for a single order about to be stored."""
    issues = _order_issues(obj, "order")
    if issues:
        raise ValidationError(issues)
