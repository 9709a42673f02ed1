from __future__ import annotations

from dataclasses import dataclass

from order_browser.core.exceptions import OrderBrowserError


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str


class ValidationError(OrderBrowserError):
    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in issues))
