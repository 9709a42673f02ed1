"""
Core domain layer: order records, filter criteria, the query engine,
the paginator and the view publisher that composes them
"""

from .criteria import Criteria, CriteriaStore, DateMode, PageState
from .paginator import Page, paginate
from .publisher import ViewPublisher, ViewSnapshot, compose_view
from .query_engine import apply_criteria
from .record import Record, Status, STATUSES, records_from_document, status_class
from .source import RecordSource

__all__ = [
    "Criteria",
    "CriteriaStore",
    "DateMode",
    "PageState",
    "Page",
    "paginate",
    "ViewPublisher",
    "ViewSnapshot",
    "compose_view",
    "apply_criteria",
    "Record",
    "Status",
    "STATUSES",
    "records_from_document",
    "status_class",
    "RecordSource",
]
