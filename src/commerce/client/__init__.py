"""Async client helpers used by the admin and seller apps.

They mirror the products locally, track edits, and push them back over the
REST API.
"""

from .api_client import CommerceApiClient
from .bulk_edit import BulkEditSession, EditableRow
from .dispatch import dispatch_updates
from .errors import ApiClientError, BulkSaveError
from .stock_table import StockTable

__all__ = [
    "ApiClientError",
    "BulkEditSession",
    "BulkSaveError",
    "CommerceApiClient",
    "EditableRow",
    "StockTable",
    "dispatch_updates",
]
