"""Client-side errors."""


class ApiClientError(Exception):
    """The API answered with a non-2xx status or ``success: false``."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class BulkSaveError(Exception):
    """At least one update in a batch failed.

    The other updates of the batch were still sent; ``__cause__`` is the
    first failure in batch order.
    """

    def __init__(self, failed_ids: list[str], total: int) -> None:
        super().__init__(f"Failed to save {len(failed_ids)} of {total} changes")
        self.failed_ids = failed_ids
        self.total = total
