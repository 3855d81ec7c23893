"""Domain errors raised by repositories and services.

Each error carries the HTTP status the API layer renders it with, so the
handlers in ``api.http.app`` stay a single generic translation.
"""


class CommerceError(Exception):
    """Base class for expected, user-facing failures."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(CommerceError):
    status_code = 400


class PermissionDeniedError(CommerceError):
    status_code = 403


class NotFoundError(CommerceError):
    status_code = 404

    def __init__(self, resource: str, identifier: str | None = None) -> None:
        message = f"{resource} not found"
        if identifier is not None:
            message = f"{resource} '{identifier}' not found"
        super().__init__(message)
        self.resource = resource
        self.identifier = identifier


class ConflictError(CommerceError):
    """The request is valid but not in the record's current state."""

    status_code = 409
