"""Response envelope shared by every JSON endpoint.

Successful responses look like ``{"success": true, "data": ..., "message": ...}``;
list endpoints add ``count`` or ``pagination``.
"""

from typing import Any

from pydantic import BaseModel


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


def ok(data: Any = None, message: str | None = None, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"success": True, "data": data}
    if message is not None:
        body["message"] = message
    body.update(extra)
    return body


def ok_list(items: list[Any], message: str | None = None) -> dict[str, Any]:
    return ok(items, message, count=len(items))


def ok_page(
    items: list[Any], page: int, limit: int, total: int, total_pages: int
) -> dict[str, Any]:
    pagination = Pagination(page=page, limit=limit, total=total, total_pages=total_pages)
    return ok(items, pagination=pagination.model_dump())


def failure(message: str, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "message": message}
    body.update(extra)
    return body
