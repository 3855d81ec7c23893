"""Thin async wrapper over the commerce REST API."""

from typing import Any

import httpx
from loguru import logger

from .errors import ApiClientError


class CommerceApiClient:
    """Call the API with a bearer token and unwrap the ``{success, data}`` envelope."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url, headers=headers, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> "CommerceApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """Send one request and return the full envelope.

        Raises:
            ApiClientError: For transport failures, non-2xx answers and ``success: false``
        """
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("{} {} failed: {}", method, path, exc)
            raise ApiClientError(0, str(exc)) from exc

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {"data": body}

        if response.is_error or body.get("success") is False:
            message = body.get("message") or response.reason_phrase or "Request failed"
            raise ApiClientError(response.status_code, message)
        return body

    # --- Catalog ---
    async def list_categories(self) -> list[dict[str, Any]]:
        body = await self.request("GET", "/admin/categories")
        return body.get("data") or []

    async def list_products(self, **params: Any) -> list[dict[str, Any]]:
        body = await self.request("GET", "/admin/products", params=params)
        return body.get("data") or []

    async def get_product(self, product_id: str) -> dict[str, Any]:
        body = await self.request("GET", f"/admin/products/{product_id}")
        return body["data"]

    async def update_product(self, product_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        body = await self.request("PUT", f"/admin/products/{product_id}", json=changes)
        return body["data"]

    # --- Stock ---
    async def list_stock(self, **params: Any) -> dict[str, Any]:
        return await self.request("GET", "/admin/stock", params=params)

    async def update_variation_stock(
        self, product_id: str, variation_id: str, stock: int | str
    ) -> dict[str, Any]:
        body = await self.request(
            "PATCH",
            f"/seller/products/{product_id}/variations/{variation_id}/stock",
            json={"stock": stock},
        )
        return body["data"]
