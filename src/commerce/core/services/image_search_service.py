"""Product image lookup for the seller "add product" tool.

Google Custom Search is tried first because it finds branded packshots;
Unsplash is the generic fallback. A provider failure is logged and the
next provider is tried; there are no retries.
"""

import httpx
from loguru import logger
from pydantic import BaseModel

from src.commerce.runtime.config.config_data import ImageSearchConfig

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"
UNSPLASH_SEARCH_URL = "https://api.unsplash.com/search/photos"

CX_HINT = (
    " (To get better results for brands, please configure Google Search Engine ID"
    " in settings)"
)


class ImageSearchCredentials(BaseModel):
    """Provider keys resolved for one lookup: stored settings first, then configuration."""

    google_api_key: str | None = None
    google_cx_id: str | None = None
    unsplash_access_key: str | None = None

    @classmethod
    def resolve(
        cls,
        config: ImageSearchConfig,
        stored_api_key: str | None = None,
        stored_cx_id: str | None = None,
    ) -> "ImageSearchCredentials":
        return cls(
            google_api_key=stored_api_key or config.google_api_key,
            google_cx_id=stored_cx_id or config.google_cx_id,
            unsplash_access_key=config.unsplash_access_key,
        )


class ImageSearchResult(BaseModel):
    image_url: str | None = None
    provider: str | None = None
    message: str

    @property
    def found(self) -> bool:
        return self.image_url is not None


class ImageSearchService:
    def __init__(
        self,
        config: ImageSearchConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        # Tests inject an httpx.MockTransport here
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._config.timeout_seconds, transport=self._transport)

    async def search(
        self, query: str, credentials: ImageSearchCredentials
    ) -> ImageSearchResult:
        image_url: str | None = None
        provider: str | None = None

        if credentials.google_api_key and credentials.google_cx_id:
            image_url = await self._search_google(query, credentials)
            provider = "google" if image_url else None

        if not image_url and credentials.unsplash_access_key:
            image_url = await self._search_unsplash(query, credentials.unsplash_access_key)
            provider = "unsplash" if image_url else None

        if image_url:
            return ImageSearchResult(
                image_url=image_url, provider=provider, message="Image found successfully"
            )

        message = "No image found."
        if not credentials.google_cx_id:
            message += CX_HINT
        return ImageSearchResult(message=message)

    async def _search_google(
        self, query: str, credentials: ImageSearchCredentials
    ) -> str | None:
        logger.info("Image search via Google Custom Search for {!r}", query)
        params = {
            "key": credentials.google_api_key,
            "cx": credentials.google_cx_id,
            "q": query + self._config.google_query_suffix,
            "searchType": "image",
            "num": 1,
            "imgSize": "large",
            "safe": "active",
        }
        try:
            async with self._client() as client:
                response = await client.get(GOOGLE_SEARCH_URL, params=params)
                response.raise_for_status()
                items = response.json().get("items") or []
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Google image search failed: {}", e)
            return None

        if not items:
            logger.warning("Google image search returned 0 results")
            return None
        return items[0].get("link")

    async def _search_unsplash(self, query: str, access_key: str) -> str | None:
        logger.info("Image search falling back to Unsplash for {!r}", query)
        try:
            async with self._client() as client:
                response = await client.get(
                    UNSPLASH_SEARCH_URL,
                    params={"query": query, "per_page": 1, "orientation": "squarish"},
                    headers={"Authorization": f"Client-ID {access_key}"},
                )
                response.raise_for_status()
                results = response.json().get("results") or []
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Unsplash image search failed: {}", e)
            return None

        if not results:
            logger.warning("Unsplash image search returned 0 results")
            return None
        return results[0].get("urls", {}).get("regular")
