"""Unit tests for product image lookup."""

from src.commerce.core.services import ImageSearchCredentials
from src.commerce.core.services.image_search_service import CX_HINT
from src.commerce.runtime.config.config_data import ImageSearchConfig

GOOGLE_ONLY = ImageSearchCredentials(google_api_key="g-key", google_cx_id="cx-1")
BOTH = ImageSearchCredentials(
    google_api_key="g-key", google_cx_id="cx-1", unsplash_access_key="u-key"
)


class TestCredentials:
    def test_stored_values_win_over_config(self):
        config = ImageSearchConfig(google_api_key="env-key", google_cx_id="env-cx")

        resolved = ImageSearchCredentials.resolve(config, "db-key", "db-cx")
        assert resolved.google_api_key == "db-key"
        assert resolved.google_cx_id == "db-cx"

    def test_config_fills_gaps(self):
        config = ImageSearchConfig(google_api_key="env-key", unsplash_access_key="u-key")

        resolved = ImageSearchCredentials.resolve(config, None, None)
        assert resolved.google_api_key == "env-key"
        assert resolved.google_cx_id == config.google_cx_id
        assert resolved.unsplash_access_key == "u-key"


async def test_google_result_is_used(image_search_service, image_providers):
    image_providers.google_items = [{"link": "https://img.test/vaseline.jpg"}]

    result = await image_search_service.search("Vaseline", BOTH)

    assert result.found
    assert result.image_url == "https://img.test/vaseline.jpg"
    assert result.provider == "google"
    assert image_providers.hosts() == ["www.googleapis.com"]
    params = image_providers.calls[0].url.params
    assert params["q"] == "Vaseline product india"
    assert params["cx"] == "cx-1"
    assert params["searchType"] == "image"


async def test_falls_back_to_unsplash_on_empty_google(image_search_service, image_providers):
    image_providers.unsplash_results = [{"urls": {"regular": "https://unsplash.test/1.jpg"}}]

    result = await image_search_service.search("teapot", BOTH)

    assert result.provider == "unsplash"
    assert result.image_url == "https://unsplash.test/1.jpg"
    assert image_providers.hosts() == ["www.googleapis.com", "api.unsplash.com"]
    assert image_providers.calls[1].headers["Authorization"] == "Client-ID u-key"


async def test_falls_back_to_unsplash_on_google_error(image_search_service, image_providers):
    image_providers.google_status = 403
    image_providers.unsplash_results = [{"urls": {"regular": "https://unsplash.test/2.jpg"}}]

    result = await image_search_service.search("teapot", BOTH)

    assert result.image_url == "https://unsplash.test/2.jpg"


async def test_nothing_found(image_search_service, image_providers):
    result = await image_search_service.search("teapot", GOOGLE_ONLY)

    assert not result.found
    assert result.message == "No image found."
    assert image_providers.hosts() == ["www.googleapis.com"]


async def test_missing_cx_adds_hint_and_skips_google(image_search_service, image_providers):
    credentials = ImageSearchCredentials(google_api_key="g-key", unsplash_access_key="u-key")

    result = await image_search_service.search("teapot", credentials)

    assert result.message == "No image found." + CX_HINT
    assert image_providers.hosts() == ["api.unsplash.com"]


async def test_no_credentials_makes_no_calls(image_search_service, image_providers):
    result = await image_search_service.search("teapot", ImageSearchCredentials(google_cx_id="cx"))

    assert not result.found
    assert image_providers.calls == []
