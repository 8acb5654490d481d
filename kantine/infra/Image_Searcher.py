"""Image search for dish names via the Google Custom Search JSON API."""
import logging
from typing import Optional, Protocol

import httpx

from kantine.utilities.config import (
    HTTP_TIMEOUT,
    IMAGE_SEARCH_API_KEY,
    IMAGE_SEARCH_ENGINE_ID,
    IMAGE_SEARCH_URL,
)

logger = logging.getLogger(__name__)


class ImageSource(Protocol):
    async def search_for_meal(self, dish_name: str) -> Optional[str]: ...


class GoogleImageSearcher:
    def __init__(self, api_key: str = IMAGE_SEARCH_API_KEY, engine_id: str = IMAGE_SEARCH_ENGINE_ID,
                 client: Optional[httpx.AsyncClient] = None):
        self.api_key = api_key
        self.engine_id = engine_id
        self.client = client

    async def search_for_meal(self, dish_name: str) -> Optional[str]:
        """Return the URL of the first image hit for ``dish_name``, or None."""
        if not (self.api_key and self.engine_id):
            logger.debug("Image search not configured; skipping %r", dish_name)
            return None
        params = {
            "key": self.api_key,
            "cx": self.engine_id,
            "q": dish_name,
            "searchType": "image",
            "num": 1,
            "safe": "active",
        }
        try:
            if self.client is not None:
                response = await self.client.get(IMAGE_SEARCH_URL, params=params)
            else:
                async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as client:
                    response = await client.get(IMAGE_SEARCH_URL, params=params)
            response.raise_for_status()
            items = response.json().get("items") or []
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.warning("Image search failed for %r: %s", dish_name, e)
            return None
        if not items or not isinstance(items[0], dict):
            return None
        return items[0].get("link") or None
