import logging
from typing import Optional

from kantine.infra.Image_Searcher import ImageSource

logger = logging.getLogger(__name__)


class ImageEnricher:
    """Best-effort image lookup for a dish. Never raises; a miss is None."""

    def __init__(self, image_source: ImageSource):
        self.image_source = image_source

    async def find_image(self, dish_name: str) -> Optional[str]:
        try:
            url = await self.image_source.search_for_meal(dish_name)
        except Exception as e:
            logger.warning("Image lookup failed for %r: %s", dish_name, e)
            return None
        if not url:
            logger.debug("No image found for %r", dish_name)
            return None
        return url
