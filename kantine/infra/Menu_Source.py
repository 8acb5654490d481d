"""Upstream menu source: the cafeteria's menu endpoints, read over HTTP.

Every fetch returns a MenuResult. Whatever goes wrong upstream (network,
status code, bad JSON, wrong shape) collapses into SourceUnavailable so the
caller only has one failure case to handle.
"""
import logging
from typing import Any, Optional, Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from kantine.domain.Menu import (
    DailyMenu,
    FullMenuText,
    MenuFetched,
    MenuResult,
    SourceUnavailable,
    WeeklyMenu,
)
from kantine.utilities.config import (
    HTTP_TIMEOUT,
    MENU_DAILY_PATH,
    MENU_SOURCE_URL,
    MENU_TEXT_PATH,
    MENU_WEEKLY_PATH,
)

logger = logging.getLogger(__name__)

_WEEKLY = TypeAdapter(WeeklyMenu)
_DAILY = TypeAdapter(DailyMenu)


class MenuSource(Protocol):
    async def fetch_weekly_menu(self) -> MenuResult[WeeklyMenu]: ...
    async def fetch_daily_menu(self) -> MenuResult[DailyMenu]: ...
    async def fetch_entire_menu_as_text(self) -> MenuResult[FullMenuText]: ...


class WorkplaceMenuSource:
    def __init__(self, base_url: str = MENU_SOURCE_URL, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url
        self.client = client

    async def fetch_weekly_menu(self) -> MenuResult[WeeklyMenu]:
        return await self._fetch_json(MENU_WEEKLY_PATH, _WEEKLY)

    async def fetch_daily_menu(self) -> MenuResult[DailyMenu]:
        return await self._fetch_json(MENU_DAILY_PATH, _DAILY)

    async def fetch_entire_menu_as_text(self) -> MenuResult[FullMenuText]:
        try:
            response = await self._get(MENU_TEXT_PATH)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self._unavailable(MENU_TEXT_PATH, e)
        # Preformatted: passed on untouched, only checked for content
        if not response.text.strip():
            return self._unavailable(MENU_TEXT_PATH, "empty menu text")
        return MenuFetched(response.text)

    async def _fetch_json(self, path: str, adapter: TypeAdapter) -> MenuResult[Any]:
        try:
            response = await self._get(path)
            data = adapter.validate_json(response.content)
        except (httpx.HTTPError, httpx.InvalidURL, ValidationError) as e:
            return self._unavailable(path, e)
        return MenuFetched(data)

    async def _get(self, path: str) -> httpx.Response:
        # Trailing slash so join() appends to the base path instead of replacing its last segment
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        url = httpx.URL(base).join(path)
        if self.client is not None:
            response = await self.client.get(url)
        else:
            async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as client:
                response = await client.get(url)
        response.raise_for_status()
        return response

    @staticmethod
    def _unavailable(path: str, error: Any) -> SourceUnavailable:
        logger.warning("Menu source request %s failed: %s", path, error)
        return SourceUnavailable(reason=f"{path}: {error}")
