"""Menu message composer.

Turns a ComposerMode into the ordered list of Slack section blocks:
fetches the menu (weekly first, daily as fallback), picks today's dishes and
enriches each one with an image. An unavailable upstream never raises here;
it becomes a single fallback block.
"""
import asyncio
import logging
from datetime import datetime
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from kantine.domain.Blocks import SectionBlock
from kantine.domain.Command import ComposerMode
from kantine.domain.Menu import SourceUnavailable, WeeklyMenu, non_blank
from kantine.infra.Menu_Source import MenuSource
from kantine.logic.days.resolver import find_day, today_name
from kantine.logic.message.blocks import attachment_block, text_block
from kantine.logic.message.enricher import ImageEnricher
from kantine.utilities.config import MENU_SOURCE_URL, TIMEZONE
from kantine.utilities.constants import (
    DAY_HEADER,
    HELP_TEXT,
    NO_MENU_FOR_DAY,
    SOURCE_DOWN,
    TODAY_HEADER,
)

logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    return datetime.now(ZoneInfo(TIMEZONE))


class MenuMessageComposer:
    def __init__(self, menu_source: MenuSource, enricher: ImageEnricher,
                 clock: Optional[Callable[[], datetime]] = None):
        self.menu_source = menu_source
        self.enricher = enricher
        self.clock = clock or _local_now

    async def compose(self, mode: ComposerMode) -> List[SectionBlock]:
        if mode is ComposerMode.HELP:
            return text_block(HELP_TEXT)
        if mode is ComposerMode.FULL_WEEK_TEXT:
            return await self._compose_full_week()
        return await self._compose_single_day()

    async def _compose_full_week(self) -> List[SectionBlock]:
        result = await self.menu_source.fetch_entire_menu_as_text()
        if isinstance(result, SourceUnavailable):
            return self._source_down(result)
        # Opaque text: no splitting, no enrichment
        return text_block(result.data)

    async def _compose_single_day(self) -> List[SectionBlock]:
        weekly = await self.menu_source.fetch_weekly_menu()
        if isinstance(weekly, SourceUnavailable):
            return self._source_down(weekly)
        if weekly.data:
            return await self._compose_for_day(weekly.data)

        logger.info("Weekly menu empty, falling back to daily menu")
        daily = await self.menu_source.fetch_daily_menu()
        if isinstance(daily, SourceUnavailable):
            return self._source_down(daily)
        blocks = text_block(TODAY_HEADER)
        blocks.extend(await self._dish_blocks(daily.data))
        return blocks

    async def _compose_for_day(self, menu: WeeklyMenu) -> List[SectionBlock]:
        today = today_name(self.clock())
        key = find_day(menu, today)
        if key is None:
            logger.info("No weekly menu entry matches %s (keys: %s)", today, list(menu))
            return text_block(NO_MENU_FOR_DAY.format(day=today))
        blocks = text_block(DAY_HEADER.format(day=today))
        blocks.extend(await self._dish_blocks(menu[key]))
        return blocks

    async def _dish_blocks(self, dishes: List[str]) -> List[SectionBlock]:
        """One block per non-blank dish; lookups run concurrently, order follows the menu."""
        names = non_blank(dishes)
        urls = await asyncio.gather(*(self.enricher.find_image(name) for name in names))
        return [attachment_block(name, url) for name, url in zip(names, urls)]

    @staticmethod
    def _source_down(result: SourceUnavailable) -> List[SectionBlock]:
        logger.warning("Menu source unavailable: %s", result.reason)
        return text_block(SOURCE_DOWN.format(url=MENU_SOURCE_URL))
