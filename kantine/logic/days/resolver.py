"""Weekday resolution against the upstream's Norwegian day labels.

Provides resolve_day_name(name), today_name(now) and find_day(menu, day).
"""
from datetime import datetime
from typing import Optional

from kantine.domain.Menu import WeeklyMenu
from kantine.utilities.constants import DAY_NAMES, WEEKDAYS


def resolve_day_name(name: str) -> str:
    """Translate an English weekday name to Norwegian; unknown names pass through normalised."""
    day = (name or "").strip().lower()
    return DAY_NAMES.get(day, day)


def today_name(now: datetime) -> str:
    # Looked up by index so the result does not depend on the host LC_TIME locale
    return resolve_day_name(WEEKDAYS[now.weekday()])


def find_day(menu: WeeklyMenu, day: str) -> Optional[str]:
    """Return the first menu key containing ``day`` (case-insensitive), or None.

    Upstream labels often carry extra text ("Mandag 10/2"), so this is a
    substring match rather than equality. If several keys match, the first in
    iteration order wins.
    """
    needle = day.lower()
    for key in menu:
        if needle in key.lower():
            return key
    return None
