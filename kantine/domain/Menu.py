"""Menu domain types: weekly/daily menus and the outcome of fetching them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, List, Optional, TypeVar, Union

# Day label as the upstream writes it (e.g. "Mandag 10/2") -> dish names.
# Entries may be null or blank; non_blank drops them before rendering.
WeeklyMenu = Dict[str, List[Optional[str]]]
DailyMenu = List[Optional[str]]
FullMenuText = str

T = TypeVar("T")


@dataclass(frozen=True)
class MenuFetched(Generic[T]):
    data: T


@dataclass(frozen=True)
class SourceUnavailable:
    """The upstream could not be reached or returned something unusable."""
    reason: str = ""


MenuResult = Union[MenuFetched[T], SourceUnavailable]


def non_blank(dishes: List[Optional[str]]) -> List[str]:
    """Drop null, empty and whitespace-only dish names, keeping order."""
    return [d for d in dishes if d and d.strip()]
