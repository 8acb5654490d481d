"""Command domain entity: what an inbound slash command asks for."""
from dataclasses import dataclass
from enum import Enum

from kantine.utilities.constants import RESPONSE_EPHEMERAL, RESPONSE_IN_CHANNEL


class ComposerMode(Enum):
    SINGLE_DAY = "single_day"
    FULL_WEEK_TEXT = "full_week_text"
    HELP = "help"


@dataclass(frozen=True)
class Command:
    mode: ComposerMode = ComposerMode.SINGLE_DAY
    announce: bool = False

    @property
    def response_type(self) -> str:
        # announce only changes who sees the answer, never its content
        return RESPONSE_IN_CHANNEL if self.announce else RESPONSE_EPHEMERAL
