from typing import Optional

from kantine.domain.Command import Command, ComposerMode
from kantine.utilities.constants import ALL_COMMANDS, ANNOUNCE_COMMAND, HELP_COMMANDS


def interpret(text: Optional[str]) -> Command:
    """Classify slash command text. Help beats all; anything else is today's menu."""
    words = set((text or "").lower().split())
    if words & HELP_COMMANDS:
        mode = ComposerMode.HELP
    elif words & ALL_COMMANDS:
        mode = ComposerMode.FULL_WEEK_TEXT
    else:
        mode = ComposerMode.SINGLE_DAY
    return Command(mode=mode, announce=ANNOUNCE_COMMAND in words)
