from types import MappingProxyType
from typing import Final, Mapping, Tuple

# English weekday names indexed by date.weekday() (0 = Monday)
WEEKDAYS: Final[Tuple[str, ...]] = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)

# English -> Norwegian Bokmål, the language the upstream menu labels its days in
DAY_NAMES: Final[Mapping[str, str]] = MappingProxyType({
    "monday": "mandag",
    "tuesday": "tirsdag",
    "wednesday": "onsdag",
    "thursday": "torsdag",
    "friday": "fredag",
    "saturday": "lørdag",
    "sunday": "søndag",
})

# Slash command keywords
HELP_COMMANDS: Final[frozenset] = frozenset({"help", "hjelp"})
ALL_COMMANDS: Final[frozenset] = frozenset({"all", "alt"})
ANNOUNCE_COMMAND: Final[str] = "announce"

# Slack
SLACK_WEBHOOK_PREFIX: Final[str] = "https://hooks.slack.com/services/"
RESPONSE_EPHEMERAL: Final[str] = "ephemeral"
RESPONSE_IN_CHANNEL: Final[str] = "in_channel"

# Message texts
DAY_HEADER: Final[str] = "Menu for {day}"
TODAY_HEADER: Final[str] = "Menu for today"
NO_MENU_FOR_DAY: Final[str] = "No menu found for {day} (nor for any other day, for that matter)"
SOURCE_DOWN: Final[str] = "The menu source appears to be down? ({url})"
NO_IMAGE_FOUND: Final[str] = "No image found :'("
BAD_WEBHOOK_URL: Final[str] = f"Requires URL. And must start with {SLACK_WEBHOOK_PREFIX}."
HELP_TEXT: Final[str] = (
    "*Commands:*\n"
    "*announce* - Posts the answer to the whole channel\n"
    "*all* - Shows the menu for the entire week\n"
    "*help* - This help.\n"
)
