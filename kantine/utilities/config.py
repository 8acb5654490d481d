"""Configuration management for the Kantine Slack service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Upstream menu source
MENU_SOURCE_URL: Final[str] = os.getenv('MENU_SOURCE_URL', 'https://workplace.izy.as/')
MENU_WEEKLY_PATH: Final[str] = os.getenv('MENU_WEEKLY_PATH', 'api/menu/week')
MENU_DAILY_PATH: Final[str] = os.getenv('MENU_DAILY_PATH', 'api/menu/today')
MENU_TEXT_PATH: Final[str] = os.getenv('MENU_TEXT_PATH', 'api/menu/week.txt')

# Image search (Google Custom Search, image mode)
IMAGE_SEARCH_URL: Final[str] = os.getenv('IMAGE_SEARCH_URL', 'https://www.googleapis.com/customsearch/v1')
IMAGE_SEARCH_API_KEY: Final[str] = os.getenv('IMAGE_SEARCH_API_KEY', '')
IMAGE_SEARCH_ENGINE_ID: Final[str] = os.getenv('IMAGE_SEARCH_ENGINE_ID', '')

# Outbound HTTP
HTTP_TIMEOUT: Final[float] = float(os.getenv('HTTP_TIMEOUT', '10'))

# "Today" is evaluated in the cafeteria's timezone, not the host's
TIMEZONE: Final[str] = os.getenv('TIMEZONE', 'Europe/Oslo')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()
