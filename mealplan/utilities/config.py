"""Configuration management for the meal plan assistant."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Model Configuration
OPENAI_MODEL: Final[str] = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# Planning limits
MAX_DURATION_DAYS: Final[int] = int(os.getenv('MAX_DURATION_DAYS', '7'))

# Calendar API
CALENDAR_API_BASE: Final[str] = os.getenv('CALENDAR_API_BASE', 'https://www.googleapis.com/calendar/v3')
CALENDAR_TIMEOUT_SECONDS: Final[float] = float(os.getenv('CALENDAR_TIMEOUT_SECONDS', '15'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
SETTINGS_FILE: Final[Path] = Path(os.getenv('SETTINGS_FILE', str(DATA_DIR / 'settings.json')))
