"""Configuration management for the Menu Lottery application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
STATIC_DIR: Final[Path] = BASE_DIR / 'static'
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'

# Resource locations: a local path or an http(s) URL
CATEGORIES_LOCATION: Final[str] = os.getenv('CATEGORIES_LOCATION', str(DATA_DIR / 'cat.csv'))
MENU_LIST_LOCATION: Final[str] = os.getenv('MENU_LIST_LOCATION', str(DATA_DIR / 'menu_list.csv'))
