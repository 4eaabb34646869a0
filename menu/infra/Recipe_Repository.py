import logging
import csv
from pathlib import Path
from typing import List, Union

from menu.domain.Recipe import Recipe
from menu.infra.csv_table import parse_table
from menu.infra.paths import MENU_LIST_FILE

logger = logging.getLogger(__name__)


def parse_recipes(text: str) -> List[Recipe]:
    return [Recipe.from_row(row) for row in parse_table(text)]


def reading_from_recipes(location: Union[str, Path] = MENU_LIST_FILE) -> List[Recipe]:
    """Read recipes from the menu list CSV with proper error handling."""
    try:
        with open(location, 'r', encoding='utf-8-sig', newline='') as f:
            return parse_recipes(f.read())
    except FileNotFoundError:
        logger.warning("Menu list file not found: %s. Returning empty list.", location)
        return []
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.warning("Error reading recipes from %s: %s", location, e)
        return []
