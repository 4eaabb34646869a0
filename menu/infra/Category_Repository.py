import logging
import csv
from pathlib import Path
from typing import List, Union

from menu.domain.Category import Category
from menu.infra.csv_table import parse_table
from menu.infra.paths import CATEGORIES_FILE

logger = logging.getLogger(__name__)


def parse_categories(text: str) -> List[Category]:
    return [Category.from_row(row) for row in parse_table(text)]


def reading_from_categories(location: Union[str, Path] = CATEGORIES_FILE) -> List[Category]:
    """Read categories from a CSV file; any read or parse error yields an empty list."""
    try:
        with open(location, 'r', encoding='utf-8-sig', newline='') as f:
            return parse_categories(f.read())
    except FileNotFoundError:
        logger.warning("Categories file not found: %s. Returning empty list.", location)
        return []
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.warning("Error reading categories from %s: %s", location, e)
        return []
