from pathlib import Path

# Centralized paths for bundled data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
CATEGORIES_FILE = DATA_DIR / 'cat.csv'
MENU_LIST_FILE = DATA_DIR / 'menu_list.csv'

__all__ = ['DATA_DIR', 'CATEGORIES_FILE', 'MENU_LIST_FILE']
