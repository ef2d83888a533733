from sellsheet.utilities.config import DATA_DIR
from sellsheet.utilities.constants import STORAGE_KEY

# Centralized paths for data files (single source of truth)
STATE_FILE = DATA_DIR / f'{STORAGE_KEY}.json'
SAVED_RECIPES_FILE = DATA_DIR / 'saved_recipes.json'

__all__ = ['DATA_DIR', 'STATE_FILE', 'SAVED_RECIPES_FILE']
