"""Configuration management for the SellSheet application."""
import logging
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('SELLSHEET_HOST', '127.0.0.1')
APP_PORT: Final[int] = int(os.getenv('SELLSHEET_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('SELLSHEET_DATA_DIR', str(BASE_DIR / 'data'))).resolve()


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Global logging setup; module-level loggers inherit it."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
