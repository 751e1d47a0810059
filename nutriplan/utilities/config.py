"""Configuration management for the nutrition plan card core."""
import logging
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Rendering
ENABLE_DRAG_DROP: Final[bool] = _env_bool('NUTRIPLAN_ENABLE_DRAG_DROP', 'False')

# Size of the per-level drag identifier caches
ID_CACHE_SIZE: Final[int] = int(os.getenv('NUTRIPLAN_ID_CACHE_SIZE', '256'))

# Keep a few hundred recent intents in the in-memory intent log
INTENT_LOG_MAX: Final[int] = int(os.getenv('NUTRIPLAN_INTENT_LOG_MAX', '300'))

# Logging
LOG_LEVEL: Final[str] = os.getenv('NUTRIPLAN_LOG_LEVEL', 'WARNING').upper()
DEBUG: Final[bool] = _env_bool('DEBUG', 'False')


def configure_logging(level: str | None = None) -> None:
    """Attach a basic handler to the package logger (applications usually do this themselves)."""
    resolved = level or ('DEBUG' if DEBUG else LOG_LEVEL)
    logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger('nutriplan').setLevel(resolved)
