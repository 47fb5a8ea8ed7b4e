"""Configuration management for the grocery cost service."""
import os
from typing import Final
from pathlib import Path

# Load environment variables from .env file if it exists
try:
    from dotenv import load_dotenv
    env_path = Path(__file__).parent.parent / '.env'
    if env_path.exists():
        load_dotenv(env_path)
except ImportError:
    pass  # dotenv not installed, using defaults

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Pricing
# 1 keeps catalog lookups sequential; larger values price items on a thread pool
PRICING_MAX_WORKERS: Final[int] = max(1, int(os.getenv('PRICING_MAX_WORKERS', '1')))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
CATALOG_FILE: Final[Path] = Path(os.getenv('CATALOG_FILE', str(DATA_DIR / 'products.json')))
