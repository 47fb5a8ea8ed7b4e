from grocery.utilities.config import DATA_DIR, CATALOG_FILE

# Centralized paths for data files (single source of truth)
PRODUCTS_FILE = CATALOG_FILE.resolve()

__all__ = ['DATA_DIR', 'PRODUCTS_FILE']
