"""Product catalog repositories (read-only price data scraped from stores).

The catalog is the only collaborator of the pricing logic that can fail for
infrastructure reasons; such failures surface as CatalogError.
"""
from __future__ import annotations
import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol

from grocery.domain.Product import ProductRecord
from grocery.infra.paths import PRODUCTS_FILE
from grocery.logic.matching import DEFAULT_MATCHER, NameMatcher

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    """The product catalog could not be read."""


class ProductCatalog(Protocol):
    def search(self, name: str) -> List[ProductRecord]:
        """Return every product whose name matches ``name``, latest price only."""
        ...


class InMemoryProductCatalog:
    def __init__(self, records: Iterable[ProductRecord] = (), matcher: NameMatcher = DEFAULT_MATCHER):
        self.records: List[ProductRecord] = list(records)
        self.matcher = matcher

    def add(self, record: ProductRecord) -> None:
        self.records.append(record)

    def search(self, name: str) -> List[ProductRecord]:
        return [r for r in self.records if self.matcher.matches(name, r.product_name)]


def _latest_price(prices: List[Dict[str, Any]]) -> Optional[int]:
    '''Most recent price_cents by ISO collected_at date; None if there are no prices.'''
    dated = [p for p in prices if isinstance(p, dict) and p.get('price_cents') is not None]
    if not dated:
        return None
    latest = max(dated, key=lambda p: str(p.get('collected_at') or ''))
    return int(latest['price_cents'])


def parse_catalog(stores: List[Dict[str, Any]]) -> List[ProductRecord]:
    """Flatten the stores/products/prices document into ProductRecords.

    Products without any recorded price are left out. Rows of the wrong
    shape raise TypeError, ValueError or AttributeError.
    """
    records: List[ProductRecord] = []
    for store in stores:
        store_name = store.get('name', '')
        template = store.get('affiliate_url_template')
        for p in store.get('products', []) or []:
            price = _latest_price(p.get('prices') or [])
            if price is None:
                logger.debug("Skipping %r at %s: no prices collected", p.get('name'), store_name)
                continue
            records.append(ProductRecord.from_dict({
                **p,
                'store': store_name,
                'product_name': p.get('name'),
                'price_cents': price,
                'affiliate_url_template': template,
            }))
    return records


class JsonProductCatalog:
    """Catalog backed by the JSON file the price scrapers write."""

    def __init__(self, path: Optional[Path] = None, matcher: NameMatcher = DEFAULT_MATCHER):
        self.path = Path(path) if path is not None else PRODUCTS_FILE
        self.matcher = matcher
        self._records: Optional[List[ProductRecord]] = None
        self._lock = threading.Lock()

    def _load(self) -> List[ProductRecord]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                stores = json.load(f)
        except FileNotFoundError as e:
            logger.error("Product catalog not found: %s", self.path)
            raise CatalogError(f"Product catalog not found: {self.path}") from e
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in product catalog %s: %s", self.path, e)
            raise CatalogError(f"Invalid product catalog: {e}") from e
        except OSError as e:
            logger.error("Error reading product catalog %s: %s", self.path, e)
            raise CatalogError(f"Product catalog unreadable: {e}") from e
        if not isinstance(stores, list):
            raise CatalogError("Product catalog must be a list of stores")
        try:
            records = parse_catalog(stores)
        except (TypeError, ValueError, AttributeError) as e:
            logger.error("Malformed product catalog %s: %s", self.path, e)
            raise CatalogError(f"Malformed product catalog: {e}") from e
        logger.info("Loaded %d products from %s", len(records), self.path)
        return records

    def records(self) -> List[ProductRecord]:
        with self._lock:
            if self._records is None:
                self._records = self._load()
            return self._records

    def reload(self) -> None:
        with self._lock:
            self._records = None

    def search(self, name: str) -> List[ProductRecord]:
        return [r for r in self.records() if self.matcher.matches(name, r.product_name)]


__all__ = ['CatalogError', 'ProductCatalog', 'InMemoryProductCatalog', 'JsonProductCatalog', 'parse_catalog']
