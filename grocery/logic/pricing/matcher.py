"""Cheapest comparable product lookup.

Candidates come from the catalog by name, their package sizes are converted
to base units, and only those in the wanted base unit are compared by price
per base unit (e.g. cents per gram). A missing or incomparable product is a
None result, never an exception; catalog failures propagate.
"""
from __future__ import annotations
import logging
import math
from typing import List, Optional
from urllib.parse import quote

from grocery.domain.Product import MatchResult, ProductRecord
from grocery.infra.Product_Catalog import ProductCatalog
from grocery.logic.units.converter import DEFAULT_CONVERTER, UnitConverter
from grocery.utilities.constants import AFFILIATE_QUERY_PLACEHOLDER, COUNT_UNIT
from grocery.utilities.rounding import round_cents

logger = logging.getLogger(__name__)

__all__ = [
    "PriceMatcher", "units_compatible", "count_units_always_comparable", "build_affiliate_url",
]


def count_units_always_comparable(record_unit: str, desired_unit: str) -> bool:
    '''A product sold by the piece compares with any count request, whatever its size label says.'''
    return record_unit == COUNT_UNIT and desired_unit == COUNT_UNIT


def units_compatible(package_unit: str, desired_unit: str, record_unit: Optional[str] = None) -> bool:
    if package_unit == desired_unit:
        return True
    return record_unit is not None and count_units_always_comparable(record_unit, desired_unit)


def build_affiliate_url(template: Optional[str], query: str) -> Optional[str]:
    if not template:
        return None
    return template.replace(AFFILIATE_QUERY_PLACEHOLDER, quote(query, safe=''))


class PriceMatcher:
    def __init__(self, catalog: ProductCatalog, converter: Optional[UnitConverter] = None):
        self.catalog = catalog
        self.converter = converter or DEFAULT_CONVERTER

    def _candidate(self, record: ProductRecord, ingredient_name: str, desired: str) -> Optional[MatchResult]:
        record_unit = self.converter.normalize_unit(record.unit)
        if count_units_always_comparable(record_unit, desired):
            # size_value is the piece count even when size_unit reads "gab." or "pack"
            base_unit, base_size = COUNT_UNIT, float(record.size_value)
        else:
            base_unit, base_size = self.converter.package_to_base(record.size_value, record.size_unit)
        if not math.isfinite(base_size) or base_size <= 0:
            logger.debug("Skipping %r: unusable package size %r %s", record.product_name, record.size_value, record.size_unit)
            return None
        if not units_compatible(base_unit, desired, record_unit):
            logger.debug("Skipping %r: %s is not comparable with %s", record.product_name, base_unit, desired)
            return None
        unit_price = record.price_cents / base_size
        return MatchResult(
            store_name=record.store,
            product_name=record.product_name,
            unit_price=unit_price,
            unit_price_cents=round_cents(unit_price),
            package_base_unit=base_unit,
            package_base_size=base_size,
            affiliate_url=build_affiliate_url(record.affiliate_url_template, ingredient_name),
        )

    def compare_options(self, ingredient_name: str, desired_base_unit: str) -> List[MatchResult]:
        """Every comparable product for the ingredient, cheapest per base unit first.

        Equal unit prices keep catalog order.
        """
        if not (ingredient_name or '').strip():
            return []
        desired = self.converter.base_unit(desired_base_unit)
        options = []
        for record in self.catalog.search(ingredient_name):
            match = self._candidate(record, ingredient_name, desired)
            if match is not None:
                options.append(match)
        options.sort(key=lambda m: m.unit_price)
        return options

    def find_cheapest(self, ingredient_name: str, desired_base_unit: str) -> Optional[MatchResult]:
        """Cheapest comparable product, or None.

        ``desired_base_unit`` goes through the unit table first, so "kg"
        behaves like "g". Ties on unit price go to the first product the
        catalog returned.
        """
        if not (ingredient_name or '').strip():
            return None
        desired = self.converter.base_unit(desired_base_unit)
        best: Optional[MatchResult] = None
        for record in self.catalog.search(ingredient_name):
            match = self._candidate(record, ingredient_name, desired)
            if match is not None and (best is None or match.unit_price < best.unit_price):
                best = match
        if best is None:
            logger.debug("No comparable product for %r in %s", ingredient_name, desired)
        return best
