"""Shopping list cost estimation.

Each grocery line is matched to its cheapest comparable product and costed
as exact unit price x exact aggregated quantity, rounded to whole cents.
Unmatched lines are kept with empty pricing and left out of the total.
"""
from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from grocery.domain.GroceryLineItem import GroceryLineItem
from grocery.domain.Pricing import AggregationResult, PricedLineItem
from grocery.domain.Product import MatchResult
from grocery.logic.pricing.matcher import PriceMatcher
from grocery.logic.units.converter import UnitConverter
from grocery.utilities.rounding import round_cents

logger = logging.getLogger(__name__)

__all__ = ["CostEstimator"]


class CostEstimator:
    def __init__(self, matcher: PriceMatcher, max_workers: int = 1,
                 converter: Optional[UnitConverter] = None):
        self.matcher = matcher
        self.max_workers = max(1, int(max_workers))
        self.converter = converter or matcher.converter

    def _lookup(self, item: GroceryLineItem) -> Optional[MatchResult]:
        return self.matcher.find_cheapest(item.name, self.converter.base_unit(item.unit))

    def _matches(self, items: Sequence[GroceryLineItem]) -> List[Optional[MatchResult]]:
        if self.max_workers == 1 or len(items) < 2:
            return [self._lookup(item) for item in items]
        # map() yields in submission order, so results line up with items by index
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(items))) as pool:
            return list(pool.map(self._lookup, items))

    def price_items(self, items: Sequence[GroceryLineItem]) -> AggregationResult:
        """Price every grocery line; the output lines follow the input order."""
        items = list(items)
        lines: List[PricedLineItem] = []
        total = 0
        for item, match in zip(items, self._matches(items)):
            if match is None:
                logger.warning("No price found for %r (%s)", item.name, item.unit)
                lines.append(PricedLineItem.unmatched(item))
                continue
            _, base_value = self.converter.package_to_base(item.exact_quantity, item.unit)
            estimated = round_cents(match.unit_price * base_value)
            total += estimated
            lines.append(PricedLineItem.matched(item, match, estimated))

        result = AggregationResult(lines, total)
        logger.info("Priced %d of %d grocery items, total %d cents", result.priced_count, len(lines), total)
        return result
