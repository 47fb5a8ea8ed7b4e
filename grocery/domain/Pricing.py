"""Priced shopping list: one PricedLineItem per grocery line plus the estimated total."""
from typing import Any, Dict, List, Optional

from grocery.domain.GroceryLineItem import GroceryLineItem
from grocery.domain.Product import MatchResult


class PricedLineItem:
    def __init__(self, name: str, total_quantity: float, unit: str,
                 store_name: Optional[str] = None, product_name: Optional[str] = None,
                 unit_price_cents: Optional[int] = None, estimated_cost_cents: Optional[int] = None,
                 affiliate_url: Optional[str] = None):
        self.name = name
        self.total_quantity = total_quantity
        self.unit = unit
        self.store_name = store_name
        self.product_name = product_name
        self.unit_price_cents = unit_price_cents
        self.estimated_cost_cents = estimated_cost_cents
        self.affiliate_url = affiliate_url

    @classmethod
    def unmatched(cls, item: GroceryLineItem) -> "PricedLineItem":
        '''No comparable product: every pricing field stays None.'''
        return cls(item.name, item.total_quantity, item.unit)

    @classmethod
    def matched(cls, item: GroceryLineItem, match: MatchResult, estimated_cost_cents: int) -> "PricedLineItem":
        return cls(
            item.name, item.total_quantity, item.unit,
            store_name=match.store_name,
            product_name=match.product_name,
            unit_price_cents=match.unit_price_cents,
            estimated_cost_cents=estimated_cost_cents,
            affiliate_url=match.affiliate_url,
        )

    @property
    def is_priced(self) -> bool:
        return self.estimated_cost_cents is not None

    def __str__(self) -> str:
        if not self.is_priced:
            return f"{self.name} - {self.total_quantity} {self.unit} (no price)"
        return f"{self.name} - {self.total_quantity} {self.unit} ~{self.estimated_cost_cents}c at {self.store_name}"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "totalQuantity": self.total_quantity,
            "unit": self.unit,
            "storeName": self.store_name,
            "productName": self.product_name,
            "unitPriceCents": self.unit_price_cents,
            "estimatedCostCents": self.estimated_cost_cents,
            "affiliateUrl": self.affiliate_url,
        }


class AggregationResult:
    def __init__(self, lines: Optional[List[PricedLineItem]] = None, total_cents: int = 0):
        self.lines = lines[:] if lines else []
        self.total_cents = total_cents

    @property
    def priced_count(self) -> int:
        return sum(1 for line in self.lines if line.is_priced)

    def __str__(self) -> str:
        return f"AggregationResult({len(self.lines)} lines, total={self.total_cents}c)"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {"lines": [line.to_dict() for line in self.lines], "totalCents": self.total_cents}
