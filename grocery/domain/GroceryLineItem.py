"""Grocery line item: one aggregated, unit-normalized entry in a shopping list."""
from typing import Any, Dict, Optional

from grocery.utilities.rounding import round_display


class GroceryLineItem:
    def __init__(self, name: str, total_quantity: float, unit: str,
                 exact_quantity: Optional[float] = None):
        self.name = name
        # total_quantity is the display figure; exact_quantity keeps full precision
        self.total_quantity = total_quantity
        self.unit = unit
        self.exact_quantity = total_quantity if exact_quantity is None else exact_quantity

    @classmethod
    def from_exact(cls, name: str, exact_quantity: float, unit: str) -> "GroceryLineItem":
        '''Builds a line item from an unrounded running total.'''
        return cls(name, round_display(exact_quantity), unit, exact_quantity=exact_quantity)

    def __str__(self) -> str:
        return f"{self.name} - {self.total_quantity} {self.unit}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, GroceryLineItem):
            return NotImplemented
        return (self.name, self.total_quantity, self.unit) == (other.name, other.total_quantity, other.unit)

    def __hash__(self) -> int:
        return hash((self.name, self.total_quantity, self.unit))

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "GroceryLineItem":
        d = dict(data) if isinstance(data, dict) else {}
        qty = d.get("totalQuantity", d.get("total_quantity", 0))
        return GroceryLineItem(str(d.get("name") or ""), float(qty or 0), str(d.get("unit") or ""))

    def to_dict(self) -> Dict[str, Any]:
        '''JSON shape exposed to callers; the exact quantity stays internal.'''
        return {"name": self.name, "totalQuantity": self.total_quantity, "unit": self.unit}
