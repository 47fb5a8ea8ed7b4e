"""Ingredient line entity: name, quantity and unit as supplied by a recipe."""
from typing import Any, Dict


class IngredientItem:
    def __init__(self, name: str = "", quantity: float = 0, unit: str = ""):
        self.name = name
        self.quantity = quantity
        self.unit = unit

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, IngredientItem):
            return NotImplemented
        return (self.name, self.quantity, self.unit) == (other.name, other.quantity, other.unit)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "IngredientItem":
        '''Creates an IngredientItem from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return IngredientItem(
            name=str(d.get("name") or ""),
            quantity=float(d.get("quantity") or 0),
            unit=str(d.get("unit") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit}
