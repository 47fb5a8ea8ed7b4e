"""Grocery list builder.

Provides aggregate(items, converter=None): merges ingredient lines from any
number of recipes into one GroceryLineItem per (lower-cased name, base unit).
"""
from typing import Dict, Iterable, List, Optional, Tuple, Union, Any
import logging

from grocery.domain.GroceryLineItem import GroceryLineItem
from grocery.domain.Ingredient import IngredientItem
from grocery.logic.units.converter import DEFAULT_CONVERTER, UnitConverter

logger = logging.getLogger(__name__)

IngredientLike = Union[IngredientItem, GroceryLineItem, Dict[str, Any]]


def _normalize(name: str) -> str:
    return (name or '').strip().lower()


def _key(name: str, base_unit: str) -> str:
    return f"{_normalize(name)}|{base_unit}"


def _coerce(item: IngredientLike) -> Tuple[str, float, str]:
    if isinstance(item, GroceryLineItem):
        return item.name, item.exact_quantity, item.unit
    if isinstance(item, IngredientItem):
        return item.name, item.quantity, item.unit
    if isinstance(item, dict) and ('totalQuantity' in item or 'total_quantity' in item):
        # a serialized grocery line, e.g. an earlier aggregate() result
        line = GroceryLineItem.from_dict(item)
        return line.name, line.exact_quantity, line.unit
    ing = IngredientItem.from_dict(item)
    return ing.name, ing.quantity, ing.unit


def aggregate(items: Iterable[IngredientLike], converter: Optional[UnitConverter] = None) -> List[GroceryLineItem]:
    """Merge ingredient lines into normalized grocery line items.

    Args:
        items: IngredientItem objects or dicts with name, quantity, unit,
            already scaled to the wanted servings. GroceryLineItems and
            their serialized dicts (totalQuantity) are accepted too.
        converter: UnitConverter to use; the module default when omitted.

    Returns:
        One GroceryLineItem per merge key. Totals are summed in full
        precision and rounded to 2 decimals only on the returned items.
        The order is not part of the contract.
    """
    conv = converter or DEFAULT_CONVERTER
    # Insertion-ordered: first occurrence fixes the base unit of the key
    totals: Dict[str, Dict[str, Any]] = {}

    for item in items:
        name, quantity, unit = _coerce(item)
        base_unit, base_value = conv.to_base(name, quantity, unit)
        k = _key(name, base_unit)
        if k in totals:
            totals[k]['value'] += base_value
        else:
            totals[k] = {'name': _normalize(name), 'unit': base_unit, 'value': base_value}

    result = [GroceryLineItem.from_exact(t['name'], t['value'], t['unit']) for t in totals.values()]
    logger.debug("Aggregated ingredient lines into %d grocery items", len(result))
    return result


__all__ = ['aggregate']
