"""Static unit and density vocabularies.

Both tables are built once at import and exposed read-only; converters take
them as constructor arguments so tests can supply their own.
"""
from types import MappingProxyType
from typing import Final, Mapping, Tuple

# Synonym -> canonical unit. Canonical units map to themselves.
UNIT_SYNONYMS: Final[Mapping[str, str]] = MappingProxyType({
    "g": "g",
    "gram": "g",
    "grams": "g",
    "kg": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "kgs": "kg",
    "ml": "ml",
    "l": "l",
    "liter": "l",
    "liters": "l",
    "cup": "cup",
    "cups": "cup",
    "tbsp": "tbsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tsp": "tsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "pcs": "pcs",
    "piece": "pcs",
    "pieces": "pcs",
})

# Canonical unit -> (base unit, factor to reach it)
UNIT_TO_BASE: Final[Mapping[str, Tuple[str, float]]] = MappingProxyType({
    "g": ("g", 1.0),
    "kg": ("g", 1000.0),
    "ml": ("ml", 1.0),
    "l": ("ml", 1000.0),
    "cup": ("ml", 240.0),
    "tbsp": ("ml", 15.0),
    "tsp": ("ml", 5.0),
    "pcs": ("pcs", 1.0),
})

# Ingredient-name substring -> grams per millilitre.
# First declared match wins, so specific keys precede generic ones.
DENSITY_G_PER_ML: Final[Mapping[str, float]] = MappingProxyType({
    "flour": 0.52,
    "powdered sugar": 0.56,
    "brown sugar": 0.93,
    "sugar": 0.85,
    "milk": 1.03,
    "cream": 1.01,
    "butter": 0.96,
    "olive oil": 0.91,
    "oil": 0.92,
    "honey": 1.42,
    "salt": 1.2,
    "rice": 0.85,
    "oats": 0.41,
    "cocoa": 0.45,
})

__all__ = ['UNIT_SYNONYMS', 'UNIT_TO_BASE', 'DENSITY_G_PER_ML']
