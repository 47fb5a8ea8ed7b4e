"""Serving-size scaling for recipe ingredients."""
from typing import Any, Dict, Iterable, List

from grocery.domain.Ingredient import IngredientItem
from grocery.utilities.constants import DEFAULT_RECIPE_SERVINGS
from grocery.utilities.rounding import round_display

__all__ = ["scale_ingredients", "collect_ingredients"]


def scale_ingredients(items: List[IngredientItem], original_servings: float, new_servings: float) -> List[IngredientItem]:
    '''Return copies of ``items`` scaled from ``original_servings`` to ``new_servings``.

    Non-positive servings leave the list untouched.
    '''
    if original_servings <= 0 or new_servings <= 0:
        return items
    factor = new_servings / original_servings
    return [IngredientItem(i.name, round_display(i.quantity * factor), i.unit) for i in items]


def collect_ingredients(recipes: Iterable[Dict[str, Any]]) -> List[IngredientItem]:
    """Gather the ingredient lines of several recipes, each scaled to its planned servings.

    Each recipe dict carries ``ingredients`` and optionally ``servings`` (what
    the quantities are written for) and ``planned_servings`` (what will be
    cooked). Recipes without servings are assumed to serve two.
    """
    collected: List[IngredientItem] = []
    for recipe in recipes:
        ingredients = recipe.get('ingredients') or []
        if not isinstance(ingredients, list):
            continue
        items = [i if isinstance(i, IngredientItem) else IngredientItem.from_dict(i) for i in ingredients]
        base = recipe.get('servings') or DEFAULT_RECIPE_SERVINGS
        planned = recipe.get('planned_servings') or base
        if planned != base:
            items = scale_ingredients(items, base, planned)
        collected.extend(items)
    return collected
