import unittest
from grocery.domain.Ingredient import IngredientItem
from grocery.logic.shopping.scaling import scale_ingredients, collect_ingredients


class TestScaling(unittest.TestCase):

    def test_scale_up(self):
        scaled = scale_ingredients([IngredientItem("Flour", 200, "g"), IngredientItem("Eggs", 3, "pcs")], 4, 6)
        self.assertEqual(scaled, [IngredientItem("Flour", 300.0, "g"), IngredientItem("Eggs", 4.5, "pcs")])

    def test_scale_rounds_to_two_decimals(self):
        scaled = scale_ingredients([IngredientItem("Salt", 1, "tsp")], 3, 1)
        self.assertEqual(scaled[0].quantity, 0.33)

    def test_non_positive_servings_leave_items_untouched(self):
        items = [IngredientItem("Flour", 200, "g")]
        self.assertIs(scale_ingredients(items, 0, 4), items)
        self.assertIs(scale_ingredients(items, 4, -1), items)

    def test_collect_from_recipes(self):
        recipes = [
            {"name": "Pancakes", "servings": 4, "planned_servings": 2,
             "ingredients": [{"name": "Milk", "quantity": 300, "unit": "ml"}]},
            {"name": "Omelette",
             "ingredients": [{"name": "Eggs", "quantity": 3, "unit": "pcs"}]},
            {"name": "Broken", "ingredients": "not a list"},
        ]
        collected = collect_ingredients(recipes)
        self.assertEqual(collected, [IngredientItem("Milk", 150.0, "ml"), IngredientItem("Eggs", 3.0, "pcs")])

    def test_collect_default_servings_is_two(self):
        recipes = [{"planned_servings": 4, "ingredients": [{"name": "Rice", "quantity": 100, "unit": "g"}]}]
        self.assertEqual(collect_ingredients(recipes)[0].quantity, 200.0)
