import unittest
from types import MappingProxyType
from grocery.logic.units.converter import UnitConverter
from grocery.logic.units.tables import UNIT_SYNONYMS, UNIT_TO_BASE, DENSITY_G_PER_ML


class TestUnitConverter(unittest.TestCase):

    def setUp(self):
        self.conv = UnitConverter()

    def test_synonyms_collapse_to_canonical(self):
        self.assertEqual(self.conv.normalize_unit("Grams"), "g")
        self.assertEqual(self.conv.normalize_unit(" tablespoons "), "tbsp")
        self.assertEqual(self.conv.normalize_unit("CUPS"), "cup")
        self.assertEqual(self.conv.normalize_unit("kgs"), "kg")
        self.assertEqual(self.conv.normalize_unit("liters"), "l")
        self.assertEqual(self.conv.normalize_unit("teaspoon"), "tsp")
        self.assertEqual(self.conv.normalize_unit("piece"), "pcs")

    def test_kilogram_and_grams_are_identical(self):
        self.assertEqual(self.conv.to_base("beef", 1, "kg"), self.conv.to_base("beef", 1000, "g"))
        self.assertEqual(self.conv.to_base("beef", 1, "kilograms"), ("g", 1000.0))

    def test_milk_volume_becomes_mass(self):
        unit, value = self.conv.to_base("milk", 240, "ml")
        self.assertEqual(unit, "g")
        self.assertAlmostEqual(value, 247.2)

    def test_cup_of_flour_with_descriptor(self):
        unit, value = self.conv.to_base("All-Purpose Flour", 2, "cups")
        self.assertEqual(unit, "g")
        self.assertAlmostEqual(value, 2 * 240 * 0.52)

    def test_volume_without_density_stays_ml(self):
        self.assertEqual(self.conv.to_base("vinegar", 2, "tbsp"), ("ml", 30.0))
        self.assertEqual(self.conv.to_base("vinegar", 1, "tsp"), ("ml", 5.0))
        self.assertEqual(self.conv.to_base("water", 1, "l"), ("ml", 1000.0))

    def test_unknown_unit_passes_through(self):
        self.assertEqual(self.conv.to_base("garlic", 3, "cloves"), ("cloves", 3))
        self.assertEqual(self.conv.to_base("salt", 1, "pinch"), ("pinch", 1))
        self.assertFalse(self.conv.is_known("handful"))

    def test_count_units(self):
        self.assertEqual(self.conv.to_base("eggs", 6, "pieces"), ("pcs", 6.0))

    def test_mass_units_never_get_density(self):
        self.assertEqual(self.conv.to_base("milk powder", 50, "g"), ("g", 50.0))

    def test_first_declared_density_wins(self):
        self.assertEqual(self.conv.density_for("extra virgin olive oil"), DENSITY_G_PER_ML["olive oil"])
        self.assertEqual(self.conv.density_for("sunflower oil"), DENSITY_G_PER_ML["oil"])
        self.assertIsNone(self.conv.density_for("tomato"))

    def test_package_size_has_no_density_correction(self):
        self.assertEqual(self.conv.package_to_base(1, "l"), ("ml", 1000.0))
        self.assertEqual(self.conv.package_to_base(12, "piece"), ("pcs", 12.0))

    def test_injected_tables(self):
        conv = UnitConverter(UNIT_SYNONYMS, UNIT_TO_BASE, MappingProxyType({}))
        self.assertEqual(conv.to_base("milk", 240, "ml"), ("ml", 240.0))

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            UNIT_TO_BASE["oz"] = ("g", 28.35)

    def test_base_unit_of(self):
        self.assertEqual(self.conv.base_unit("Kilograms"), "g")
        self.assertEqual(self.conv.base_unit("cup"), "ml")
        self.assertEqual(self.conv.base_unit("cloves"), "cloves")
