import json
import tempfile
import unittest
from pathlib import Path
from grocery.infra.Product_Catalog import CatalogError, JsonProductCatalog, parse_catalog
from grocery.infra.paths import PRODUCTS_FILE

STORES = [
    {
        "name": "Rimi",
        "affiliate_url_template": "https://rimi.example/search?q={query}",
        "products": [
            {"name": "Whole Milk 1L", "unit": "ml", "size_value": 1, "size_unit": "l",
             "prices": [{"price_cents": 150, "collected_at": "2025-09-10"},
                        {"price_cents": 139, "collected_at": "2025-09-01"}]},
            {"name": "Sugar 1kg", "unit": "g", "size_value": 1, "size_unit": "kg", "prices": []},
        ],
    },
    {"name": "Empty store"},
]


class TestProductCatalog(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / 'products.json'
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(STORES, f)

    def tearDown(self):
        self._tmp.cleanup()

    def test_latest_price_wins(self):
        records = parse_catalog(STORES)
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].price_cents, 150)
        self.assertEqual(records[0].store, "Rimi")
        self.assertEqual(records[0].affiliate_url_template, "https://rimi.example/search?q={query}")

    def test_search_is_case_insensitive_substring(self):
        catalog = JsonProductCatalog(self.path)
        self.assertEqual([r.product_name for r in catalog.search("MILK")], ["Whole Milk 1L"])
        self.assertEqual(catalog.search("sugar"), [])

    def test_missing_file_raises(self):
        catalog = JsonProductCatalog(Path(self._tmp.name) / 'nope.json')
        with self.assertRaises(CatalogError):
            catalog.search("milk")

    def test_invalid_json_raises(self):
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write("{not json")
        with self.assertRaises(CatalogError):
            JsonProductCatalog(self.path).search("milk")

    def test_wrong_shape_raises(self):
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({"stores": []}, f)
        with self.assertRaises(CatalogError):
            JsonProductCatalog(self.path).search("milk")

    def test_reload_picks_up_new_prices(self):
        catalog = JsonProductCatalog(self.path)
        self.assertEqual(catalog.search("milk")[0].price_cents, 150)
        new_stores = json.loads(json.dumps(STORES))
        new_stores[0]["products"][0]["prices"].append({"price_cents": 99, "collected_at": "2025-09-20"})
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(new_stores, f)
        self.assertEqual(catalog.search("milk")[0].price_cents, 150)
        catalog.reload()
        self.assertEqual(catalog.search("milk")[0].price_cents, 99)

    def test_bundled_catalog_loads(self):
        catalog = JsonProductCatalog(PRODUCTS_FILE)
        names = {r.product_name for r in catalog.search("milk")}
        self.assertEqual(names, {"Whole Milk 2.5% 1L", "Fresh Milk 3.5% 1L"})
        whole = [r for r in catalog.search("whole milk")][0]
        self.assertEqual(whole.price_cents, 129)
        self.assertEqual(catalog.search("chicken"), [])

    def test_malformed_rows_raise_catalog_error(self):
        bad_size = json.loads(json.dumps(STORES))
        bad_size[0]["products"][0]["size_value"] = "1L"
        bad_price = json.loads(json.dumps(STORES))
        bad_price[0]["products"][0]["prices"][0]["price_cents"] = "n/a"
        for contents in (bad_size, bad_price, ["Rimi"], [{"name": "Rimi", "products": ["milk"]}]):
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(contents, f)
            with self.assertRaises(CatalogError):
                JsonProductCatalog(self.path).search("milk")
