import json
import os
import sys
import tempfile
import unittest
from decimal import Decimal

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from shop import catalog as shop_catalog  # noqa: E402
from shop.catalog import ALL_CATEGORIES, DEFAULT_PRODUCTS, Catalog, load_catalog  # noqa: E402
from shop.models import Product  # noqa: E402


class CatalogTestCase(unittest.TestCase):
    def setUp(self):
        self.catalog = Catalog(DEFAULT_PRODUCTS)

    def test_list_products_keeps_order(self):
        ids = [p.id for p in self.catalog.list_products()]
        self.assertEqual(ids, [1, 2, 3, 4, 5, 6, 7, 8])
        # stable across calls
        self.assertEqual(self.catalog.list_products(), self.catalog.list_products())

    def test_categories_all_first_then_first_seen(self):
        self.assertEqual(
            self.catalog.list_categories(),
            [ALL_CATEGORIES, "Electronics", "Fashion", "Home"],
        )

    def test_filter_by_category(self):
        fashion = self.catalog.filter_by_category("Fashion")
        self.assertEqual([p.id for p in fashion], [3, 5, 8])
        self.assertEqual(
            self.catalog.filter_by_category(ALL_CATEGORIES),
            self.catalog.list_products(),
        )
        # unknown category is not an error
        self.assertEqual(self.catalog.filter_by_category("Toys"), ())

    def test_get(self):
        self.assertEqual(self.catalog.get(2).name, "Smart Watch")
        self.assertIsNone(self.catalog.get(999))

    def test_rejects_bad_configuration(self):
        dup = Product(1, "Dup", Decimal("1.00"), "", "", "Home")
        with self.assertRaises(ValueError):
            Catalog(list(DEFAULT_PRODUCTS) + [dup])

        negative = Product(42, "Refund", Decimal("-1"), "", "", "Home")
        with self.assertRaises(ValueError):
            Catalog([negative])

        not_a_number = Product(43, "Odd", Decimal("NaN"), "", "", "Home")
        with self.assertRaises(ValueError):
            Catalog([not_a_number])


class LoadCatalogTestCase(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.temp_dir.name, "catalog.json")
        self._env = os.environ.pop(shop_catalog.CATALOG_ENV, None)

    def tearDown(self):
        self.temp_dir.cleanup()
        if self._env is not None:
            os.environ[shop_catalog.CATALOG_ENV] = self._env

    def _write(self, payload):
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(payload, f)

    def test_default_catalog(self):
        self.assertEqual(len(load_catalog()), len(DEFAULT_PRODUCTS))

    def test_load_from_file_keeps_exact_prices(self):
        self._write(
            [
                {"id": 10, "name": "Mug", "price": 0.1, "category": "Home"},
                {"id": 11, "name": "Pen", "price": 0.2, "category": "Office",
                 "image": "pen.png", "description": "Blue ink"},
            ]
        )
        catalog = load_catalog(self.path)
        self.assertEqual([p.id for p in catalog.list_products()], [10, 11])
        self.assertEqual(
            catalog.get(10).price + catalog.get(11).price, Decimal("0.3")
        )
        self.assertEqual(catalog.get(11).image, "pen.png")
        self.assertEqual(catalog.get(10).description, "")

    def test_load_from_env(self):
        self._write([{"id": 1, "name": "Mug", "price": 3, "category": "Home"}])
        os.environ[shop_catalog.CATALOG_ENV] = self.path
        try:
            catalog = load_catalog()
        finally:
            del os.environ[shop_catalog.CATALOG_ENV]
        self.assertEqual(catalog.get(1).price, Decimal("3"))

    def test_load_rejects_bad_files(self):
        self._write({"id": 1})
        with self.assertRaises(ValueError):
            load_catalog(self.path)

        self._write([{"id": 1, "price": 3}])
        with self.assertRaises(ValueError):
            load_catalog(self.path)

        self._write([{"id": 1, "name": "a", "price": "abc", "category": "x"}])
        with self.assertRaises(ValueError):
            load_catalog(self.path)

        self._write([1])
        with self.assertRaises(ValueError):
            load_catalog(self.path)

        with open(self.path, "w", encoding="utf-8") as f:
            f.write('[{"id": 1, "name": "a", "price": NaN, "category": "x"}]')
        with self.assertRaises(ValueError):
            load_catalog(self.path)

        self._write([{"id": 1, "name": "a", "price": "Infinity", "category": "x"}])
        with self.assertRaises(ValueError):
            load_catalog(self.path)


if __name__ == "__main__":
    unittest.main()
