# static product catalog, read-only for the whole session
from __future__ import annotations

import json
import os
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional, Tuple

from shop.models import Product
from utils.logger import get_logger

_logger = get_logger(__name__)

ALL_CATEGORIES = "All"
CATALOG_ENV = "SHOPHUB_CATALOG"

_IMG = "https://images.unsplash.com/photo-{}?w=400"

DEFAULT_PRODUCTS: Tuple[Product, ...] = (
    Product(1, "Wireless Headphones", Decimal("79.99"), _IMG.format("1505740420928-5e560c06d30e"),
            "Premium wireless headphones", "Electronics"),
    Product(2, "Smart Watch", Decimal("199.99"), _IMG.format("1523275335684-37898b6baf30"),
            "Fitness tracking smartwatch", "Electronics"),
    Product(3, "Running Shoes", Decimal("89.99"), _IMG.format("1542291026-7eec264c27ff"),
            "Comfortable running shoes", "Fashion"),
    Product(4, "Coffee Maker", Decimal("49.99"), _IMG.format("1517668808822-9ebb02f2a0e6"),
            "Automatic coffee maker", "Home"),
    Product(5, "Backpack", Decimal("39.99"), _IMG.format("1553062407-98eeb64c6a62"),
            "Durable travel backpack", "Fashion"),
    Product(6, "Desk Lamp", Decimal("29.99"), _IMG.format("1507473885765-e6ed057f782c"),
            "LED desk lamp", "Home"),
    Product(7, "Bluetooth Speaker", Decimal("59.99"), _IMG.format("1608043152269-423dbba4e7e1"),
            "Portable bluetooth speaker", "Electronics"),
    Product(8, "Sunglasses", Decimal("24.99"), _IMG.format("1572635196237-14b3f281503f"),
            "UV protection sunglasses", "Fashion"),
)


class Catalog:
    """
    Immutable, ordered sequence of products.

    Duplicate ids or negative prices are configuration errors and raise ValueError.
    """

    def __init__(self, products: Iterable[Product]):
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id: Dict[int, Product] = {}
        for prod in self._products:
            if prod.id in self._by_id:
                raise ValueError(f"Duplicate product id {prod.id} in catalog.")
            if not prod.price.is_finite() or prod.price < 0:
                raise ValueError(f"Product {prod.id} has an invalid price {prod.price}.")
            self._by_id[prod.id] = prod

    def __len__(self) -> int:
        return len(self._products)

    def list_products(self) -> Tuple[Product, ...]:
        return self._products

    def list_categories(self) -> List[str]:
        """'All' first, then every category in first-seen order"""
        categories = [ALL_CATEGORIES]
        for prod in self._products:
            if prod.category not in categories:
                categories.append(prod.category)
        return categories

    def filter_by_category(self, category: str) -> Tuple[Product, ...]:
        if category == ALL_CATEGORIES:
            return self._products
        return tuple(p for p in self._products if p.category == category)

    def get(self, product_id: int) -> Optional[Product]:
        return self._by_id.get(product_id)


def _product_from_dict(raw: dict) -> Product:
    try:
        return Product(
            id=int(raw["id"]),
            name=str(raw["name"]),
            price=Decimal(str(raw["price"])),
            image=str(raw.get("image", "")),
            description=str(raw.get("description", "")),
            category=str(raw["category"]),
        )
    except KeyError as e:
        raise ValueError(f"Catalog entry is missing field {e}: {raw!r}") from e
    except (TypeError, AttributeError, InvalidOperation) as e:
        raise ValueError(f"Malformed catalog entry: {raw!r}") from e


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not prices
    raise ValueError(f"Catalog file contains non-finite number {name}.")


def load_catalog(path: Optional[str] = None) -> Catalog:
    """
    Build the catalog for this process.

    Reads a JSON array of product objects from `path`, or from the file named by
    the SHOPHUB_CATALOG env var. Falls back to the built-in demo products.
    """
    path = path or os.getenv(CATALOG_ENV)
    if not path:
        _logger.debug("Using built-in demo catalog.")
        return Catalog(DEFAULT_PRODUCTS)

    _logger.info(f"Loading catalog from {path}...")
    with open(path, "r", encoding="utf-8") as f:
        raw_products = json.load(f, parse_float=Decimal, parse_constant=_reject_constant)

    if not isinstance(raw_products, list):
        raise ValueError("Catalog file must contain a JSON array of products.")

    catalog = Catalog(_product_from_dict(raw) for raw in raw_products)
    _logger.info(f"Loaded {len(catalog)} products.")
    return catalog
