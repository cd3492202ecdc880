from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import Dict, Iterator, List, Optional

from shop.models import CartLine, Product


class Cart:
    """
    In-memory cart, one line per product id, kept in first-add order.

    Totals are recomputed from the lines on every read, nothing is cached.
    Mutating an absent line is a silent no-op.
    """

    def __init__(self) -> None:
        # dicts keep insertion order, and reassigning a key keeps its position
        self._lines: Dict[int, CartLine] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(list(self._lines.values()))

    def lines(self) -> List[CartLine]:
        return list(self._lines.values())

    def get(self, product_id: int) -> Optional[CartLine]:
        return self._lines.get(product_id)

    def is_empty(self) -> bool:
        return not self._lines

    def add(self, product: Product) -> CartLine:
        line = self._lines.get(product.id)
        if line is None:
            line = CartLine(product=product, quantity=1)
        else:
            line = dataclasses.replace(line, quantity=line.quantity + 1)
        self._lines[product.id] = line
        return line

    def set_quantity(self, product_id: int, delta: int) -> Optional[CartLine]:
        """
        Shift a line's quantity by delta, floored at 1.
        Use remove() to drop a line.
        """
        line = self._lines.get(product_id)
        if line is None:
            return None
        line = dataclasses.replace(line, quantity=max(1, line.quantity + delta))
        self._lines[product_id] = line
        return line

    def remove(self, product_id: int) -> bool:
        return self._lines.pop(product_id, None) is not None

    def clear(self) -> None:
        self._lines.clear()

    def total(self) -> Decimal:
        return sum((line.subtotal for line in self._lines.values()), Decimal("0"))

    def count(self) -> int:
        return sum(line.quantity for line in self._lines.values())
