# provide dataclass models for the storefront

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: Decimal
    image: str
    description: str
    category: str


@dataclass(frozen=True)
class CartLine:
    product: Product
    quantity: int  # always >= 1

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class UserIdentity:
    email: str
    display_name: str

    @classmethod
    def from_email(cls, email: str) -> "UserIdentity":
        """display name is the local part of the email, everything before the first '@'"""
        return cls(email=email, display_name=email.split("@", 1)[0])
