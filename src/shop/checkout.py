from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Dict, List, Tuple


@dataclass
class CheckoutForm:
    """
    Draft shipping/payment form for the mock checkout.

    Ready to submit once every field is non-empty. Values are taken as typed:
    whitespace is not stripped and card data is not checked, since no payment
    is ever made.
    """

    full_name: str = ""
    address: str = ""
    city: str = ""
    zip_code: str = ""
    card_number: str = ""
    expiry_date: str = ""
    cvv: str = ""

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def update(self, field: str, value: str) -> None:
        if field not in FIELDS:
            raise ValueError(f"Unknown checkout field: {field}")
        setattr(self, field, value)

    def missing_fields(self) -> List[str]:
        return [name for name in FIELDS if not getattr(self, name)]

    def is_ready_to_submit(self) -> bool:
        return not self.missing_fields()

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


FIELDS: Tuple[str, ...] = CheckoutForm.field_names()

FIELD_LABELS: Dict[str, str] = {
    "full_name": "Full Name",
    "address": "Address",
    "city": "City",
    "zip_code": "ZIP Code",
    "card_number": "Card Number",
    "expiry_date": "MM/YY",
    "cvv": "CVV",
}
