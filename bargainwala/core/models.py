"""Domain objects for the bargain cart."""

import re
import uuid
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class NegotiationStatus(str, Enum):
    PENDING = "pending"
    NEGOTIATING = "negotiating"
    AGREED = "agreed"
    FAILED = "failed"  # no transition leads here yet


class AddResult(str, Enum):
    ACCEPTED = "accepted"
    REJECTED_DUPLICATE = "rejected-duplicate"


@dataclass(frozen=True)
class Product:
    """An item found in a scanned bag, before the user quotes a price."""

    name: str
    retail_price: Decimal


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


@dataclass
class BargainItem:
    """A cart entry tracking the user's offer against the retail price.

    Only ``server_counter_price`` and ``status`` may change once the item
    exists; the identity fields and the quote are fixed.
    """

    id: str
    product_name: str
    retail_price: Decimal
    user_quoted_price: Decimal
    server_counter_price: Decimal
    status: NegotiationStatus = NegotiationStatus.PENDING

    _FIXED = ("id", "product_name", "retail_price", "user_quoted_price")

    def __setattr__(self, name, value):
        if name in self._FIXED and name in self.__dict__:
            raise AttributeError(f"{name} cannot change after the quote is submitted")
        super().__setattr__(name, value)

    @classmethod
    def from_quote(cls, product: Product, quoted_price: Decimal) -> "BargainItem":
        # The server has not countered yet, so the counter starts at retail.
        return cls(
            id=f"{_slug(product.name)}-{uuid.uuid4().hex[:12]}",
            product_name=product.name,
            retail_price=product.retail_price,
            user_quoted_price=quoted_price,
            server_counter_price=product.retail_price,
        )

    @property
    def savings(self) -> Decimal:
        return self.retail_price - self.user_quoted_price
