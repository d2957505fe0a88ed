"""Bag scanner: mock contents of the bags a shopper can scan."""

from dataclasses import dataclass, field
from decimal import Decimal

from bargainwala.core.models import Product


@dataclass
class Bag:
    bag_id: str
    label: str
    products: list[Product] = field(default_factory=list)


class ScanRegistry:
    """Simple in-memory registry of scannable bags."""

    def __init__(self):
        self._bags: dict[str, Bag] = {}
        self._register_defaults()

    def _register_defaults(self):
        self.register(
            Bag(
                bag_id="default",
                label="Grocery bag",
                products=[
                    Product(name="Fresh Milk", retail_price=Decimal("3.50")),
                    Product(name="Loaf of Bread", retail_price=Decimal("2.75")),
                    Product(name="Dozen Eggs", retail_price=Decimal("4.20")),
                ],
            )
        )

    def register(self, bag: Bag) -> None:
        self._bags[bag.bag_id] = bag

    def get(self, bag_id: str) -> Bag | None:
        return self._bags.get(bag_id)

    def list_bags(self) -> list[Bag]:
        return list(self._bags.values())

    def scan(self, bag_id: str = "default") -> list[Product]:
        bag = self.get(bag_id)
        if not bag:
            raise ValueError(f"Bag '{bag_id}' not found")
        return list(bag.products)


registry = ScanRegistry()
