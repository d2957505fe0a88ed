"""Orchestrator: bridge between the CLI, the negotiation store and the database."""

from decimal import Decimal

from sqlalchemy.orm import Session

from bargainwala.core.booking import confirm_delivery, reschedule_delivery
from bargainwala.core.models import AddResult, BargainItem, Product
from bargainwala.core.negotiation import SETTLEMENT_DELAY_SECONDS, NegotiationStore
from bargainwala.core.scanner import ScanRegistry, registry
from bargainwala.core.store import (
    get_current_delivery,
    get_product,
    list_item_requests,
    list_slots,
    save_item_request,
)
from bargainwala.db.session import SessionLocal, init_db
from bargainwala.tools.retrieval import search_products
from bargainwala.tools.validation import parse_price


class ShoppingSession:
    """One shopper's visit: a fresh cart plus access to catalog and delivery data."""

    def __init__(
        self,
        settlement_delay: float = SETTLEMENT_DELAY_SECONDS,
        db_session: Session | None = None,
        scanner: ScanRegistry = registry,
    ):
        if db_session is None:
            init_db()
            db_session = SessionLocal()
        self.db_session = db_session
        self.scanner = scanner
        self.store = NegotiationStore(settlement_delay=settlement_delay)

    # Cart

    def scan_bag(self, bag_id: str = "default") -> list[Product]:
        return self.scanner.scan(bag_id)

    def submit_quote(self, product: Product, price_text: str) -> tuple[AddResult, BargainItem]:
        """Parse the typed price and add the resulting item to the cart.

        Raises ValueError for unparseable input. Must run inside an event loop.
        """
        quoted = parse_price(price_text)
        item = BargainItem.from_quote(product, quoted)
        return self.store.add_item(item), item

    def cart_summary(self) -> dict:
        return {
            "items": self.store.items,
            "coins_earned": self.store.coins_earned,
            "best_quoted_price_total": self.store.best_quoted_price_total,
        }

    async def wait_for_settlements(self) -> None:
        await self.store.drain()

    # Catalog

    def search_products(self, query: str = "") -> list[dict]:
        return search_products(query, session=self.db_session)

    def product_detail(self, product_id: int) -> dict:
        product = get_product(self.db_session, product_id)
        if not product:
            raise ValueError(f"Product {product_id} not found")
        return {
            "id": product.id,
            "name": product.name,
            "price": Decimal(product.price),
            "description": product.description,
        }

    def request_item(self, text: str) -> None:
        save_item_request(self.db_session, text)
        self.db_session.commit()

    def item_requests(self):
        return list_item_requests(self.db_session)

    # Delivery

    def delivery_overview(self) -> dict:
        delivery = get_current_delivery(self.db_session)
        return {
            "delivery": delivery,
            "slots": list_slots(self.db_session),
        }

    def confirm_delivery(self):
        delivery = confirm_delivery(self.db_session)
        self.db_session.commit()
        return delivery

    def reschedule_delivery(self, slot_id: int):
        delivery = reschedule_delivery(self.db_session, slot_id)
        self.db_session.commit()
        return delivery

    def close(self):
        """Cancel pending settlements and release the db session."""
        self.store.close()
        self.db_session.close()
