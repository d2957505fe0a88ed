"""In-memory cart of bargain items and their mock negotiation."""

import asyncio
import os
from decimal import Decimal
from typing import Callable

from dotenv import load_dotenv

from bargainwala.core.logger import get_logger
from bargainwala.core.models import AddResult, BargainItem, NegotiationStatus
from bargainwala.tools.pricing import evaluate_offer

load_dotenv()

logger = get_logger(__name__)

SETTLEMENT_DELAY_SECONDS = float(os.getenv("SETTLEMENT_DELAY_SECONDS", "3"))

Listener = Callable[[BargainItem], None]


class NegotiationStore:
    """Holds the cart, runs the mock negotiation and exposes derived totals.

    Every mutation notifies subscribed listeners synchronously with the
    changed item. Settlement runs once per item after ``settlement_delay``
    seconds as an asyncio task; ``close()`` cancels whatever is outstanding.
    """

    def __init__(self, settlement_delay: float = SETTLEMENT_DELAY_SECONDS):
        self.settlement_delay = settlement_delay
        self._items: list[BargainItem] = []
        self._coins_earned = Decimal("0")
        self._listeners: list[Listener] = []
        self._settlements: dict[str, asyncio.Task] = {}

    @property
    def items(self) -> tuple[BargainItem, ...]:
        return tuple(self._items)

    @property
    def coins_earned(self) -> Decimal:
        return self._coins_earned

    @property
    def best_quoted_price_total(self) -> Decimal:
        # Agreed items still count their quote, not server_counter_price.
        return sum((item.user_quoted_price for item in self._items), Decimal("0"))

    @property
    def pending_settlements(self) -> int:
        return len(self._settlements)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, item: BargainItem) -> None:
        for listener in list(self._listeners):
            listener(item)

    def _holds(self, item: BargainItem) -> bool:
        return any(i is item for i in self._items)

    def add_item(self, item: BargainItem) -> AddResult:
        """Append the item and start negotiating it.

        Product names are unique within the cart; a second item with the
        same name is rejected even when its id differs. Requires a running
        event loop; without one nothing is added.
        """
        if any(i.product_name == item.product_name for i in self._items):
            logger.info("Rejected duplicate item %s (%s)", item.product_name, item.id)
            return AddResult.REJECTED_DUPLICATE

        loop = asyncio.get_running_loop()
        self._items.append(item)
        self._schedule(item, loop)
        self._notify(item)
        return AddResult.ACCEPTED

    def start_negotiation(self, item: BargainItem) -> bool:
        """Mark a cart item as negotiating and schedule its settlement.

        Agreed items, items outside this cart and items with a settlement
        already scheduled are left alone and False is returned.
        """
        loop = asyncio.get_running_loop()
        if not self._holds(item):
            logger.warning("Not negotiating %s: item is not in the cart", item.product_name)
            return False
        if item.status == NegotiationStatus.AGREED or item.id in self._settlements:
            logger.warning("Not negotiating %s: already %s", item.product_name, item.status.value)
            return False

        self._schedule(item, loop)
        self._notify(item)
        return True

    def _schedule(self, item: BargainItem, loop: asyncio.AbstractEventLoop) -> None:
        logger.info("Starting negotiation for %s", item.product_name)
        item.status = NegotiationStatus.NEGOTIATING
        self._settlements[item.id] = loop.create_task(
            self._settle_later(item, self.settlement_delay), name=f"settle-{item.id}"
        )

    async def _settle_later(self, item: BargainItem, delay: float) -> None:
        await asyncio.sleep(delay)
        if self._settlements.get(item.id) is asyncio.current_task():
            del self._settlements[item.id]
            self._apply_settlement(item)

    def settle(self, item: BargainItem) -> None:
        """Settle the item now; its scheduled settlement is cancelled."""
        task = self._settlements.pop(item.id, None)
        if task is not None:
            task.cancel()
        self._apply_settlement(item)

    def _apply_settlement(self, item: BargainItem) -> None:
        if item.status != NegotiationStatus.NEGOTIATING or not self._holds(item):
            logger.warning("Not settling %s: status is %s", item.product_name, item.status.value)
            return

        outcome = evaluate_offer(item.retail_price, item.user_quoted_price)
        item.server_counter_price = outcome["counter_price"]

        if outcome["agreed"]:
            item.status = NegotiationStatus.AGREED
            self._coins_earned += outcome["coins"]
            logger.info("Server agreed to %s for %s", item.user_quoted_price, item.product_name)
        else:
            item.status = NegotiationStatus.PENDING
            logger.info(
                "Server countered %s at %s", item.product_name, item.server_counter_price
            )

        self._notify(item)

    async def drain(self) -> None:
        """Wait until every scheduled settlement has finished."""
        while self._settlements:
            results = await asyncio.gather(
                *self._settlements.values(), return_exceptions=True
            )
            for result in results:
                if isinstance(result, Exception):
                    raise result

    def close(self) -> None:
        """Cancel outstanding settlements; their items stay negotiating."""
        for item_id, task in list(self._settlements.items()):
            if not task.done():
                logger.debug("Cancelling settlement %s", item_id)
                task.cancel()
        self._settlements.clear()
