"""Pricing tools: decide the outcome of a price offer."""

from decimal import Decimal

ACCEPT_RATIO = Decimal("0.8")
COUNTER_RATIO = Decimal("0.85")


def acceptance_floor(retail_price: Decimal) -> Decimal:
    """Offers strictly above this value are accepted."""
    return retail_price * ACCEPT_RATIO


def counter_offer(retail_price: Decimal) -> Decimal:
    return retail_price * COUNTER_RATIO


def evaluate_offer(retail_price: Decimal, quoted_price: Decimal) -> dict:
    """Settle a single offer.

    Accepted when quoted > 80% of retail: the counter matches the quote and
    the savings (never negative) are awarded as coins.
    Otherwise the server counters at 85% of retail and awards nothing.
    """
    if quoted_price > acceptance_floor(retail_price):
        return {
            "agreed": True,
            "counter_price": quoted_price,
            "coins": max(Decimal("0"), retail_price - quoted_price),
        }

    return {
        "agreed": False,
        "counter_price": counter_offer(retail_price),
        "coins": Decimal("0"),
    }
