"""Validation of prices typed in by the shopper."""

from decimal import Decimal, InvalidOperation


def parse_price(text: str | None) -> Decimal:
    """Parse a price entered by the user.

    Accepts "3.50", " 3,50 " and "3". Raises ValueError with a message
    suitable for showing next to the input field.
    """
    if text is None or not text.strip():
        raise ValueError("Enter price")

    try:
        value = Decimal(text.strip().replace(",", "."))
    except InvalidOperation:
        raise ValueError("Valid number") from None

    if not value.is_finite():
        raise ValueError("Valid number")

    if value < 0:
        raise ValueError("Price cannot be negative")

    return value
