"""Seed database with the recommended catalog and delivery slots."""

from decimal import Decimal

from sqlalchemy.orm import Session

from bargainwala.db.models import CatalogProduct, Delivery, Slot
from bargainwala.db.session import SessionLocal, init_db

DEFAULT_DELIVERY_TIME = "Today, 2:00 PM - 3:00 PM"

SEED_SLOTS = [
    ("10:00 AM - 11:00 AM", False),
    ("11:00 AM - 12:00 PM", True),
    ("12:00 PM - 01:00 PM", False),
    ("02:00 PM - 03:00 PM", False),
    ("03:00 PM - 04:00 PM", True),
    ("04:00 PM - 05:00 PM", False),
]


def seed_products() -> list[CatalogProduct]:
    return [
        CatalogProduct(
            name=f"Recommended Product {n}",
            price=Decimal("35.50") * n,
            description=(
                f"This is a detailed description for Product {n}. "
                "It is of high quality and recommended just for you."
            ),
        )
        for n in range(1, 9)
    ]


def seed_session(session: Session) -> int:
    """Insert seed rows into an empty database, return rows inserted."""
    if session.query(CatalogProduct).count() > 0:
        return 0

    products = seed_products()
    slots = [Slot(time=t, is_booked=booked) for t, booked in SEED_SLOTS]
    delivery = Delivery(status="pending", delivery_time=DEFAULT_DELIVERY_TIME)

    session.add_all(products)
    session.add_all(slots)
    session.add(delivery)
    session.commit()
    return len(products) + len(slots) + 1


def seed() -> int:
    init_db()
    session = SessionLocal()
    try:
        return seed_session(session)
    finally:
        session.close()
