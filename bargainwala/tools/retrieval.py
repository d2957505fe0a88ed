"""Retrieval tool: search the recommended catalog."""

from bargainwala.db.models import CatalogProduct
from bargainwala.db.session import SessionLocal


def search_products(query: str = "", session=None) -> list[dict]:
    """Case-insensitive substring search on product names.

    An empty query returns the whole catalog in id order.
    """
    own_session = session is None
    if own_session:
        session = SessionLocal()

    try:
        products = session.query(CatalogProduct).order_by(CatalogProduct.id.asc()).all()

        needle = (query or "").strip().lower()
        if needle:
            products = [p for p in products if needle in p.name.lower()]

        return [
            {
                "id": p.id,
                "name": p.name,
                "price": p.price,
                "description": p.description,
            }
            for p in products
        ]
    finally:
        if own_session:
            session.close()
