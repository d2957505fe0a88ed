"""CRUD operations for catalog and delivery data."""

from sqlalchemy.orm import Session

from bargainwala.db.models import CatalogProduct, Delivery, ItemRequest, Slot


def get_product(session: Session, product_id: int) -> CatalogProduct | None:
    return session.get(CatalogProduct, product_id)


def list_slots(session: Session) -> list[Slot]:
    return session.query(Slot).order_by(Slot.id.asc()).all()


def get_slot(session: Session, slot_id: int) -> Slot | None:
    return session.get(Slot, slot_id)


def get_current_delivery(session: Session) -> Delivery | None:
    """Return the most recent delivery record."""
    return session.query(Delivery).order_by(Delivery.id.desc()).first()


def save_item_request(session: Session, text: str) -> ItemRequest:
    if not text or not text.strip():
        raise ValueError("Request text cannot be empty")
    request = ItemRequest(text=text.strip())
    session.add(request)
    session.flush()
    return request


def list_item_requests(session: Session) -> list[ItemRequest]:
    return session.query(ItemRequest).order_by(ItemRequest.created_at.desc()).all()
