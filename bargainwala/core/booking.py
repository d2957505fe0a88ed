"""Delivery booking: confirm the proposed slot or reschedule to a free one."""

from enum import Enum

from sqlalchemy.orm import Session

from bargainwala.core.logger import get_logger
from bargainwala.core.store import get_current_delivery, get_slot
from bargainwala.db.models import Delivery

logger = get_logger(__name__)


class DeliveryStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    RESCHEDULED = "rescheduled"


def _require_delivery(session: Session) -> Delivery:
    delivery = get_current_delivery(session)
    if not delivery:
        raise ValueError("No delivery booked. Run 'bargainwala seed' first.")
    return delivery


def confirm_delivery(session: Session) -> Delivery:
    """Accept the proposed delivery time. Only a pending delivery can be confirmed."""
    delivery = _require_delivery(session)
    if delivery.status != DeliveryStatus.PENDING.value:
        raise ValueError(f"Delivery is already {delivery.status}")

    delivery.status = DeliveryStatus.CONFIRMED.value
    session.flush()
    logger.info("Delivery confirmed for %s", delivery.delivery_time)
    return delivery


def reschedule_delivery(session: Session, slot_id: int) -> Delivery:
    """Move the delivery to a free slot.

    The slot is not marked booked; availability only guards the choice.
    """
    delivery = _require_delivery(session)
    slot = get_slot(session, slot_id)
    if not slot:
        raise ValueError(f"Slot {slot_id} not found")
    if slot.is_booked:
        raise ValueError(f"Slot {slot.time} is already booked")

    delivery.status = DeliveryStatus.RESCHEDULED.value
    delivery.delivery_time = slot.time
    delivery.slot_id = slot.id
    session.flush()
    logger.info("Delivery rescheduled to %s", slot.time)
    return delivery
