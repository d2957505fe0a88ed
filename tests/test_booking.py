"""Tests for delivery booking."""

import pytest

from bargainwala.core.booking import DeliveryStatus, confirm_delivery, reschedule_delivery
from bargainwala.core.store import get_current_delivery, list_slots
from bargainwala.db.seed import DEFAULT_DELIVERY_TIME


def _slot_id(session, time):
    return next(s.id for s in list_slots(session) if s.time == time)


class TestSeededDelivery:
    def test_starts_pending(self, db_session):
        delivery = get_current_delivery(db_session)
        assert delivery.status == DeliveryStatus.PENDING.value
        assert delivery.delivery_time == DEFAULT_DELIVERY_TIME

    def test_slots(self, db_session):
        slots = list_slots(db_session)
        assert len(slots) == 6
        assert [s.time for s in slots if s.is_booked] == [
            "11:00 AM - 12:00 PM",
            "03:00 PM - 04:00 PM",
        ]


class TestConfirmDelivery:
    def test_confirm_pending(self, db_session):
        delivery = confirm_delivery(db_session)
        assert delivery.status == DeliveryStatus.CONFIRMED.value
        assert delivery.delivery_time == DEFAULT_DELIVERY_TIME

    def test_confirm_twice(self, db_session):
        confirm_delivery(db_session)
        with pytest.raises(ValueError, match="already confirmed"):
            confirm_delivery(db_session)

    def test_confirm_after_reschedule(self, db_session):
        reschedule_delivery(db_session, _slot_id(db_session, "10:00 AM - 11:00 AM"))
        with pytest.raises(ValueError, match="already rescheduled"):
            confirm_delivery(db_session)

    def test_no_delivery(self, empty_db_session):
        with pytest.raises(ValueError, match="No delivery booked"):
            confirm_delivery(empty_db_session)


class TestRescheduleDelivery:
    def test_reschedule_to_free_slot(self, db_session):
        slot_id = _slot_id(db_session, "04:00 PM - 05:00 PM")
        delivery = reschedule_delivery(db_session, slot_id)
        assert delivery.status == DeliveryStatus.RESCHEDULED.value
        assert delivery.delivery_time == "04:00 PM - 05:00 PM"
        assert delivery.slot_id == slot_id

    def test_slot_stays_available(self, db_session):
        slot_id = _slot_id(db_session, "04:00 PM - 05:00 PM")
        reschedule_delivery(db_session, slot_id)
        slot = next(s for s in list_slots(db_session) if s.id == slot_id)
        assert slot.is_booked is False

    def test_reschedule_after_confirm(self, db_session):
        confirm_delivery(db_session)
        delivery = reschedule_delivery(db_session, _slot_id(db_session, "10:00 AM - 11:00 AM"))
        assert delivery.status == DeliveryStatus.RESCHEDULED.value

    def test_booked_slot_rejected(self, db_session):
        slot_id = _slot_id(db_session, "11:00 AM - 12:00 PM")
        with pytest.raises(ValueError, match="already booked"):
            reschedule_delivery(db_session, slot_id)
        assert get_current_delivery(db_session).status == DeliveryStatus.PENDING.value

    def test_unknown_slot(self, db_session):
        with pytest.raises(ValueError, match="not found"):
            reschedule_delivery(db_session, 999)
