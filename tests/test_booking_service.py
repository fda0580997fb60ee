import re

import pytest
from pydantic import ValidationError

from autocenter.core.errors import StoreError
from autocenter.models.booking import BookingCreate
from autocenter.services.booking_service import BookingService, generate_booking_id
from conftest import BOOKING_PAYLOAD, make_request


def test_generated_ids_use_center_prefix():
    for _ in range(50):
        assert re.fullmatch(r"ABU-\d{4}", generate_booking_id())
    assert generate_booking_id(lambda lo, hi: lo) == "ABU-1000"
    assert generate_booking_id(lambda lo, hi: hi) == "ABU-9999"


@pytest.mark.asyncio
async def test_create_starts_at_stage_zero(local_store, settings):
    service = BookingService(local_store, settings)
    booking, link = await service.create(BookingCreate(**BOOKING_PAYLOAD), "en")

    assert booking.id
    assert booking.stage == 0
    assert booking.notes == "Noise from the front left wheel"
    assert (await local_store.get_by_id(booking.id)) == booking
    assert booking.id in link


@pytest.mark.asyncio
async def test_create_redraws_taken_ids(local_store, settings):
    await local_store.create(make_request("ABU-1000"))
    ids = iter(["ABU-1000", "ABU-1000", "ABU-2000"])
    service = BookingService(local_store, settings, id_factory=lambda: next(ids))

    booking, _ = await service.create(BookingCreate(**BOOKING_PAYLOAD), "ar")
    assert booking.id == "ABU-2000"


@pytest.mark.asyncio
async def test_create_gives_up_when_no_id_is_free(local_store, settings):
    await local_store.create(make_request("ABU-1000"))
    service = BookingService(local_store, settings, id_factory=lambda: "ABU-1000")
    with pytest.raises(StoreError):
        await service.create(BookingCreate(**BOOKING_PAYLOAD), "ar")


@pytest.mark.asyncio
async def test_no_confirmation_link_when_disabled(local_store, settings):
    quiet = settings.model_copy(update={"notify_on_booking": False})
    _, link = await BookingService(local_store, quiet).create(BookingCreate(**BOOKING_PAYLOAD), "ar")
    assert link is None


@pytest.mark.parametrize("field", ["customerName", "phone", "vehicleModel", "licensePlate", "serviceType", "scheduledTime"])
def test_required_fields_must_not_be_blank(field):
    with pytest.raises(ValidationError):
        BookingCreate(**{**BOOKING_PAYLOAD, field: "   "})


def test_blank_notes_become_none():
    assert BookingCreate(**{**BOOKING_PAYLOAD, "notes": "  "}).notes is None
