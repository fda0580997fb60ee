# autocenter/services/booking_service.py
import logging
import random
from datetime import datetime, timezone
from typing import Callable, Optional, Tuple

from autocenter.core.config import Settings
from autocenter.core.errors import StoreError
from autocenter.models.booking import BookingCreate, ServiceRequest
from autocenter.models.common import FIRST_STAGE
from autocenter.repositories.base import RequestStore
from autocenter.services.messaging import booking_confirmation_link

logger = logging.getLogger(__name__)

ID_PREFIX = "ABU"
MAX_ID_ATTEMPTS = 20


def generate_booking_id(rng: Callable[[int, int], int] = random.randint) -> str:
    return f"{ID_PREFIX}-{rng(1000, 9999)}"


class BookingService:
    def __init__(self, store: RequestStore, settings: Settings, id_factory: Callable[[], str] = generate_booking_id):
        self.store = store
        self.settings = settings
        self.id_factory = id_factory

    async def _unused_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self.id_factory()
            if await self.store.get_by_id(candidate) is None:
                return candidate
        raise StoreError("could not allocate a free booking id")

    async def create(self, payload: BookingCreate, lang: str) -> Tuple[ServiceRequest, Optional[str]]:
        request = ServiceRequest(
            id=await self._unused_id(),
            customer_name=payload.customer_name,
            phone=payload.phone,
            vehicle_model=payload.vehicle_model,
            license_plate=payload.license_plate,
            service_type=payload.service_type,
            scheduled_time=payload.scheduled_time,
            notes=payload.notes,
            stage=FIRST_STAGE,
            created_at=datetime.now(timezone.utc),
        )
        await self.store.create(request)
        logger.info("booking %s created (%s mode)", request.id, self.store.mode)

        link = None
        if self.settings.notify_on_booking:
            link = booking_confirmation_link(
                request.phone, request.id, request.customer_name, request.vehicle_model,
                request.service_type, request.scheduled_time, lang,
                base_url=self.settings.messaging_base_url, country_code=self.settings.default_country_code,
            )
        return request, link
