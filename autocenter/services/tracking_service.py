# autocenter/services/tracking_service.py
from typing import Optional

from autocenter.models.booking import ServiceRequest, TrackingOut
from autocenter.models.common import FINAL_STAGE, get_tracking_steps, progress_percent, stage_label
from autocenter.repositories.base import RequestStore


class StatusTracker:
    def __init__(self, store: RequestStore):
        self.store = store

    async def find(self, request_id: str) -> Optional[ServiceRequest]:
        # full scan with a case-insensitive match on the id
        wanted = (request_id or "").strip().upper()
        if not wanted:
            return None
        for b in await self.store.list_all():
            if b.id.upper() == wanted:
                return b
        return None

    async def track(self, request_id: str, lang: str) -> Optional[TrackingOut]:
        """None when nothing matches; the caller shows the "no booking found" notice."""
        booking = await self.find(request_id)
        if booking is None:
            return None
        return TrackingOut(
            booking=booking,
            stage=booking.stage,
            stage_label=stage_label(booking.stage, lang),
            steps=get_tracking_steps(lang),
            progress=progress_percent(booking.stage),
            completed=booking.stage == FINAL_STAGE,
        )
