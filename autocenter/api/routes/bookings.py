# autocenter/api/routes/bookings.py
from fastapi import APIRouter, Depends, HTTPException, status

from autocenter.api.deps import get_language, get_services
from autocenter.core.container import Services
from autocenter.models.booking import BookingCreate, BookingOut, TrackingOut
from autocenter.models.messages import translate

router = APIRouter()


@router.post("/bookings", status_code=status.HTTP_201_CREATED)
async def create_booking(payload: BookingCreate, lang: str = Depends(get_language),
                         services: Services = Depends(get_services)):
    booking, link = await services.bookings.create(payload, lang)
    return BookingOut(booking=booking, confirmation_link=link).model_dump(by_alias=True, mode="json")


@router.get("/track/{booking_id}")
async def track_booking(booking_id: str, lang: str = Depends(get_language),
                        services: Services = Depends(get_services)):
    result: TrackingOut | None = await services.tracker.track(booking_id, lang)
    if result is None:
        raise HTTPException(404, translate("noBookingFound", lang))
    return result.model_dump(by_alias=True, mode="json")
