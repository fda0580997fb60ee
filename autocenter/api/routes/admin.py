# autocenter/api/routes/admin.py
import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import StreamingResponse

from autocenter.api.deps import get_language, get_services, require_admin
from autocenter.core.container import Services
from autocenter.core.errors import StoreError
from autocenter.models.booking import LanguagePayload, LoginPayload
from autocenter.models.messages import translate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


@router.post("/login")
async def login(payload: LoginPayload, services: Services = Depends(get_services)):
    session = services.console.login(payload.email, payload.password)
    return {
        "access_token": session.access_token,
        "token_type": session.token_type,
        "expires_at": session.expires_at.isoformat(),
        "email": session.email,
    }


@router.get("/backend")
async def backend_mode(_admin=Depends(require_admin), services: Services = Depends(get_services)):
    return {"mode": services.mode}


@router.put("/preferences/language")
async def write_default_language(payload: LanguagePayload, _admin=Depends(require_admin),
                                 services: Services = Depends(get_services)):
    try:
        lang = services.preferences.set(payload.language)
    except ValueError as e:
        raise HTTPException(422, str(e))
    return {"language": lang, "direction": services.preferences.direction}


@router.get("/bookings")
async def list_bookings(_admin=Depends(require_admin), services: Services = Depends(get_services)):
    return [b.to_json() for b in await services.console.list()]


@router.get("/bookings/stream")
async def stream_bookings(request: Request, _admin=Depends(require_admin),
                          lang: str = Depends(get_language), services: Services = Depends(get_services)):
    async def events():
        try:
            async for items in services.console.watch():
                if await request.is_disconnected():
                    break
                payload = json.dumps([b.to_json() for b in items], ensure_ascii=False)
                yield f"event: snapshot\ndata: {payload}\n\n"
        except StoreError:
            # headers are already sent; tell the client and end the stream
            logger.exception("live booking feed stopped")
            yield f"event: error\ndata: {json.dumps({'detail': translate('operationFailed', lang)}, ensure_ascii=False)}\n\n"

    return StreamingResponse(events(), media_type="text/event-stream", headers={"Cache-Control": "no-store"})


@router.post("/bookings/{booking_id}/advance")
async def advance_booking(booking_id: str, _admin=Depends(require_admin),
                          lang: str = Depends(get_language), services: Services = Depends(get_services)):
    result = await services.console.advance(booking_id, lang)
    return result.model_dump(by_alias=True, mode="json")


@router.delete("/bookings/{booking_id}")
async def delete_booking(booking_id: str, confirm: bool = Query(False),
                         _admin=Depends(require_admin), services: Services = Depends(get_services)):
    await services.console.remove(booking_id, confirmed=confirm)
    return {"ok": True}
