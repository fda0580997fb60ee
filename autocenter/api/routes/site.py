# autocenter/api/routes/site.py
from fastapi import APIRouter, Depends, HTTPException, Request, Response

from autocenter.api.deps import get_language, get_services
from autocenter.core.container import Services
from autocenter.models.booking import LanguagePayload
from autocenter.models.catalog import list_services
from autocenter.models.common import get_tracking_steps, text_direction
from autocenter.models.messages import translate
from autocenter.services.preferences import LANGUAGE_COOKIE, other_language, parse_language

router = APIRouter()

LANGUAGE_COOKIE_MAX_AGE = 365 * 24 * 3600


@router.get("/site")
async def site_info(lang: str = Depends(get_language), services: Services = Depends(get_services)):
    s = services.settings
    return {
        "name": translate("centerName", lang),
        "tagline": translate("tagline", lang),
        "phone": s.center_phone,
        "mapsUrl": s.maps_url,
        "language": lang,
        "direction": text_direction(lang),
    }


@router.get("/services")
async def service_catalog(lang: str = Depends(get_language)):
    return list_services(lang)


@router.get("/stages")
async def stages(lang: str = Depends(get_language)):
    return {"language": lang, "steps": get_tracking_steps(lang)}


def _language_state(lang: str) -> dict:
    return {"language": lang, "direction": text_direction(lang)}


def _remember(response: Response, lang: str) -> dict:
    response.set_cookie(LANGUAGE_COOKIE, lang, max_age=LANGUAGE_COOKIE_MAX_AGE, samesite="lax")
    return _language_state(lang)


@router.get("/preferences/language")
async def read_language(lang: str = Depends(get_language)):
    return _language_state(lang)


@router.put("/preferences/language")
async def write_language(payload: LanguagePayload, response: Response):
    try:
        lang = parse_language(payload.language)
    except ValueError as e:
        raise HTTPException(422, str(e))
    return _remember(response, lang)


@router.post("/preferences/language/toggle")
async def toggle_language(request: Request, response: Response, services: Services = Depends(get_services)):
    current = services.preferences.resolve(client_lang=request.cookies.get(LANGUAGE_COOKIE))
    return _remember(response, other_language(current))

