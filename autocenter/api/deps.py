# autocenter/api/deps.py
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from autocenter.core.container import Services
from autocenter.core.errors import AuthError
from autocenter.core.security import decode_session_token
from autocenter.models.common import normalize_language
from autocenter.services.preferences import LANGUAGE_COOKIE

security = HTTPBearer(auto_error=False)


def get_services(request: Request) -> Services:
    return request.app.state.services


def resolve_language(request: Request) -> str:
    services = getattr(request.app.state, "services", None)
    if services is None:
        return normalize_language(request.query_params.get("lang"))
    return services.preferences.resolve(request.query_params.get("lang"), request.cookies.get(LANGUAGE_COOKIE))


get_language = resolve_language


async def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    services: Services = Depends(get_services),
) -> dict:
    if credentials is None:
        raise AuthError("Not authenticated")
    return decode_session_token(services.settings, credentials.credentials)
