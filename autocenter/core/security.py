# autocenter/core/security.py
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import hmac

import jwt

from autocenter.core.config import Settings
from autocenter.core.errors import AuthError

SESSION_SUBJECT = "admin"


@dataclass(frozen=True)
class AdminSession:
    email: str
    access_token: str
    expires_at: datetime
    token_type: str = "bearer"


def credentials_match(settings: Settings, email: str, password: str) -> bool:
    # compare both fields even when the first one fails
    email_ok = hmac.compare_digest((email or "").strip().lower().encode(), settings.admin_email.lower().encode())
    password_ok = hmac.compare_digest((password or "").encode(), settings.admin_password.encode())
    return email_ok and password_ok


def create_session_token(settings: Settings, email: str, minutes: int | None = None) -> AdminSession:
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes or settings.session_expire_minutes)
    token = jwt.encode({"sub": SESSION_SUBJECT, "email": email, "exp": expire}, settings.secret_key, algorithm=settings.algorithm)
    return AdminSession(email=email, access_token=token, expires_at=expire)


def decode_session_token(settings: Settings, token: str) -> dict:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.PyJWTError as e:
        raise AuthError("Invalid or expired session") from e
    if payload.get("sub") != SESSION_SUBJECT:
        raise AuthError("Invalid or expired session")
    return payload
