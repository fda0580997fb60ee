# autocenter/services/messaging.py
"""
Deep links that open a pre-filled WhatsApp message. Pure string formatting,
nothing is sent from here.
"""
from urllib.parse import quote

from autocenter.models.messages import translate

DEFAULT_BASE_URL = "https://wa.me"
DEFAULT_COUNTRY_CODE = "249"


def normalize_phone(phone: str, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    raw = (phone or "").strip()
    digits = "".join(ch for ch in raw if ch.isdigit())
    if raw.startswith("+"):
        return digits
    if digits.startswith("00"):
        return digits[2:]
    if digits.startswith("0"):
        return country_code + digits[1:]
    return digits


def _link(phone: str, text: str, base_url: str, country_code: str) -> str:
    return f"{base_url.rstrip('/')}/{normalize_phone(phone, country_code)}?text={quote(text, safe='')}"


def booking_confirmation_link(phone, booking_id, name, vehicle, service, scheduled_time, lang,
                              base_url=DEFAULT_BASE_URL, country_code=DEFAULT_COUNTRY_CODE) -> str:
    text = translate("waBooking", lang).format(
        name=name, booking_id=booking_id, vehicle=vehicle, service=service, time=scheduled_time
    )
    return _link(phone, text, base_url, country_code)


def status_update_link(phone, name, vehicle, from_label, to_label, lang, ready=False,
                       base_url=DEFAULT_BASE_URL, country_code=DEFAULT_COUNTRY_CODE) -> str:
    key = "waCarReady" if ready else "waStatusUpdate"
    text = translate(key, lang).format(name=name, vehicle=vehicle, from_label=from_label, to_label=to_label)
    return _link(phone, text, base_url, country_code)
