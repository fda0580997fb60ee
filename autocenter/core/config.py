# autocenter/core/config.py
from functools import lru_cache
from typing import List, Literal, Optional, Union
import json

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Abu Almagd Service Center"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # === MongoDB (cloud mode) ===
    # Empty or placeholder URL selects the local store
    mongo_url: str = ""
    db_name: str = "abu_almagd"
    bookings_collection: str = "bookings"
    mongo_tls: Optional[bool] = None
    mongo_timeout_ms: int = 20000

    # === Local mode ===
    local_storage_path: str = ".data/local_storage.json"

    # === Admin ===
    admin_email: str = "admin@abu-almagd.com"
    admin_password: str = "Atbara2024"
    secret_key: str = "change-me"
    algorithm: str = "HS256"
    session_expire_minutes: int = 480

    # === Site / messaging ===
    default_language: Literal["ar", "en"] = "ar"
    messaging_base_url: str = "https://wa.me"
    default_country_code: str = "249"
    center_phone: str = "+249 912 345 678"
    maps_url: str = "https://maps.google.com/?q=Atbara+Sudan"
    notify_on_booking: bool = True
    notify_on_status_update: bool = True
    notify_on_car_ready: bool = True

    # === Live updates ===
    live_poll_seconds: float = 3.0

    # === CORS ===
    # Accepts JSON (["http://a","https://b"]) or a comma separated list ("http://a,https://b")
    cors_origins: Union[str, List[str]] = ""

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v):
        if v is None:
            return []
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    data = json.loads(s)
                    if isinstance(data, list):
                        return [str(x).strip() for x in data if str(x).strip()]
                except ValueError:
                    # malformed JSON falls through to the comma split
                    pass
            return [item.strip() for item in s.split(",") if item.strip()]
        return [str(v).strip()] if str(v).strip() else []

    @property
    def cloud_configured(self) -> bool:
        url = (self.mongo_url or "").strip()
        return bool(url) and "REPLACE" not in url

    @property
    def use_tls(self) -> bool:
        if self.mongo_tls is not None:
            return self.mongo_tls
        return self.mongo_url.startswith("mongodb+srv://")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
