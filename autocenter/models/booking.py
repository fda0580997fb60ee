# autocenter/models/booking.py
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autocenter.models.common import FINAL_STAGE, FIRST_STAGE


class _CamelModel(BaseModel):
    # stored documents and the JSON API both use the camelCase field names
    model_config = ConfigDict(populate_by_name=True)


class ServiceRequest(_CamelModel):
    id: str
    customer_name: str = Field(alias="customerName")
    phone: str
    vehicle_model: str = Field(alias="vehicleModel")
    license_plate: str = Field(alias="licensePlate")
    service_type: str = Field(alias="serviceType")
    scheduled_time: str = Field(alias="scheduledTime")
    notes: Optional[str] = None
    stage: int = Field(default=FIRST_STAGE, ge=FIRST_STAGE, le=FINAL_STAGE)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), alias="createdAt")

    @field_validator("created_at")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        # Mongo hands back naive UTC datetimes
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class BookingCreate(_CamelModel):
    customer_name: str = Field(alias="customerName", min_length=1, max_length=120)
    phone: str = Field(min_length=3, max_length=32)
    vehicle_model: str = Field(alias="vehicleModel", min_length=1, max_length=120)
    license_plate: str = Field(alias="licensePlate", min_length=1, max_length=32)
    service_type: str = Field(alias="serviceType", min_length=1, max_length=120)
    scheduled_time: str = Field(alias="scheduledTime", min_length=1, max_length=64)
    notes: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("customer_name", "phone", "vehicle_model", "license_plate", "service_type", "scheduled_time")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("notes")
    @classmethod
    def _strip_notes(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class BookingOut(_CamelModel):
    booking: ServiceRequest
    confirmation_link: Optional[str] = Field(default=None, alias="confirmationLink")


class TrackingOut(_CamelModel):
    booking: ServiceRequest
    stage: int
    stage_label: str = Field(alias="stageLabel")
    steps: List[str]
    progress: float
    completed: bool


class AdvanceOut(_CamelModel):
    booking: ServiceRequest
    from_label: str = Field(alias="fromLabel")
    to_label: str = Field(alias="toLabel")
    changed: bool
    notification_link: Optional[str] = Field(default=None, alias="notificationLink")


class LoginPayload(BaseModel):
    email: str
    password: str


class LanguagePayload(BaseModel):
    language: str
