# autocenter/core/container.py
import logging
from dataclasses import dataclass
from typing import Optional

from autocenter.core.config import Settings
from autocenter.core.storage import JsonFileKeyValueStore, KeyValueStore
from autocenter.repositories.base import RequestStore
from autocenter.repositories.local_requests_repo import LocalRequestStore
from autocenter.repositories.mongo_requests_repo import MongoRequestStore
from autocenter.services.admin_service import AdminConsole
from autocenter.services.booking_service import BookingService
from autocenter.services.notifications import LinkOutbox, NotificationPort
from autocenter.services.preferences import LanguagePreference
from autocenter.services.tracking_service import StatusTracker

logger = logging.getLogger(__name__)


@dataclass
class Services:
    settings: Settings
    kv: KeyValueStore
    store: RequestStore
    preferences: LanguagePreference
    bookings: BookingService
    tracker: StatusTracker
    console: AdminConsole

    @property
    def mode(self) -> str:
        return self.store.mode


def build_request_store(settings: Settings, kv: KeyValueStore) -> RequestStore:
    """The only place that looks at the backend configuration."""
    if settings.cloud_configured:
        from autocenter.core.db import get_bookings_collection
        logger.info("Connected to cloud database (%s.%s)", settings.db_name, settings.bookings_collection)
        return MongoRequestStore(get_bookings_collection(settings))
    logger.info("Running in local mode: bookings saved to %s", settings.local_storage_path)
    return LocalRequestStore(kv)


def build_services(settings: Settings, kv: Optional[KeyValueStore] = None,
                   store: Optional[RequestStore] = None,
                   notifier: Optional[NotificationPort] = None) -> Services:
    kv = kv or JsonFileKeyValueStore(settings.local_storage_path)
    store = store or build_request_store(settings, kv)
    return Services(
        settings=settings,
        kv=kv,
        store=store,
        preferences=LanguagePreference(kv, default=settings.default_language),
        bookings=BookingService(store, settings),
        tracker=StatusTracker(store),
        console=AdminConsole(store, notifier or LinkOutbox(), settings),
    )
