# autocenter/services/notifications.py
import logging
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)


class NotificationPort(ABC):
    """Best effort: called after a store write succeeds, never confirmed or retried."""

    @abstractmethod
    def deliver(self, link: str, booking_id: str) -> Optional[str]: ...


class LinkOutbox(NotificationPort):
    """Hands the link back to the operator's browser, which opens it."""

    def deliver(self, link: str, booking_id: str) -> Optional[str]:
        logger.info("notification link ready for %s", booking_id)
        return link
