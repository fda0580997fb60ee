# autocenter/services/admin_service.py
import logging
from typing import AsyncIterator, List

from autocenter.core.config import Settings
from autocenter.core.errors import AuthError, ConfirmationRequiredError, NotFoundError
from autocenter.core.security import AdminSession, create_session_token, credentials_match
from autocenter.models.booking import AdvanceOut, ServiceRequest
from autocenter.models.common import FINAL_STAGE, stage_label
from autocenter.repositories.base import RequestStore
from autocenter.services.messaging import status_update_link
from autocenter.services.notifications import NotificationPort

logger = logging.getLogger(__name__)


class AdminConsole:
    """
    Operator actions on service requests. Routes only reach list/advance/remove
    after a session from login() has been verified.
    """

    def __init__(self, store: RequestStore, notifier: NotificationPort, settings: Settings):
        self.store = store
        self.notifier = notifier
        self.settings = settings

    def login(self, email: str, password: str) -> AdminSession:
        if not credentials_match(self.settings, email, password):
            logger.warning("admin login rejected for %r", email)
            raise AuthError()
        logger.info("admin login for %s", email)
        return create_session_token(self.settings, email.strip().lower())

    async def list(self) -> List[ServiceRequest]:
        return await self.store.list_all()

    def watch(self) -> AsyncIterator[List[ServiceRequest]]:
        return self.store.watch(self.settings.live_poll_seconds)

    def _wants_notification(self, new_stage: int) -> bool:
        if new_stage == FINAL_STAGE:
            return self.settings.notify_on_car_ready
        return self.settings.notify_on_status_update

    async def advance(self, request_id: str, lang: str) -> AdvanceOut:
        before = await self.store.get_by_id(request_id)
        if before is None:
            raise NotFoundError()
        after = await self.store.advance_stage(request_id)
        changed = after.stage != before.stage
        from_label = stage_label(before.stage, lang)
        to_label = stage_label(after.stage, lang)
        logger.info("booking %s stage %d -> %d", request_id, before.stage, after.stage)

        link = None
        if self._wants_notification(after.stage):
            link = status_update_link(
                after.phone, after.customer_name, after.vehicle_model, from_label, to_label, lang,
                ready=after.stage == FINAL_STAGE,
                base_url=self.settings.messaging_base_url, country_code=self.settings.default_country_code,
            )
            link = self.notifier.deliver(link, request_id)
        return AdvanceOut(booking=after, from_label=from_label, to_label=to_label, changed=changed, notification_link=link)

    async def remove(self, request_id: str, confirmed: bool) -> bool:
        if not confirmed:
            raise ConfirmationRequiredError()
        await self.store.delete(request_id)
        logger.info("booking %s deleted", request_id)
        return True
