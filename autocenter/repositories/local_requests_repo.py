# autocenter/repositories/local_requests_repo.py
from __future__ import annotations

import asyncio
import json
import logging
from typing import List, Optional

from pydantic import ValidationError

from autocenter.core.errors import NotFoundError, StoreError
from autocenter.core.storage import KeyValueStore
from autocenter.models.booking import ServiceRequest
from autocenter.models.common import next_stage
from autocenter.repositories.base import RequestStore

logger = logging.getLogger(__name__)

BOOKINGS_KEY = "abu_almagd_persistent_bookings"


class LocalRequestStore(RequestStore):
    """
    A single JSON array under one key, newest first because creates prepend.
    Key-value calls may touch disk, so they run in a worker thread.
    """

    mode = "local"

    def __init__(self, kv: KeyValueStore, key: str = BOOKINGS_KEY):
        self.kv = kv
        self.key = key
        self._lock = asyncio.Lock()

    def _load(self) -> List[ServiceRequest]:
        raw = self.kv.get_item(self.key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
            return [ServiceRequest.model_validate(d) for d in data]
        except (ValueError, TypeError, ValidationError) as e:
            raise StoreError(f"corrupt bookings list under {self.key}: {e}") from e

    def _save(self, items: List[ServiceRequest]) -> None:
        self.kv.set_item(self.key, json.dumps([i.to_json() for i in items], ensure_ascii=False))

    async def create(self, request: ServiceRequest) -> ServiceRequest:
        async with self._lock:
            items = await asyncio.to_thread(self._load)
            await asyncio.to_thread(self._save, [request] + items)
        return request

    async def list_all(self) -> List[ServiceRequest]:
        return await asyncio.to_thread(self._load)

    async def get_by_id(self, request_id: str) -> Optional[ServiceRequest]:
        items = await asyncio.to_thread(self._load)
        return next((b for b in items if b.id == request_id), None)

    async def advance_stage(self, request_id: str) -> ServiceRequest:
        async with self._lock:
            items = await asyncio.to_thread(self._load)
            for idx, b in enumerate(items):
                if b.id == request_id:
                    items[idx] = b.model_copy(update={"stage": next_stage(b.stage)})
                    await asyncio.to_thread(self._save, items)
                    return items[idx]
        raise NotFoundError()

    async def delete(self, request_id: str) -> bool:
        async with self._lock:
            items = await asyncio.to_thread(self._load)
            kept = [b for b in items if b.id != request_id]
            if len(kept) == len(items):
                raise NotFoundError()
            await asyncio.to_thread(self._save, kept)
        return True
