# autocenter/repositories/base.py
from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import AsyncIterator, List, Optional

from autocenter.models.booking import ServiceRequest


class RequestStore(ABC):
    """
    Persistence for service requests. One implementation is chosen at startup
    and serves every operation for the life of the process.

    advance_stage is read-compute-write with no compare-and-swap: two admins
    advancing the same id at the same moment can lose one increment.
    """

    mode: str = "unknown"

    @abstractmethod
    async def create(self, request: ServiceRequest) -> ServiceRequest: ...

    @abstractmethod
    async def list_all(self) -> List[ServiceRequest]: ...

    @abstractmethod
    async def get_by_id(self, request_id: str) -> Optional[ServiceRequest]: ...

    @abstractmethod
    async def advance_stage(self, request_id: str) -> ServiceRequest: ...

    @abstractmethod
    async def delete(self, request_id: str) -> bool: ...

    async def watch(self, interval: float) -> AsyncIterator[List[ServiceRequest]]:
        """Yields the full listing now and again each time it changes."""
        async for items in self._poll(interval):
            yield items

    async def _poll(self, interval: float, last: Optional[list] = None) -> AsyncIterator[List[ServiceRequest]]:
        while True:
            items = await self.list_all()
            snapshot = [i.to_json() for i in items]
            if snapshot != last:
                last = snapshot
                yield items
            await asyncio.sleep(interval)
