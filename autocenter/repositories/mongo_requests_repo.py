# autocenter/repositories/mongo_requests_repo.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import AsyncIterator, List, Optional

from pydantic import ValidationError
from pymongo.errors import OperationFailure, PyMongoError

from autocenter.core.errors import NotFoundError, StoreError
from autocenter.models.booking import ServiceRequest
from autocenter.models.common import next_stage
from autocenter.repositories.base import RequestStore

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(op: str):
    try:
        yield
    except PyMongoError as e:
        logger.exception("bookings %s failed", op)
        raise StoreError(f"{op} failed: {e}") from e
    except ValidationError as e:
        logger.exception("malformed booking document during %s", op)
        raise StoreError(f"{op} failed: {e}") from e


class MongoRequestStore(RequestStore):
    """Bookings collection, documents keyed by their `id` field."""

    mode = "cloud"

    def __init__(self, collection):
        self.collection = collection

    async def create(self, request: ServiceRequest) -> ServiceRequest:
        with _store_errors("create"):
            await self.collection.insert_one(request.to_document())
        return request

    async def list_all(self) -> List[ServiceRequest]:
        with _store_errors("list"):
            docs = await self.collection.find({}, {"_id": 0}).sort("createdAt", -1).to_list(length=None)
            return [ServiceRequest.model_validate(d) for d in docs]

    async def get_by_id(self, request_id: str) -> Optional[ServiceRequest]:
        with _store_errors("get"):
            doc = await self.collection.find_one({"id": request_id}, {"_id": 0})
            return ServiceRequest.model_validate(doc) if doc else None

    async def advance_stage(self, request_id: str) -> ServiceRequest:
        current = await self.get_by_id(request_id)
        if current is None:
            raise NotFoundError()
        new_stage = next_stage(current.stage)
        with _store_errors("advance"):
            res = await self.collection.update_one({"id": request_id}, {"$set": {"stage": new_stage}})
        if res.matched_count == 0:
            # deleted between the read and the write
            raise NotFoundError()
        return current.model_copy(update={"stage": new_stage})

    async def delete(self, request_id: str) -> bool:
        with _store_errors("delete"):
            res = await self.collection.delete_one({"id": request_id})
        if res.deleted_count == 0:
            raise NotFoundError()
        return True

    async def watch(self, interval: float) -> AsyncIterator[List[ServiceRequest]]:
        items = await self.list_all()
        yield items
        try:
            async with self.collection.watch() as stream:
                async for _change in stream:
                    yield await self.list_all()
        except OperationFailure as e:
            # standalone servers have no change streams
            logger.info("change stream unavailable (%s), polling every %.1fs", e, interval)
            async for items in self._poll(interval, last=[i.to_json() for i in items]):
                yield items
        except PyMongoError as e:
            raise StoreError(f"watch failed: {e}") from e
