import copy
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, OperationFailure, PyMongoError

from autocenter.core.config import Settings
from autocenter.core.storage import MemoryKeyValueStore
from autocenter.models.booking import ServiceRequest
from autocenter.repositories.local_requests_repo import LocalRequestStore
from autocenter.repositories.mongo_requests_repo import MongoRequestStore
from autocenter.services.notifications import NotificationPort


# ---------- in-memory stand-in for a Motor collection ----------

class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, field, direction):
        self._docs.sort(key=lambda d: d.get(field), reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        return self._docs if length is None else self._docs[:length]


class _NoChangeStream:
    async def __aenter__(self):
        raise OperationFailure("The $changeStream stage is only supported on replica sets", code=40573)

    async def __aexit__(self, *exc):
        return False


class FakeCollection:
    def __init__(self):
        self.docs = []
        self.indexes = []
        self.fail = False

    def _check(self):
        if self.fail:
            raise PyMongoError("connection refused")

    @staticmethod
    def _matches(doc, filt):
        return all(doc.get(k) == v for k, v in (filt or {}).items())

    @staticmethod
    def _project(doc, projection):
        out = copy.deepcopy(doc)
        if projection and projection.get("_id") == 0:
            out.pop("_id", None)
        return out

    async def create_index(self, keys, **kwargs):
        self._check()
        self.indexes.append((keys, kwargs))

    async def insert_one(self, doc):
        self._check()
        if any(d["id"] == doc["id"] for d in self.docs):
            raise DuplicateKeyError("duplicate id")
        stored = copy.deepcopy(doc)
        stored["_id"] = ObjectId()
        # Mongo drops tz info on the way back
        if isinstance(stored.get("createdAt"), datetime):
            stored["createdAt"] = stored["createdAt"].astimezone(timezone.utc).replace(tzinfo=None)
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def find(self, filt=None, projection=None):
        self._check()
        return FakeCursor([self._project(d, projection) for d in self.docs if self._matches(d, filt)])

    async def find_one(self, filt=None, projection=None):
        self._check()
        for d in self.docs:
            if self._matches(d, filt):
                return self._project(d, projection)
        return None

    async def update_one(self, filt, ops):
        self._check()
        for d in self.docs:
            if self._matches(d, filt):
                d.update(ops.get("$set", {}))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, filt):
        self._check()
        for i, d in enumerate(self.docs):
            if self._matches(d, filt):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def watch(self, *args, **kwargs):
        return _NoChangeStream()


class RecordingNotifier(NotificationPort):
    def __init__(self):
        self.sent = []

    def deliver(self, link, booking_id):
        self.sent.append((booking_id, link))
        return link


# ---------- fixtures ----------

@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        mongo_url="",
        secret_key="test-secret",
        live_poll_seconds=0.01,
        default_language="ar",
    )


@pytest.fixture
def kv():
    return MemoryKeyValueStore()


@pytest.fixture
def local_store(kv):
    return LocalRequestStore(kv)


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def mongo_store(fake_collection):
    return MongoRequestStore(fake_collection)


@pytest.fixture
def notifier():
    return RecordingNotifier()


def make_request(request_id="ABU-4821", stage=0, minutes_ago=0, **fields):
    data = dict(
        id=request_id,
        customer_name="Omar Hassan",
        phone="0912345678",
        vehicle_model="Toyota Hilux 2018",
        license_plate="KH 2231",
        service_type="Engine Repair",
        scheduled_time="2026-10-20T09:30",
        notes=None,
        stage=stage,
        created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
    )
    data.update(fields)
    return ServiceRequest(**data)


BOOKING_PAYLOAD = {
    "customerName": "Omar Hassan",
    "phone": "0912345678",
    "vehicleModel": "Toyota Hilux 2018",
    "licensePlate": "KH 2231",
    "serviceType": "Engine Repair",
    "scheduledTime": "2026-10-20T09:30",
    "notes": "Noise from the front left wheel",
}
