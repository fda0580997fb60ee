# autocenter/core/db.py
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from autocenter.core.config import Settings
import certifi

_client: Optional[AsyncIOMotorClient] = None


def get_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Single Motor client for the process.
    TLS with the certifi CA bundle for mongodb+srv (Atlas), plain for local mongodb://.
    """
    global _client
    if _client is None:
        kwargs = {"serverSelectionTimeoutMS": settings.mongo_timeout_ms}
        if settings.use_tls:
            kwargs.update(tls=True, tlsCAFile=certifi.where())
        _client = AsyncIOMotorClient(settings.mongo_url, **kwargs)
    return _client


def get_db(settings: Settings) -> AsyncIOMotorDatabase:
    return get_client(settings)[settings.db_name]


def get_bookings_collection(settings: Settings) -> AsyncIOMotorCollection:
    return get_db(settings)[settings.bookings_collection]


async def close_db() -> None:
    global _client
    if _client:
        _client.close()
    _client = None
