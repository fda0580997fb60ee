# autocenter/core/indexes.py
import logging
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


async def ensure_booking_indexes(collection):
    try:
        await collection.create_index("id", unique=True)
        await collection.create_index([("createdAt", -1)])
    except PyMongoError as e:
        # the store still works without indexes, listing is just slower
        logger.exception("ensure_booking_indexes failed: %s", e)
