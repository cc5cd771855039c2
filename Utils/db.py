import logging
from urllib.parse import urlparse

from mongoengine import connect

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = "lostandfound_db"


def init_db(mongo_uri, alias="default", **kwargs):
    """Register the mongoengine connection used by every model.

    Extra keyword arguments are passed to ``connect`` (for example
    ``mongo_client_class`` in tests).
    """
    # Auto-detect DB name from URI
    parsed = urlparse(mongo_uri)
    db_name = (parsed.path or "").lstrip("/") or DEFAULT_DB_NAME

    try:
        connect(
            db=db_name,
            host=mongo_uri,
            alias=alias,
            **kwargs
        )
        logger.info(f"✅ MongoDB connected successfully → {db_name}")
    except Exception as e:
        logger.error(f"❌ MongoDB connection error: {e}")
        raise
    return db_name
