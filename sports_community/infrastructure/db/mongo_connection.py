# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_post_collection() -> AsyncIOMotorCollection:
    """
    Get posts collection from MongoDB
    
    Returns:
        MongoDB collection for posts
    """
    return get_database()["posts"]


async def connect_database() -> bool:
    """
    Open the MongoDB connection and make sure required indexes exist.
    
    A failed ping is logged rather than raised so the web server still
    starts; requests will surface the failure as a PersistenceError.
    
    Returns:
        True if the server answered, False otherwise
    """
    database = get_database()
    try:
        await database.command("ping")
        await get_user_collection().create_index(UserFields.EMAIL, unique=True)
    except PyMongoError as e:
        logger.error(f"MongoDB connection error: {e}")
        return False
    
    logger.info("MongoDB connected successfully.")
    return True


def close_database() -> None:
    """Close the MongoDB client and drop the cached handles."""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None
