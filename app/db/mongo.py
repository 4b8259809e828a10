"""
app/db/mongo.py

Purpose: MongoDB connection setup

- Builds the Motor client (one per process, owned by the composition root)
- Resolves the users collection
- Startup connection check with retry
- Health checks and connection shutdown
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
import asyncio

from app.core.config import Settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def create_mongo_client(app_settings: Settings) -> AsyncIOMotorClient:
    """
    Creates the Motor client. No network I/O happens until first use.

    Args:
        app_settings: Settings providing MONGODB_URL

    Returns:
        AsyncIOMotorClient instance
    """
    # Fix URL encoding for special characters
    mongodb_url = app_settings.MONGODB_URL.replace("%%", "%25")

    return AsyncIOMotorClient(
        mongodb_url,
        maxPoolSize=50,
        minPoolSize=0,
        serverSelectionTimeoutMS=5000,
        connectTimeoutMS=10000,
    )


def get_users_collection(client, app_settings: Settings) -> AsyncIOMotorCollection:
    """
    Returns the collection holding user documents.

    Document fields:
    - _id: ObjectId (store-assigned)
    - name: str
    - email: str
    """
    return client[app_settings.MONGODB_DB_NAME][app_settings.MONGODB_COLLECTION]


async def connect_to_mongo(client, retries: int = 3, retry_delay: float = 2):
    """
    Verifies the MongoDB connection with retry logic.
    Called during application startup.

    Raises:
        ConnectionError: If the server cannot be reached after all attempts
    """
    for attempt in range(1, retries + 1):
        try:
            logger.info(
                f"Attempting to connect to MongoDB (attempt {attempt}/{retries})"
            )

            await client.admin.command("ping")

            logger.info("✅ Successfully connected to MongoDB")
            return

        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(
                f"Failed to connect to MongoDB (attempt {attempt}/{retries}): {e}"
            )

            if attempt < retries:
                logger.info(f"Retrying in {retry_delay} seconds...")
                await asyncio.sleep(retry_delay)
                retry_delay *= 2  # Exponential backoff
            else:
                logger.critical("Failed to connect to MongoDB after all retries")
                raise ConnectionError("Could not establish MongoDB connection") from e


def close_mongo_connection(client):
    """
    Closes the MongoDB connection.
    Called during application shutdown.
    """
    if client is not None:
        logger.info("Closing MongoDB connection")
        client.close()
        logger.info("MongoDB connection closed")


async def check_database_health(client) -> bool:
    """
    Checks if the database connection is healthy.

    Returns:
        True if connection is healthy, False otherwise
    """
    try:
        if client is None:
            logger.error("MongoDB client not initialized")
            return False

        await client.admin.command("ping")
        return True

    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        return False
