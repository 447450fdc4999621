"""
database.py – Motor client helpers
"""

from functools import lru_cache

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from ..core.config import get_settings


@lru_cache            # 1 global singleton – avoids reconnect churn
def get_client() -> AsyncIOMotorClient:
    """
    Return a cached Motor client.

    • settings.mongo_uri is a pydantic MongoDsn → cast to str.
    • uuidRepresentation="standard" keeps UUIDs driver-default.
    """
    return AsyncIOMotorClient(str(get_settings().mongo_uri), uuidRepresentation="standard")


def get_db():
    """Default database named in the URI."""
    return get_client().get_default_database()


def get_users_collection() -> AsyncIOMotorCollection:
    return get_db()[get_settings().users_collection]
