"""Tests for LoadUserByEmailRepository."""

from __future__ import annotations

import os
from unittest.mock import AsyncMock

import pytest

from login_api.services.users import LoadUserByEmailRepository

MONGO_URL = os.getenv("MONGO_URL")


# ---------------------------------------------------------------------------
# Unit (mocked collection)
# ---------------------------------------------------------------------------


class TestLoadWithMockedCollection:
    async def test_queries_by_email(self):
        collection = AsyncMock()
        collection.find_one.return_value = None

        await LoadUserByEmailRepository(collection).load("any_email@mail.com")

        collection.find_one.assert_awaited_once_with({"email": "any_email@mail.com"})

    async def test_returns_none_if_no_user_is_found(self):
        collection = AsyncMock()
        collection.find_one.return_value = None

        user = await LoadUserByEmailRepository(collection).load("invalid_email@mail.com")

        assert user is None

    async def test_returns_document_untouched(self):
        doc = {"_id": "abc", "email": "valid_email@mail.com", "hashed_pw": "x"}
        collection = AsyncMock()
        collection.find_one.return_value = doc

        user = await LoadUserByEmailRepository(collection).load("valid_email@mail.com")

        assert user is doc

    async def test_propagates_store_errors(self):
        collection = AsyncMock()
        collection.find_one.side_effect = ConnectionError("mongo down")

        with pytest.raises(ConnectionError):
            await LoadUserByEmailRepository(collection).load("valid_email@mail.com")


# ---------------------------------------------------------------------------
# Integration (real MongoDB, only when MONGO_URL is set)
# ---------------------------------------------------------------------------


@pytest.fixture()
async def users_collection():
    from motor.motor_asyncio import AsyncIOMotorClient

    client = AsyncIOMotorClient(MONGO_URL)
    collection = client.get_default_database("login_api_test")["users"]
    await collection.delete_many({})
    yield collection
    await collection.delete_many({})
    client.close()


@pytest.mark.skipif(not MONGO_URL, reason="MONGO_URL not set")
class TestLoadAgainstMongo:
    async def test_returns_none_if_no_user_is_found(self, users_collection):
        user = await LoadUserByEmailRepository(users_collection).load("invalid_email@mail.com")

        assert user is None

    async def test_returns_user_if_user_is_found(self, users_collection):
        await users_collection.insert_one({"email": "valid_email@mail.com"})

        user = await LoadUserByEmailRepository(users_collection).load("valid_email@mail.com")

        assert user["email"] == "valid_email@mail.com"
