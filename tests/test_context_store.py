from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from careconnect_agent.core.enums import IntentType
from careconnect_agent.core.exceptions import ContextStoreError
from careconnect_agent.core.models import ConversationContext
from careconnect_agent.services import RedisContextStore


def sample_context(**kwargs):
    return ConversationContext(
        last_intent=IntentType.JOB_SEARCH,
        last_filters={"location": "Pune"},
        **kwargs,
    )


class FakeRedis:
    """Minimal async Redis double keyed in a dict."""

    def __init__(self):
        self.data = {}
        self.expiries = {}

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        self.data[key] = value
        self.expiries[key] = ex

    async def delete(self, key):
        self.data.pop(key, None)

    async def aclose(self):
        return None


@pytest.mark.asyncio
async def test_fresh_context_is_returned(context_store, clock):
    await context_store.save("u1", sample_context())
    clock.advance(299)
    context = await context_store.get("u1")
    assert context.last_intent == IntentType.JOB_SEARCH
    assert context.last_filters == {"location": "Pune"}


@pytest.mark.asyncio
async def test_repeated_reads_within_ttl_return_same_context(context_store, clock):
    await context_store.save("u1", sample_context())
    clock.advance(100)
    first = await context_store.get("u1")
    clock.advance(100)
    second = await context_store.get("u1")
    assert first == second
    assert len(context_store) == 1


@pytest.mark.asyncio
async def test_stale_context_is_deleted_on_read(context_store, clock):
    await context_store.save("u1", sample_context())
    clock.advance(300)
    assert await context_store.get("u1") is None
    assert len(context_store) == 0
    # still gone on a second read
    assert await context_store.get("u1") is None


@pytest.mark.asyncio
async def test_save_refreshes_timestamp(context_store, clock):
    await context_store.save("u1", sample_context())
    clock.advance(200)
    await context_store.save("u1", sample_context(last_message="again"))
    clock.advance(200)
    context = await context_store.get("u1")
    assert context.last_message == "again"


@pytest.mark.asyncio
async def test_saved_context_is_isolated(context_store):
    context = sample_context()
    await context_store.save("u1", context)
    context.last_filters["location"] = "Delhi"
    assert (await context_store.get("u1")).last_filters == {"location": "Pune"}


@pytest.mark.asyncio
async def test_empty_user_is_ignored(context_store):
    await context_store.save("", sample_context())
    assert len(context_store) == 0
    assert await context_store.get("") is None


@pytest.mark.asyncio
async def test_redis_store_roundtrip_and_expiry(clock):
    client = FakeRedis()
    store = RedisContextStore(client=client, ttl_seconds=300, clock=clock)

    await store.save("u1", sample_context())
    assert client.expiries["careconnect:context:u1"] == 300

    clock.advance(10)
    context = await store.get("u1")
    assert context.last_intent == IntentType.JOB_SEARCH

    clock.advance(300)
    assert await store.get("u1") is None
    assert "careconnect:context:u1" not in client.data


@pytest.mark.asyncio
async def test_redis_errors_are_wrapped(clock):
    client = FakeRedis()
    client.get = AsyncMock(side_effect=redis.ConnectionError("down"))
    store = RedisContextStore(client=client, clock=clock)
    with pytest.raises(ContextStoreError):
        await store.get("u1")


def test_redis_store_needs_url_or_client():
    with pytest.raises(ValueError):
        RedisContextStore()
