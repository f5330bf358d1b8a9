from unittest.mock import AsyncMock

import pytest

from careconnect_agent.services import AnalyticsService, UserService


@pytest.fixture
def user_service(store, settings):
    store.seed("users", [{"id": "u1", "first_name": "Riya", "last_name": "Sen", "phoneNumber": "98200"}])
    return UserService(store, settings)


@pytest.mark.asyncio
async def test_get_user_profile(user_service):
    profile = await user_service.get_user_profile("u1")
    assert profile.name == "Riya Sen"
    assert profile.phone == "98200"
    assert await user_service.get_user_profile("nobody") is None


@pytest.mark.asyncio
async def test_update_user_profile(user_service, store):
    assert await user_service.update_user_profile("u1", {"email": "riya@example.com"}) is True
    doc = await store.get("users", "u1")
    assert doc["email"] == "riya@example.com"
    assert "updatedAt" in doc


@pytest.mark.asyncio
async def test_notifications_newest_first(user_service):
    first = await user_service.create_notification("u1", {"title": "Welcome", "body": "Hi"})
    second = await user_service.create_notification("u1", {"title": "Booked", "read": True})
    await user_service.create_notification("u2", {"title": "Other"})

    notifications = await user_service.get_user_notifications("u1")
    assert {n.id for n in notifications} == {first.id, second.id}
    assert first.message == "Hi"
    # new notifications always start unread
    assert second.read is False


@pytest.mark.asyncio
async def test_log_user_interaction(store, settings):
    analytics = AnalyticsService(store, settings)
    assert await analytics.log_user_interaction("u1", "chat_message", {"message": "hi"}) is True

    [record] = store.documents("views")
    assert record["userId"] == "u1"
    assert record["action"] == "chat_message"
    assert record["data"] == {"message": "hi"}
    assert record["clientContext"] == {}


@pytest.mark.asyncio
async def test_log_user_interaction_failure_is_swallowed(store, settings):
    store.add = AsyncMock(side_effect=RuntimeError("write failed"))
    analytics = AnalyticsService(store, settings)
    assert await analytics.log_user_interaction("u1", "chat_message") is False
