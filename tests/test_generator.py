import random
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from careconnect_agent.assistant.handlers import CLARIFICATION_PROMPTS
from careconnect_agent.core.exceptions import ContextStoreError, DocumentStoreError

APPOINTMENT = datetime(2025, 2, 10, 5, 30, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_therapist_with_no_professionals(empty_generator):
    response = await empty_generator.generate_response("I need a therapist")
    assert response.type == "no_results"
    assert "mental" in response.text
    assert response.quick_replies == ["Search related services", "Notify me", "Browse all categories"]


@pytest.mark.asyncio
async def test_therapist_lists_labelled_professionals(generator):
    response = await generator.generate_response("I need a therapist")
    assert response.type == "professional_list"
    assert response.text.startswith("Found 1 mental professionals")
    [professional] = response.data
    assert professional["name"] == "Meera Iyer"
    assert professional["professional_type_label"] == "Mental Health Professional"
    assert response.quick_replies == ["Refine search", "Browse other services"]


@pytest.mark.asyncio
async def test_booking_without_professionals_asks_for_category(empty_generator):
    response = await empty_generator.generate_response("book an appointment")
    assert response.type == "booking_start"
    assert response.quick_replies == ["Healthcare", "Mental Health", "Legal Services", "Financial Advice"]


@pytest.mark.asyncio
async def test_booking_lists_candidates_without_login(generator):
    response = await generator.generate_response("book an appointment")
    assert response.type == "booking_selection"
    assert response.quick_replies == ["Meera Iyer", "Asha Rao", "Dr. Vikram", "View more options"]
    assert "log in" in response.text
    assert len(response.data) == 4


@pytest.mark.asyncio
async def test_job_search_digest(generator):
    response = await generator.generate_response("show me jobs")
    assert response.type == "job_list"
    assert "**Staff Nurse** at City Hospital" in response.text
    assert "₹30,000-45,000" in response.text
    assert "₹50,000+" in response.text
    assert "Up to ₹20,000" in response.text
    assert [job["id"] for job in response.data] == ["j2", "j1", "j3"]


@pytest.mark.asyncio
async def test_job_search_no_results(empty_generator):
    response = await empty_generator.generate_response("any jobs in Goa")
    assert response.type == "no_results"
    assert response.quick_replies == ["Broaden search", "Set job alerts", "Browse all jobs", "Career guidance"]


@pytest.mark.asyncio
async def test_status_requires_login(generator):
    response = await generator.generate_response("status please")
    assert response.type == "auth_required"
    assert response.quick_replies == ["Login", "Register"]


@pytest.mark.asyncio
async def test_status_without_bookings(generator):
    response = await generator.generate_response("status please", user_id="u1")
    assert response.type == "no_bookings"


@pytest.mark.asyncio
async def test_status_summary(generator, store):
    await generator.services.bookings.create_booking("u1", "p1", APPOINTMENT, service_type="Cardiology")
    store.seed("consultations", [
        {"id": "c1", "client_id": "u1", "status": "scheduled", "type": "video",
         "scheduled_time": datetime(2025, 2, 12, tzinfo=timezone.utc)},
    ])

    response = await generator.generate_response("status please", user_id="u1")
    assert response.type == "status_summary"
    assert "**Your Recent Bookings:**" in response.text
    assert "• Cardiology - pending" in response.text
    assert "Feb 10, 2025" in response.text
    assert "**Active Consultations:**" in response.text
    assert len(response.data["bookings"]) == 1
    assert len(response.data["consultations"]) == 1


@pytest.mark.asyncio
async def test_help_menu(generator):
    response = await generator.generate_response("how do I start")
    assert response.type == "help_menu"
    assert response.quick_replies == ["Find services", "Find jobs", "Book appointment", "Account help"]


@pytest.mark.asyncio
async def test_profile_requires_login(generator):
    assert (await generator.generate_response("update my profile")).type == "auth_required"
    response = await generator.generate_response("update my profile", user_id="u1")
    assert response.type == "profile_menu"


@pytest.mark.asyncio
async def test_general_search_results(generator):
    response = await generator.generate_response("hello there")
    assert response.type == "search_results"
    assert "• Meera Iyer - Counselling" in response.text
    assert "• Remote Counsellor at MindCare" in response.text


@pytest.mark.asyncio
async def test_general_fallback_is_deterministic_with_seeded_rng(empty_generator):
    expected = random.Random(0).choice(CLARIFICATION_PROMPTS)
    response = await empty_generator.generate_response("hello there")
    assert response.type == "clarification_needed"
    assert response.text == expected


@pytest.mark.asyncio
async def test_general_falls_back_when_search_fails(generator, store):
    store.query = AsyncMock(side_effect=DocumentStoreError("unavailable"))
    response = await generator.generate_response("hello there")
    assert response.type == "clarification_needed"
    assert response.text in CLARIFICATION_PROMPTS


@pytest.mark.asyncio
async def test_store_failure_returns_error_reply(generator, store):
    store.query = AsyncMock(side_effect=DocumentStoreError("unavailable"))
    response = await generator.generate_response("I need a therapist")
    assert response.type == "error"
    assert response.quick_replies == ["Try again", "Contact support", "Main menu"]


@pytest.mark.asyncio
async def test_interaction_is_logged(generator, store):
    await generator.generate_response("jobs under 50 in Pune", user_id="u1")
    [record] = store.documents("views")
    assert record["action"] == "chat_message"
    assert record["data"]["intent"]["type"] == "job_search"
    assert record["data"]["filters"]["location"] == "Pune"
    assert record["data"]["filters"]["max_salary"] == 50000


@pytest.mark.asyncio
async def test_analytics_failure_does_not_break_reply(generator, store):
    store.add = AsyncMock(side_effect=RuntimeError("write failed"))
    response = await generator.generate_response("how do I start", user_id="u1")
    assert response.type == "help_menu"


@pytest.mark.asyncio
async def test_follow_up_refines_previous_job_search(generator):
    first = await generator.generate_response("show me jobs", user_id="u1")
    assert len(first.data) == 3

    refined = await generator.generate_response("in Pune", user_id="u1")
    assert refined.type == "job_list"
    assert [job["id"] for job in refined.data] == ["j1", "j3"]


@pytest.mark.asyncio
async def test_follow_up_refines_previous_service_search(generator):
    first = await generator.generate_response("I need a doctor", user_id="u1")
    assert sorted(p["id"] for p in first.data) == ["p1", "p2"]

    refined = await generator.generate_response("under 400", user_id="u1")
    assert refined.type == "professional_list"
    # p2 stores its fee as consultation_fee and still counts
    assert [(p["id"], p["price"]) for p in refined.data] == [("p2", 300.0)]


@pytest.mark.asyncio
async def test_service_search_applies_filters_in_same_message(generator):
    response = await generator.generate_response("verified doctor", user_id="u1")
    assert [p["id"] for p in response.data] == ["p1"]


@pytest.mark.asyncio
async def test_follow_up_ignored_after_context_expires(generator, clock):
    await generator.generate_response("show me jobs", user_id="u1")
    clock.advance(301)
    response = await generator.generate_response("in Pune", user_id="u1")
    assert response.type == "search_results"


@pytest.mark.asyncio
async def test_follow_up_needs_a_user(generator):
    await generator.generate_response("show me jobs")
    response = await generator.generate_response("in Pune")
    assert response.type == "search_results"


@pytest.mark.asyncio
async def test_context_saved_for_identified_users(generator, context_store):
    await generator.generate_response("I need a therapist", user_id="u1")
    context = await context_store.get("u1")
    assert context.last_intent.value == "service_search"
    assert context.last_category == "mental"


@pytest.mark.asyncio
async def test_confirm_booking_requires_login(generator):
    response = await generator.confirm_booking(None, "p1", APPOINTMENT)
    assert response.type == "auth_required"
    assert response.quick_replies == ["Login", "Register", "Learn more"]


@pytest.mark.asyncio
async def test_confirm_booking_unknown_professional(generator):
    response = await generator.confirm_booking("u1", "missing", APPOINTMENT)
    assert response.type == "not_found"


@pytest.mark.asyncio
async def test_confirm_booking_creates_pending_booking(generator, store):
    response = await generator.confirm_booking("u1", "p1", APPOINTMENT)
    assert response.type == "booking_created"
    assert "Asha Rao" in response.text
    assert "Feb 10, 2025" in response.text
    assert response.data["status"] == "pending"
    assert response.data["service_type"] == "Cardiology"
    assert len(store.documents("bookings")) == 1


def test_contextual_quick_replies(generator):
    assert generator.get_contextual_quick_replies("job_list")[0] == "Apply now"
    assert generator.get_contextual_quick_replies("unknown") == ["Main menu", "Help", "Search"]


@pytest.mark.asyncio
async def test_context_save_failure_keeps_reply(generator, context_store):
    context_store.save = AsyncMock(side_effect=ContextStoreError("redis down"))
    response = await generator.generate_response("show me jobs", user_id="u1")
    assert response.type == "job_list"


@pytest.mark.asyncio
async def test_context_read_failure_skips_refinement(generator, context_store):
    context_store.get = AsyncMock(side_effect=ContextStoreError("redis down"))
    response = await generator.generate_response("in Pune", user_id="u1")
    assert response.type == "search_results"


@pytest.mark.asyncio
async def test_classifier_failure_returns_error_reply(generator):
    generator.classifier.classify = MagicMock(side_effect=RuntimeError("bad table"))
    response = await generator.generate_response("hello", user_id="u1")
    assert response.type == "error"


@pytest.mark.asyncio
async def test_confirm_booking_store_failure_returns_error_reply(generator, store):
    store.add = AsyncMock(side_effect=DocumentStoreError("unavailable"))
    response = await generator.confirm_booking("u1", "p1", APPOINTMENT)
    assert response.type == "error"
    assert response.quick_replies == ["Try again", "Contact support", "Main menu"]
