"""
Pytest configuration and fixtures.
"""

import random
from datetime import datetime, timezone

import pytest

from careconnect_agent.assistant import AssistantServices, ResponseGenerator
from careconnect_agent.config import Settings
from careconnect_agent.services import (
    AnalyticsService,
    BookingService,
    InMemoryContextStore,
    JobService,
    ProfessionalService,
    SearchService,
)
from careconnect_agent.services.store import InMemoryDocumentStore


def ts(day: int) -> datetime:
    return datetime(2025, 1, day, 9, 0, tzinfo=timezone.utc)


PROFESSIONALS = [
    {
        "id": "p1",
        "first_name": "Asha",
        "last_name": "Rao",
        "professional_type_id": "3",
        "category": "mbbs",
        "specialization": "Cardiology",
        "rating": 4.8,
        "price": 500,
        "years_of_experience": 12,
        "verification_status": "verified",
        "createdAt": ts(1),
    },
    {
        "id": "p2",
        "name": "Dr. Vikram",
        "professional_type_id": 3,
        "category": "mbbs",
        "rating": 4.2,
        "consultation_fee": "300",
        "experience": 4,
        "verification_status": "pending",
        "createdAt": ts(5),
    },
    {
        "id": "p3",
        "full_name": "Meera Iyer",
        "professional_type_id": 1,
        "category": "mental",
        "specialty": "Counselling",
        "rating": 4.9,
        "price": 800,
        "verification_status": "Verified",
        "createdAt": ts(3),
    },
    {
        "id": "p4",
        "displayName": "Kabir Shah",
        "professional_type_id": "2",
        "category": "legal",
        "rating": 3.9,
        "price": 1000,
        "createdAt": ts(2),
    },
    {
        # no rating field: never returned by rating-ordered searches
        "id": "p5",
        "username": "labtech",
        "professional_type_id": "5",
        "category": "pathology",
        "price": 150,
    },
]

PROFESSIONAL_TYPES = [
    {"id": "1", "title": "Mental Health Professional", "name": "mental"},
    {"id": "3", "title": "Medical Doctor", "name": "mbbs"},
    {"id": "7", "title": "Nutritionist", "name": "nutrition"},
]

JOBS = [
    {
        "id": "j1",
        "title": "Staff Nurse",
        "company": "City Hospital",
        "location": "Pune",
        "jobType": "full-time",
        "workArrangement": ["onsite"],
        "salaryMin": 30000,
        "salaryMax": 45000,
        "isActive": True,
        "createdAt": ts(10),
    },
    {
        "id": "j2",
        "job_title": "Remote Counsellor",
        "company_name": "MindCare",
        "city": "Mumbai",
        "jobType": "remote",
        "workArrangement": ["remote"],
        "salaryMin": 50000,
        "isActive": True,
        "createdAt": ts(12),
    },
    {
        "id": "j3",
        "title": "Lab Assistant",
        "company": "Path Labs",
        "location": "Pune",
        "jobType": "part-time",
        "salaryMax": 20000,
        "isActive": True,
        "createdAt": ts(8),
    },
    {
        "id": "j4",
        "title": "Old Posting",
        "company": "Gone Inc",
        "location": "Pune",
        "isActive": False,
        "createdAt": ts(15),
    },
    {
        "id": "j5",
        "title": "Draft Posting",
        "company": "Draft Co",
        "location": "Pune",
        "isActive": "true",
        "createdAt": ts(14),
    },
]

SPECIALIZATIONS = [
    {"id": "s1", "name": "Cardiology", "isActive": True},
    {"id": "s2", "name": "Child Psychology", "isActive": True},
    {"id": "s3", "name": "Cardiac Surgery", "isActive": False},
]


@pytest.fixture
def settings():
    return Settings(_env_file=None, store_backend="memory", context_backend="memory")


@pytest.fixture
def store():
    """In-memory store seeded with a small directory."""
    return InMemoryDocumentStore({
        "professionals": PROFESSIONALS,
        "professional_types": PROFESSIONAL_TYPES,
        "placements": JOBS,
        "specializations": SPECIALIZATIONS,
    })


@pytest.fixture
def empty_store():
    return InMemoryDocumentStore()


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def context_store(clock):
    return InMemoryContextStore(ttl_seconds=300, clock=clock)


@pytest.fixture
def professional_service(store, settings):
    return ProfessionalService(store, settings)


@pytest.fixture
def job_service(store, settings):
    return JobService(store, settings)


@pytest.fixture
def booking_service(store, settings):
    return BookingService(store, settings)


def make_generator(store, settings, context_store, seed: int = 0) -> ResponseGenerator:
    professionals = ProfessionalService(store, settings)
    jobs = JobService(store, settings)
    services = AssistantServices(
        professionals=professionals,
        jobs=jobs,
        bookings=BookingService(store, settings),
        search=SearchService(professionals, jobs, settings),
    )
    return ResponseGenerator(
        services,
        context_store,
        analytics=AnalyticsService(store, settings),
        settings=settings,
        rng=random.Random(seed),
    )


@pytest.fixture
def generator(store, settings, context_store):
    """Response generator over the seeded store."""
    return make_generator(store, settings, context_store)


@pytest.fixture
def empty_generator(empty_store, settings, context_store):
    """Response generator over a store with no documents."""
    return make_generator(empty_store, settings, context_store)
