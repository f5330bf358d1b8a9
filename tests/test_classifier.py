import pytest

from careconnect_agent.assistant import IntentClassifier
from careconnect_agent.core.enums import IntentType, ServiceCategory


@pytest.fixture
def classifier():
    return IntentClassifier()


@pytest.mark.parametrize(
    "message,expected_type,expected_category,confidence",
    [
        ("I want to book a doctor", IntentType.BOOKING, None, 0.9),
        ("Find me a job in Pune", IntentType.JOB_SEARCH, None, 0.8),
        ("I need a therapist", IntentType.SERVICE_SEARCH, ServiceCategory.MENTAL, 0.85),
        ("looking for a good physician", IntentType.SERVICE_SEARCH, ServiceCategory.MBBS, 0.85),
        ("I need a lawyer", IntentType.SERVICE_SEARCH, ServiceCategory.LEGAL, 0.85),
        ("where can I get a blood test", IntentType.SERVICE_SEARCH, ServiceCategory.PATHOLOGY, 0.85),
        ("update my profile", IntentType.PROFILE, None, 0.8),
        ("what is the status", IntentType.HELP, None, 0.7),
        ("status please", IntentType.STATUS_INQUIRY, None, 0.7),
        ("hello there", IntentType.GENERAL, None, 0.5),
    ],
)
def test_classify(classifier, message, expected_type, expected_category, confidence):
    intent = classifier.classify(message)
    assert intent.type == expected_type
    assert intent.category == expected_category
    assert intent.confidence == confidence


def test_booking_beats_service_category(classifier):
    assert classifier.classify("schedule a therapist session").type == IntentType.BOOKING


def test_job_keywords_beat_placement_category(classifier):
    # "career" is in both tables; the job rule runs first
    intent = classifier.classify("career advice")
    assert intent.type == IntentType.JOB_SEARCH
    assert intent.category is None


def test_job_keyword_beats_service_keyword(classifier):
    intent = classifier.classify("find a doctor job")
    assert intent.type == IntentType.JOB_SEARCH
    assert intent.category is None


def test_help_word_maps_to_other_service(classifier):
    intent = classifier.classify("help")
    assert intent.type == IntentType.SERVICE_SEARCH
    assert intent.category == ServiceCategory.OTHER


def test_my_bookings_is_booking_intent(classifier):
    # "booking" contains "book"
    assert classifier.classify("show my bookings").type == IntentType.BOOKING


def test_classification_is_case_insensitive(classifier):
    assert classifier.classify("THERAPIST").category == ServiceCategory.MENTAL


def test_empty_message_is_general(classifier):
    assert classifier.classify("").type == IntentType.GENERAL
    assert classifier.classify(None).type == IntentType.GENERAL


def test_log_payload_uses_plain_values(classifier):
    payload = classifier.classify("I need a therapist").as_log_payload()
    assert payload == {"type": "service_search", "confidence": 0.85, "category": "mental"}
