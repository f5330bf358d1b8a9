"""
Keyword tables for intent classification and filter extraction.

Matching is lower-case substring membership. Table order matters: the first
matching entry wins, so entries are listed in priority order.
"""

from ..core.enums import ExperienceLevel, JobType, ServiceCategory, WorkArrangement

# === Intent keywords (checked in this order) ===

BOOKING_KEYWORDS = ["book", "appointment", "schedule", "meet", "consult", "reserve"]

JOB_KEYWORDS = ["job", "work", "career", "employment", "hiring", "position"]

SERVICE_CATEGORIES = {
    ServiceCategory.MBBS: [
        "doctor", "physician", "medical", "health", "clinic", "hospital", "medicine",
        "treatment", "diagnose", "surgery", "specialist", "surgeon",
    ],
    ServiceCategory.MENTAL: [
        "therapist", "counselor", "psychologist", "psychiatrist", "therapy", "counseling",
        "mental health", "depression", "anxiety", "stress", "trauma",
    ],
    ServiceCategory.PLACEMENT: [
        "job", "work", "career", "employment", "hiring", "interview", "resume", "cv",
        "salary", "company", "position",
    ],
    ServiceCategory.LEGAL: [
        "lawyer", "attorney", "legal", "law", "court", "case", "rights", "documentation",
        "legal advice",
    ],
    ServiceCategory.PATHOLOGY: ["lab", "test", "blood test", "pathology", "diagnostic", "xray", "scan"],
    ServiceCategory.OTHER: ["service", "help", "support", "assistance"],
}

HELP_KEYWORDS = ["help", "support", "assist", "guide", "how", "what", "where"]

PROFILE_KEYWORDS = ["profile", "account", "settings", "update", "change"]

STATUS_KEYWORDS = ["status", "booking", "appointment", "consultation", "my"]

# === Filter keywords ===

EXPERIENCE_LEVELS = {
    ExperienceLevel.ENTRY: ["fresher", "entry level", "beginner"],
    ExperienceLevel.SENIOR: ["experienced", "senior", "expert"],
    ExperienceLevel.MID: ["mid level", "intermediate"],
}

JOB_TYPES = {
    JobType.FULL_TIME: ["full time", "full-time", "permanent", "regular"],
    JobType.PART_TIME: ["part time", "part-time", "temporary", "contract"],
    JobType.REMOTE: ["remote", "work from home", "wfh", "online"],
    JobType.FREELANCE: ["freelance", "freelancer", "gig", "project-based"],
    JobType.INTERNSHIP: ["intern", "internship", "trainee", "apprentice"],
}

WORK_ARRANGEMENTS = {
    WorkArrangement.REMOTE: ["remote", "work from home", "wfh", "online", "virtual"],
    WorkArrangement.HYBRID: ["hybrid", "mixed", "flexible"],
    WorkArrangement.ONSITE: ["onsite", "office", "in-person", "physical"],
}

TOP_RATED_KEYWORDS = ["top rated", "best", "highest rated", "5 star"]

VERIFIED_KEYWORDS = ["verified", "certified", "licensed"]

# === Filter patterns ===

LOCATION_PATTERN = r"\bin\s+([a-z][a-z\s]*)"
MAX_PRICE_PATTERN = r"under\s+(\d+)|below\s+(\d+)|less\s+than\s+(\d+)"
MIN_PRICE_PATTERN = r"above\s+(\d+)|over\s+(\d+)|more\s+than\s+(\d+)"

# Salary figures in chat are given in thousands.
SALARY_SCALE = 1000

TOP_RATED_MIN_RATING = 4.5
