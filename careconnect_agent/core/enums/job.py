"""
Job-listing enums.
"""

from enum import Enum


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    REMOTE = "remote"
    FREELANCE = "freelance"
    INTERNSHIP = "internship"


class WorkArrangement(str, Enum):
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


class JobSort(str, Enum):
    """Sort orders for job searches."""

    SALARY_HIGH = "salary_high"
    SALARY_LOW = "salary_low"
    NEWEST = "newest"
