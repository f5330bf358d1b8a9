"""
Filter extraction from free text.

Each filter is detected independently; anything not mentioned stays unset.
"""

import re
from typing import Optional

from .keywords import (
    EXPERIENCE_LEVELS,
    JOB_TYPES,
    LOCATION_PATTERN,
    MAX_PRICE_PATTERN,
    MIN_PRICE_PATTERN,
    SALARY_SCALE,
    TOP_RATED_KEYWORDS,
    TOP_RATED_MIN_RATING,
    VERIFIED_KEYWORDS,
    WORK_ARRANGEMENTS,
)
from ..core.enums import ProfessionalSort
from ..core.models import SearchFilters
from ..utils.text import contains_any

_LOCATION_RE = re.compile(LOCATION_PATTERN, re.IGNORECASE)
_MAX_PRICE_RE = re.compile(MAX_PRICE_PATTERN)
_MIN_PRICE_RE = re.compile(MIN_PRICE_PATTERN)


def _first_number(match: Optional[re.Match]) -> Optional[int]:
    if not match:
        return None
    value = next(group for group in match.groups() if group is not None)
    return int(value)


def _first_key(text: str, table: dict):
    for key, keywords in table.items():
        if contains_any(text, keywords):
            return key
    return None


class FilterExtractor:
    """
    Extracts search filters from a chat message.

    Example:
        extractor = FilterExtractor()
        extractor.extract("jobs under 50000 in Mumbai")
        # SearchFilters(location="Mumbai", max_price=50000, max_salary=50000000)
    """

    def extract(self, message: str) -> SearchFilters:
        original = message or ""
        text = original.lower()
        filters = SearchFilters()

        # Matched on the original text so the place name keeps its casing
        location = _LOCATION_RE.search(original)
        if location:
            filters.location = location.group(1).strip()

        experience = _first_key(text, EXPERIENCE_LEVELS)
        if experience is not None:
            filters.experience = experience.value

        job_type = _first_key(text, JOB_TYPES)
        if job_type is not None:
            filters.job_type = job_type.value

        arrangement = _first_key(text, WORK_ARRANGEMENTS)
        if arrangement is not None:
            filters.work_arrangement = arrangement.value

        max_price = _first_number(_MAX_PRICE_RE.search(text))
        if max_price is not None:
            filters.max_price = max_price
            filters.max_salary = max_price * SALARY_SCALE

        min_price = _first_number(_MIN_PRICE_RE.search(text))
        if min_price is not None:
            filters.min_price = min_price
            filters.min_salary = min_price * SALARY_SCALE

        if contains_any(text, TOP_RATED_KEYWORDS):
            filters.min_rating = TOP_RATED_MIN_RATING
            filters.sort_by = ProfessionalSort.RATING.value

        if contains_any(text, VERIFIED_KEYWORDS):
            filters.verified = True

        return filters
