"""
Cross-collection search used by the assistant's general fallback.
"""

from typing import Optional

from ..jobs import JobService
from ..professionals import ProfessionalService
from ...config import Settings, get_settings
from ...core.models import SearchAllResults, SearchFilters
from ...utils.logging import get_logger

logger = get_logger("careconnect.search")


class SearchService:
    """Searches professionals, jobs and specializations together."""

    def __init__(
        self,
        professionals: ProfessionalService,
        jobs: JobService,
        settings: Optional[Settings] = None,
    ):
        self.professionals = professionals
        self.jobs = jobs
        self.settings = settings or get_settings()

    async def search_all(
        self,
        search_term: str,
        filters: Optional[SearchFilters] = None,
        exclude_professionals: bool = False,
        exclude_jobs: bool = False,
        exclude_specializations: bool = False,
    ) -> SearchAllResults:
        """
        Run the combined search.

        Professionals and jobs are filtered by ``filters`` only; specializations
        are matched by case-insensitive substring on their name. Each list is
        capped at ``search_all_limit``.
        """
        cap = self.settings.search_all_limit
        filters = (filters or SearchFilters()).with_limit(cap)
        results = SearchAllResults()

        try:
            if not exclude_professionals:
                results.professionals = await self.professionals.search_professionals(filters)

            if not exclude_jobs:
                results.jobs = await self.jobs.search_jobs(filters)

            if not exclude_specializations:
                term = (search_term or "").lower()
                specializations = await self.professionals.get_active_specializations()
                results.specializations = [
                    spec for spec in specializations if term in spec.name.lower()
                ][:cap]
        except Exception as e:
            logger.error(f"Error in search all: {e}")
            raise

        return results
