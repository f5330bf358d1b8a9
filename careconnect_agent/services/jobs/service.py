"""
Job placement service.
"""

from typing import List, Optional

from ..store import Direction, DocumentStore, Query
from ...config import Settings, get_settings
from ...core.enums import JobSort
from ...core.models import JobListing, SearchFilters
from ...utils.logging import get_logger

logger = get_logger("careconnect.jobs")

SORT_FIELDS = {
    JobSort.SALARY_HIGH: ("salaryMax", Direction.DESCENDING),
    JobSort.SALARY_LOW: ("salaryMin", Direction.ASCENDING),
    JobSort.NEWEST: ("createdAt", Direction.DESCENDING),
}


def _sort_for(sort_by: Optional[str]):
    try:
        return SORT_FIELDS[JobSort(sort_by)]
    except ValueError:
        return SORT_FIELDS[JobSort.NEWEST]


class JobService:
    """Service for searching active job listings."""

    def __init__(self, store: DocumentStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or get_settings()
        self.collection = self.settings.database.jobs

    async def search_jobs(self, filters: Optional[SearchFilters] = None) -> List[JobListing]:
        """
        Search active job listings.

        Args:
            filters: job_type, location, experience, company, min_salary,
                max_salary, work_arrangement, sort_by and limit are honoured

        Returns:
            Active listings, newest first unless ``sort_by`` says otherwise
        """
        filters = filters or SearchFilters()
        query = Query(self.collection).where("isActive", "==", True)

        if filters.job_type:
            query.where("jobType", "==", filters.job_type)
        if filters.location:
            query.where("location", "==", filters.location)
        if filters.experience:
            query.where("experience", "==", filters.experience)
        if filters.min_salary:
            query.where("salaryMin", ">=", filters.min_salary)
        if filters.max_salary:
            query.where("salaryMax", "<=", filters.max_salary)
        if filters.company:
            query.where("company", "==", filters.company)
        if filters.work_arrangement:
            query.where("workArrangement", "array-contains", filters.work_arrangement)

        field_name, direction = _sort_for(filters.sort_by)
        query.order(field_name, direction)
        query.take(filters.limit or self.settings.job_search_limit)

        try:
            docs = await self.store.query(query)
        except Exception as e:
            logger.error(f"Error searching jobs: {e}")
            raise

        return [JobListing.from_document(doc) for doc in docs]

    async def get_job_by_id(self, job_id: str) -> Optional[JobListing]:
        try:
            doc = await self.store.get(self.collection, job_id)
        except Exception as e:
            logger.error(f"Error getting job {job_id}: {e}")
            raise
        return JobListing.from_document(doc) if doc else None
