"""
Professional directory service: search, category lookup and type labels.
"""

from typing import Dict, List, Optional

from .category import CategoryResolver
from ..store import Direction, DocumentStore, Query
from ...config import Settings, get_settings
from ...core.enums import ProfessionalSort, ProfessionalTypeId, VerificationStatus
from ...core.exceptions import DocumentStoreError
from ...core.models import (
    Professional,
    ProfessionalType,
    ResolvedCategory,
    SearchFilters,
    Specialization,
)
from ...utils.logging import get_logger

logger = get_logger("careconnect.professionals")

SORT_FIELDS = {
    ProfessionalSort.RATING: ("rating", Direction.DESCENDING),
    ProfessionalSort.PRICE_LOW: ("price", Direction.ASCENDING),
    ProfessionalSort.PRICE_HIGH: ("price", Direction.DESCENDING),
    ProfessionalSort.EXPERIENCE: ("years_of_experience", Direction.DESCENDING),
    ProfessionalSort.NEWEST: ("createdAt", Direction.DESCENDING),
}


def _sort_for(sort_by: Optional[str]):
    try:
        return SORT_FIELDS[ProfessionalSort(sort_by)]
    except ValueError:
        return SORT_FIELDS[ProfessionalSort.RATING]


def _meets(professional: Professional, filters: SearchFilters) -> bool:
    """Apply the refinement filters to one normalized record; missing values never match."""
    if filters.max_price is not None:
        if professional.price is None or professional.price > filters.max_price:
            return False
    if filters.min_rating is not None:
        if professional.rating is None or professional.rating < filters.min_rating:
            return False
    if filters.min_experience is not None:
        years = professional.years_of_experience
        if years is None or years < filters.min_experience:
            return False
    if filters.verified is not None and professional.is_verified != filters.verified:
        return False
    return True


class ProfessionalService:
    """Service for reading professionals and their lookup collections."""

    def __init__(self, store: DocumentStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or get_settings()
        self.collections = self.settings.database
        self.resolver = CategoryResolver(self.get_professional_types)

    async def _run(self, query: Query, action: str) -> List[dict]:
        try:
            return await self.store.query(query)
        except Exception as e:
            logger.error(f"Error {action}: {e}")
            raise

    async def search_professionals(self, filters: Optional[SearchFilters] = None) -> List[Professional]:
        """
        Search professionals with optional filters.

        Args:
            filters: category, verified, min_rating, max_price, min_experience,
                sort_by and limit are honoured; other fields are ignored

        Returns:
            Matching professionals, best rated first unless ``sort_by`` says otherwise
        """
        filters = filters or SearchFilters()
        query = Query(self.collections.professionals)

        if filters.category:
            query.where("category", "==", filters.category)
        if filters.verified is not None:
            status = VerificationStatus.VERIFIED if filters.verified else VerificationStatus.PENDING
            query.where("verification_status", "==", status.value)
        if filters.min_rating:
            query.where("rating", ">=", filters.min_rating)
        if filters.max_price:
            query.where("price", "<=", filters.max_price)
        if filters.min_experience:
            query.where("years_of_experience", ">=", filters.min_experience)

        field_name, direction = _sort_for(filters.sort_by)
        query.order(field_name, direction)
        query.take(filters.limit or self.settings.professional_search_limit)

        docs = await self._run(query, "searching professionals")
        return [Professional.from_document(doc) for doc in docs]

    async def get_professional_by_id(self, professional_id: str) -> Optional[Professional]:
        try:
            doc = await self.store.get(self.collections.professionals, professional_id)
        except Exception as e:
            logger.error(f"Error getting professional {professional_id}: {e}")
            raise
        return Professional.from_document(doc) if doc else None

    async def get_professionals_by_category(
        self,
        category,
        limit: Optional[int] = None,
        filters: Optional[SearchFilters] = None,
    ) -> List[Professional]:
        """
        Fetch professionals for a category label such as ``mbbs`` or ``mental``.

        Unknown labels return the unfiltered collection (up to ``limit``).
        ``filters`` narrows the result by max_price, min_rating, verified and
        min_experience, checked on the normalized records so aliased fields
        such as ``consultation_fee`` count.
        """
        limit = limit or self.settings.category_search_limit
        resolution = await self.resolver.resolve(category)
        query = Query(self.collections.professionals).take(limit)

        if isinstance(resolution, ResolvedCategory):
            query.where("professional_type_id", "in", resolution.id_variants())
            logger.info(
                f"Fetching professionals for category {resolution.label} "
                f"(type_id={resolution.type_id}, via {resolution.source})"
            )
        else:
            logger.warning(f"Unknown category {resolution.label!r}; returning unfiltered professionals")

        docs = await self._run(query, f"getting professionals by category {resolution.label}")
        logger.info(f"Found {len(docs)} professionals for category {resolution.label}")
        professionals = [Professional.from_document(doc) for doc in docs]
        if filters is not None and filters.has_criteria():
            professionals = [p for p in professionals if _meets(p, filters)]
        return professionals

    async def get_all_doctors(self, limit: int = 50) -> List[Professional]:
        type_id = ResolvedCategory("mbbs", ProfessionalTypeId.MEDICAL.value, "table")
        query = (
            Query(self.collections.professionals)
            .where("professional_type_id", "in", type_id.id_variants())
            .take(limit)
        )
        docs = await self._run(query, "getting all doctors")
        return [Professional.from_document(doc) for doc in docs]

    async def get_professional_types(self) -> List[ProfessionalType]:
        docs = await self._run(Query(self.collections.professional_types), "getting professional types")
        return [ProfessionalType.from_document(doc) for doc in docs]

    async def get_active_specializations(self) -> List[Specialization]:
        query = (
            Query(self.collections.specializations)
            .where("isActive", "==", True)
            .order("name")
        )
        docs = await self._run(query, "getting specializations")
        return [Specialization.from_document(doc) for doc in docs]

    async def attach_type_labels(
        self, professionals: List[Professional], default_label: str = "Professional"
    ) -> List[Professional]:
        """
        Return copies of ``professionals`` with ``professional_type_label`` set.

        Labels are display-only; when the type collection cannot be read the
        records fall back to ``default_label``.
        """
        labels: Dict[str, str] = {}
        try:
            labels = {t.id: t.label for t in await self.get_professional_types()}
        except DocumentStoreError as e:
            logger.warning(f"Professional type labels unavailable: {e}")

        return [
            p.model_copy(
                update={
                    "professional_type_label": labels.get(p.professional_type_id or "")
                    or p.professional_type_label
                    or default_label
                }
            )
            for p in professionals
        ]
