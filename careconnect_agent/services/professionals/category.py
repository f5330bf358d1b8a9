"""
Category label to professional type id resolution.

Resolution runs in three tiers: the fixed table below, then a lookup in the
``professional_types`` collection by name, and finally ``UnknownCategory``.
Callers decide what an unknown category means; the directory service treats
it as "no type filter".
"""

from typing import Awaitable, Callable, Dict, List

from ...core.enums import ProfessionalTypeId
from ...core.models import ProfessionalType, ResolvedCategory, UnknownCategory, CategoryResolution

CATEGORY_TYPE_IDS: Dict[str, ProfessionalTypeId] = {
    "mbbs": ProfessionalTypeId.MEDICAL,
    "mental": ProfessionalTypeId.MENTAL_HEALTH,
    "legal": ProfessionalTypeId.LEGAL,
    "placement": ProfessionalTypeId.PLACEMENT,
    "pathology": ProfessionalTypeId.PATHOLOGY,
    "pharmacy": ProfessionalTypeId.PHARMACY,
}


class CategoryResolver:
    """Resolves category labels to professional type ids."""

    def __init__(self, load_types: Callable[[], Awaitable[List[ProfessionalType]]]):
        self.load_types = load_types

    async def resolve(self, category) -> CategoryResolution:
        label = str(getattr(category, "value", category) or "")
        key = label.strip().lower()

        type_id = CATEGORY_TYPE_IDS.get(key)
        if type_id is not None:
            return ResolvedCategory(label=label, type_id=type_id.value, source="table")

        if key:
            for professional_type in await self.load_types():
                if professional_type.matches(key):
                    return ResolvedCategory(label=label, type_id=professional_type.id, source="lookup")

        return UnknownCategory(label=label)
