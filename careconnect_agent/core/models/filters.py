"""
Search filter model shared by the extractor and the repository layer.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class SearchFilters(BaseModel):
    """Loosely typed filter record; unset fields mean "no constraint"."""

    model_config = ConfigDict(extra="forbid")

    # Extracted from free text
    location: Optional[str] = None
    experience: Optional[str] = None
    job_type: Optional[str] = None
    work_arrangement: Optional[str] = None
    max_price: Optional[float] = None
    min_price: Optional[float] = None
    max_salary: Optional[float] = None
    min_salary: Optional[float] = None
    min_rating: Optional[float] = None
    sort_by: Optional[str] = None
    verified: Optional[bool] = None

    # Set by callers
    category: Optional[str] = None
    min_experience: Optional[int] = None
    company: Optional[str] = None
    limit: Optional[int] = None

    def has_criteria(self) -> bool:
        """True when at least one field is set."""
        return bool(self.as_dict())

    def as_dict(self) -> dict:
        return self.model_dump(exclude_none=True)

    def merged(self, override: "SearchFilters") -> "SearchFilters":
        """Return a copy with every set field of ``override`` applied on top."""
        return self.model_copy(update=override.as_dict())

    def with_limit(self, limit: int) -> "SearchFilters":
        return self.model_copy(update={"limit": limit})
