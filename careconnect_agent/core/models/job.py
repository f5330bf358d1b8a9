"""
Job listing model.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field

from ...utils.fields import first_non_empty, to_datetime, to_float, to_list, to_text


class JobListing(BaseModel):
    """Canonical job listing built from a stored ``placements`` document."""

    model_config = ConfigDict(extra="forbid")

    id: str
    title: str = "Job Position"
    company: str = "Company"
    location: Optional[str] = None
    job_type: Optional[str] = None
    work_arrangement: List[str] = Field(default_factory=list)
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    experience: Optional[str] = None
    is_active: bool = False
    created_at: Optional[datetime] = None
    application_deadline: Optional[datetime] = None
    description: Optional[str] = None
    requirements: Optional[Any] = None
    benefits: Optional[Any] = None
    department: Optional[str] = None
    contact_email: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "JobListing":
        title = first_non_empty(doc, "title", "job_title", "jobTitle", "position")
        company = first_non_empty(doc, "company", "company_name", "employer")
        return cls(
            id=str(doc["id"]),
            title=str(title) if title else "Job Position",
            company=str(company) if company else "Company",
            location=to_text(first_non_empty(doc, "location", "city", "workplace_location")),
            job_type=to_text(first_non_empty(doc, "jobType", "job_type", "employment_type")),
            work_arrangement=to_list(
                first_non_empty(doc, "workArrangement", "work_arrangement", "remote_option")
            ),
            salary_min=to_float(first_non_empty(doc, "salaryMin", "salary_min", "min_salary")),
            salary_max=to_float(first_non_empty(doc, "salaryMax", "salary_max", "max_salary")),
            experience=to_text(first_non_empty(doc, "experience", "experience_level", "required_experience")),
            is_active=doc.get("isActive") is True,
            created_at=to_datetime(doc.get("createdAt")),
            application_deadline=to_datetime(doc.get("applicationDeadline")),
            description=to_text(first_non_empty(doc, "description", "job_description")),
            requirements=first_non_empty(doc, "requirements", "qualifications", "skills"),
            benefits=doc.get("benefits") or None,
            department=to_text(first_non_empty(doc, "department", "dept")),
            contact_email=to_text(first_non_empty(doc, "contactEmail", "contact_email", "email")),
        )
