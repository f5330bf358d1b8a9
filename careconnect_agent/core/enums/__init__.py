"""
Enums for the CareConnect agent.
"""

from .intent import IntentType, ServiceCategory
from .professional import ProfessionalTypeId, VerificationStatus, ProfessionalSort
from .job import JobType, WorkArrangement, ExperienceLevel, JobSort
from .booking import BookingStatus, ConsultationStatus

__all__ = [
    "IntentType",
    "ServiceCategory",
    "ProfessionalTypeId",
    "VerificationStatus",
    "ProfessionalSort",
    "JobType",
    "WorkArrangement",
    "ExperienceLevel",
    "JobSort",
    "BookingStatus",
    "ConsultationStatus",
]
