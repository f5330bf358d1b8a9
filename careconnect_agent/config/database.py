"""
Document store collection names.
"""

from pydantic import BaseModel


class DatabaseConfig(BaseModel):
    """Collection names used by the repository layer."""

    professionals: str = "professionals"
    jobs: str = "placements"
    bookings: str = "bookings"
    consultations: str = "consultations"
    users: str = "users"
    specializations: str = "specializations"
    professional_types: str = "professional_types"
    availability_slots: str = "availabilitySlots"
    notifications: str = "notifications"
    views: str = "views"
