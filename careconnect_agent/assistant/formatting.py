"""
Text rendering helpers for chat replies.
"""

from typing import List, Optional

from ..core.models import Booking, Consultation, JobListing, Professional
from ..utils.date import format_date

CONTEXTUAL_QUICK_REPLIES = {
    "professional_list": ["Book appointment", "View details", "Compare options", "Search again"],
    "job_list": ["Apply now", "Save job", "View company", "Search similar"],
    "booking_start": ["Healthcare", "Mental Health", "Legal", "Employment"],
    "no_results": ["Try different search", "Browse all", "Get recommendations"],
    "help_menu": ["Find services", "Find jobs", "My bookings", "Contact support"],
    "error": ["Try again", "Main menu", "Contact support"],
}
DEFAULT_QUICK_REPLIES = ["Main menu", "Help", "Search"]


def get_contextual_quick_replies(message_type: str) -> List[str]:
    """Suggested follow-ups for a reply type."""
    return list(CONTEXTUAL_QUICK_REPLIES.get(message_type, DEFAULT_QUICK_REPLIES))


def format_amount(value: float) -> str:
    """Thousands-separated amount without trailing ``.0``."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def format_salary(salary_min: Optional[float], salary_max: Optional[float], currency: str = "₹") -> str:
    has_min = bool(salary_min and salary_min > 0)
    has_max = bool(salary_max and salary_max > 0)
    if has_min and has_max:
        return f"{currency}{format_amount(salary_min)}-{format_amount(salary_max)}"
    if has_min:
        return f"{currency}{format_amount(salary_min)}+"
    if has_max:
        return f"Up to {currency}{format_amount(salary_max)}"
    return "Salary negotiable"


def format_job(job: JobListing, currency: str = "₹") -> str:
    salary = format_salary(job.salary_min, job.salary_max, currency)
    return (
        f"• **{job.title}** at {job.company}\n"
        f"  📍 {job.location or 'Location'} | 💰 {salary}\n"
        f"  {job.job_type or 'full-time'} - {job.experience or 'entry level'}"
    )


def format_booking_candidate(professional: Professional) -> str:
    available = professional.next_available or "Contact for availability"
    return (
        f"• **{professional.name}** - {professional.display_specialization()}\n"
        f"  Available: {available}"
    )


def format_booking(booking: Booking, tz_name: str) -> str:
    service = booking.service_type or "Appointment"
    return f"• {service} - {booking.status.value}\n  {format_date(booking.appointment_date, tz_name)}\n\n"


def format_consultation(consultation: Consultation, tz_name: str) -> str:
    kind = consultation.type or "Consultation"
    return (
        f"• {kind} - {consultation.status.value}\n"
        f"  Scheduled: {format_date(consultation.scheduled_time, tz_name)}\n\n"
    )
