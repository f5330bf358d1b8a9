"""
Professional and job search handlers.
"""

from .base import BaseHandler, HandlerContext
from ..formatting import format_job
from ...core.enums import ServiceCategory
from ...core.models import ChatResponse
from ...core.models.professional import professionals_to_payload

NO_PROFESSIONALS_QUICK_REPLIES = ["Search related services", "Notify me", "Browse all categories"]
NO_JOBS_QUICK_REPLIES = ["Broaden search", "Set job alerts", "Browse all jobs", "Career guidance"]

DEFAULT_TYPE_LABELS = {
    ServiceCategory.MBBS: "Healthcare Professional",
    ServiceCategory.MENTAL: "Mental Health Professional",
}


class ServiceSearchHandler(BaseHandler):
    """Lists professionals for the category the classifier detected."""

    async def handle(self, ctx: HandlerContext) -> ChatResponse:
        category = ctx.intent.category or ServiceCategory.OTHER
        label = category.value
        professionals = await ctx.services.professionals.get_professionals_by_category(
            category, filters=ctx.filters
        )

        if not professionals:
            return ChatResponse(
                text=(
                    f"I couldn't find any {label} professionals at the moment. "
                    "Would you like me to search for related services or notify you "
                    "when new professionals join?"
                ),
                type="no_results",
                quick_replies=list(NO_PROFESSIONALS_QUICK_REPLIES),
            )

        professionals = await ctx.services.professionals.attach_type_labels(
            professionals, DEFAULT_TYPE_LABELS.get(category, "Professional")
        )
        return ChatResponse(
            text=(
                f"Found {len(professionals)} {label} professionals. Here are some top-rated options:\n\n"
                "Click on any card below to view details or book an appointment."
            ),
            type="professional_list",
            data=professionals_to_payload(professionals),
            quick_replies=["Refine search", "Browse other services"],
        )


class JobSearchHandler(BaseHandler):
    """Searches active job listings with the extracted filters."""

    async def handle(self, ctx: HandlerContext) -> ChatResponse:
        filters = ctx.filters.with_limit(ctx.filters.limit or ctx.settings.chat_job_limit)
        jobs = await ctx.services.jobs.search_jobs(filters)

        if not jobs:
            return ChatResponse(
                text=(
                    "I couldn't find any jobs matching your criteria at the moment. "
                    "Would you like me to broaden the search or set up job alerts?"
                ),
                type="no_results",
                quick_replies=list(NO_JOBS_QUICK_REPLIES),
            )

        digest = "\n\n".join(format_job(job, ctx.settings.currency_symbol) for job in jobs)
        return ChatResponse(
            text=(
                f"Here are some job opportunities I found:\n\n{digest}\n\n"
                "Would you like to apply to any of these positions?"
            ),
            type="job_list",
            data=[job.model_dump(mode="json") for job in jobs],
            quick_replies=["View details", "Apply now", "Save jobs", "Refine search"],
        )
