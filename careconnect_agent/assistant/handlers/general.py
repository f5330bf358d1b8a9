"""
Fallback handler for messages that match no intent.
"""

from .base import BaseHandler, HandlerContext
from ...core.models import ChatResponse
from ...utils.logging import get_logger

logger = get_logger("careconnect.assistant.general")

CLARIFICATION_PROMPTS = (
    "I understand you're looking for assistance. Could you please be more specific "
    "about what type of service or help you need?",
    "I'm here to help you find services, jobs, or book appointments. "
    "What specifically are you looking for?",
    "Let me help you find what you need. Are you looking for professional services, "
    "job opportunities, or something else?",
)

MAX_RESULTS_SHOWN = 2


class GeneralHandler(BaseHandler):
    """Tries a combined search, then asks the user to clarify."""

    async def handle(self, ctx: HandlerContext) -> ChatResponse:
        try:
            results = await ctx.services.search.search_all(ctx.message)
        except Exception as e:
            logger.warning(f"General search failed, asking for clarification: {e}")
            results = None

        if results is not None and results.has_matches():
            text = "I found some relevant results for you:\n\n"
            if results.professionals:
                text += "**Professionals:**\n"
                for prof in results.professionals[:MAX_RESULTS_SHOWN]:
                    text += f"• {prof.name} - {prof.display_specialization('Professional')}\n"
                text += "\n"
            if results.jobs:
                text += "**Jobs:**\n"
                for job in results.jobs[:MAX_RESULTS_SHOWN]:
                    text += f"• {job.title} at {job.company}\n"
                text += "\n"
            text += "Would you like to explore any of these options?"

            return ChatResponse(
                text=text,
                type="search_results",
                data=results.model_dump(mode="json"),
                quick_replies=["View professionals", "View jobs", "Refine search"],
            )

        return ChatResponse(
            text=ctx.rng.choice(CLARIFICATION_PROMPTS),
            type="clarification_needed",
            quick_replies=["Find services", "Find jobs", "Book appointment", "Get help"],
        )
