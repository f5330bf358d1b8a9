"""
Handlers that answer without touching the store.
"""

from .base import BaseHandler, HandlerContext, auth_required
from ...core.models import ChatResponse

HELP_TEXT = "\n".join([
    "**How can I help you today?**",
    "",
    "🔍 **Find Services:** Search for healthcare, mental health, legal, and other professionals",
    "💼 **Find Jobs:** Browse employment opportunities and career guidance",
    "📅 **Book Appointments:** Schedule consultations with verified professionals",
    "👤 **Manage Profile:** Update your account and preferences",
    "",
    "Just tell me what you're looking for, and I'll help you find the right solution!",
])


class HelpHandler(BaseHandler):
    async def handle(self, ctx: HandlerContext) -> ChatResponse:
        return ChatResponse(
            text=HELP_TEXT,
            type="help_menu",
            quick_replies=["Find services", "Find jobs", "Book appointment", "Account help"],
        )


class ProfileHandler(BaseHandler):
    async def handle(self, ctx: HandlerContext) -> ChatResponse:
        if not ctx.user_id:
            return auth_required(
                "To manage your profile, please log in to your account first.",
                ["Login", "Register"],
            )
        return ChatResponse(
            text="I can help you with your profile settings. What would you like to do?",
            type="profile_menu",
            quick_replies=["Update information", "Preferences", "Privacy settings", "Account security"],
        )
