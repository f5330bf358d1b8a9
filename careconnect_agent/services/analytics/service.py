"""
Interaction logging to the ``views`` collection.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..store import DocumentStore
from ...config import Settings, get_settings
from ...utils.logging import get_logger

logger = get_logger("careconnect.analytics")


class AnalyticsService:
    """Fire-and-forget interaction log."""

    def __init__(self, store: DocumentStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or get_settings()

    async def log_user_interaction(
        self,
        user_id: str,
        action: str,
        data: Optional[Dict[str, Any]] = None,
        client_context: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Record a user action.

        Failures are logged and swallowed; returns False when the write failed.
        """
        record = {
            "userId": user_id,
            "action": action,
            "data": data or {},
            "timestamp": datetime.now(timezone.utc),
            "clientContext": client_context or {},
        }
        try:
            await self.store.add(self.settings.database.views, record)
        except Exception as e:
            logger.error(f"Error logging user interaction: {e}")
            return False
        return True
