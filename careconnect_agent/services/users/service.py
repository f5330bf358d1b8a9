"""
User profile and notification service.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..store import Direction, DocumentStore, Query
from ...config import Settings, get_settings
from ...core.models import Notification, UserProfile
from ...utils.logging import get_logger

logger = get_logger("careconnect.users")


class UserService:
    """Service for user profiles and in-app notifications."""

    def __init__(self, store: DocumentStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or get_settings()
        self.collections = self.settings.database

    async def get_user_profile(self, user_id: str) -> Optional[UserProfile]:
        try:
            doc = await self.store.get(self.collections.users, user_id)
        except Exception as e:
            logger.error(f"Error getting user profile: {e}")
            raise
        return UserProfile.from_document(doc) if doc else None

    async def update_user_profile(self, user_id: str, user_data: Dict[str, Any]) -> bool:
        data = {**user_data, "updatedAt": datetime.now(timezone.utc)}
        try:
            await self.store.update(self.collections.users, user_id, data)
        except Exception as e:
            logger.error(f"Error updating user profile: {e}")
            raise
        return True

    async def create_notification(self, user_id: str, notification: Dict[str, Any]) -> Notification:
        data = {
            "userId": user_id,
            **notification,
            "read": False,
            "createdAt": datetime.now(timezone.utc),
        }
        try:
            notification_id = await self.store.add(self.collections.notifications, data)
        except Exception as e:
            logger.error(f"Error creating notification: {e}")
            raise
        return Notification.from_document({"id": notification_id, **data})

    async def get_user_notifications(self, user_id: str, limit: int = 10) -> List[Notification]:
        query = (
            Query(self.collections.notifications)
            .where("userId", "==", user_id)
            .order("createdAt", Direction.DESCENDING)
            .take(limit)
        )
        try:
            docs = await self.store.query(query)
        except Exception as e:
            logger.error(f"Error getting user notifications: {e}")
            raise
        return [Notification.from_document(doc) for doc in docs]
