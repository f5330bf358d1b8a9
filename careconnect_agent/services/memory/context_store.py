"""
Per-user conversation context with a lazily enforced TTL.

``save`` overwrites the stored context and stamps it with the current time.
``get`` returns the context only while it is younger than the TTL; a stale
entry is deleted on that read and reported as absent. Nothing expires in the
background.
"""

import json
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Tuple

import redis.asyncio as redis

from ...core.exceptions import ContextStoreError
from ...core.models import ConversationContext
from ...utils.logging import get_logger

logger = get_logger("careconnect.context")

DEFAULT_CONTEXT_TTL_SECONDS = 300.0


class ConversationContextStore(ABC):
    """Keyed, time-boxed memory of each user's last interaction."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_CONTEXT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl_seconds = ttl_seconds
        self.clock = clock

    def is_fresh(self, saved_at: float) -> bool:
        return self.clock() - saved_at < self.ttl_seconds

    @abstractmethod
    async def save(self, user_id: str, context: ConversationContext) -> None:
        """Overwrite the user's context with a fresh timestamp."""

    @abstractmethod
    async def get(self, user_id: str) -> Optional[ConversationContext]:
        """Return the context if still fresh, otherwise delete it and return None."""

    async def close(self) -> None:
        return None


class InMemoryContextStore(ConversationContextStore):
    """Process-local context store for single-instance deployments."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_CONTEXT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(ttl_seconds, clock)
        self._entries: Dict[str, Tuple[float, ConversationContext]] = {}

    async def save(self, user_id: str, context: ConversationContext) -> None:
        if not user_id:
            return
        self._entries[user_id] = (self.clock(), context.model_copy(deep=True))

    async def get(self, user_id: str) -> Optional[ConversationContext]:
        if not user_id:
            return None

        entry = self._entries.get(user_id)
        if entry is None:
            return None

        saved_at, context = entry
        if self.is_fresh(saved_at):
            return context.model_copy(deep=True)

        del self._entries[user_id]
        return None

    def __len__(self) -> int:
        return len(self._entries)


class RedisContextStore(ConversationContextStore):
    """Context store shared across instances through Redis."""

    def __init__(
        self,
        redis_url: Optional[str] = None,
        ttl_seconds: float = DEFAULT_CONTEXT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
        client: Optional[redis.Redis] = None,
        key_prefix: str = "careconnect:context",
    ):
        super().__init__(ttl_seconds, clock)
        if client is None:
            if not redis_url:
                raise ValueError("redis_url or client is required")
            client = redis.from_url(redis_url, encoding="utf-8", decode_responses=True)
        self.client = client
        self.key_prefix = key_prefix

    def _get_key(self, user_id: str) -> str:
        return f"{self.key_prefix}:{user_id}"

    async def save(self, user_id: str, context: ConversationContext) -> None:
        if not user_id:
            return
        payload = json.dumps(
            {"saved_at": self.clock(), "context": context.model_dump(mode="json")}
        )
        try:
            # Redis also drops the key once the TTL has passed.
            await self.client.set(self._get_key(user_id), payload, ex=max(1, int(self.ttl_seconds)))
        except redis.RedisError as e:
            logger.error(f"Error saving context for {user_id}: {e}")
            raise ContextStoreError(str(e)) from e

    async def get(self, user_id: str) -> Optional[ConversationContext]:
        if not user_id:
            return None

        key = self._get_key(user_id)
        try:
            raw = await self.client.get(key)
            if raw is None:
                return None

            entry = json.loads(raw)
            if self.is_fresh(float(entry["saved_at"])):
                return ConversationContext.model_validate(entry["context"])

            await self.client.delete(key)
            return None
        except redis.RedisError as e:
            logger.error(f"Error reading context for {user_id}: {e}")
            raise ContextStoreError(str(e)) from e

    async def close(self) -> None:
        await self.client.aclose()
