"""
Conversation memory module.
"""

from .context_store import (
    ConversationContextStore,
    InMemoryContextStore,
    RedisContextStore,
    DEFAULT_CONTEXT_TTL_SECONDS,
)

__all__ = [
    "ConversationContextStore",
    "InMemoryContextStore",
    "RedisContextStore",
    "DEFAULT_CONTEXT_TTL_SECONDS",
]
