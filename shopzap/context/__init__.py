from shopzap.context.base import (
    BaseContextStore,
    CheckoutSession,
    CONTEXT_KEY_PREFIX,
    DEFAULT_CONTEXT_TTL
)

from shopzap.context.memory import MemoryContextStore
from shopzap.context.memcached import MemcachedContextStore

__all__ = [
    'BaseContextStore',
    'CheckoutSession',
    'CONTEXT_KEY_PREFIX',
    'DEFAULT_CONTEXT_TTL',
    'MemoryContextStore',
    'MemcachedContextStore',
]
