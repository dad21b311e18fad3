from shopzap.models.store import (
    StoreRecord, ResolvedRoute, LookupField, MatchMode
)

from shopzap.models.context import ResolvedContext, utcnow

__all__ = [
    'StoreRecord',
    'ResolvedRoute',
    'LookupField',
    'MatchMode',
    'ResolvedContext',
    'utcnow',
]
