from shopzap.utils import create_slug, create_store_username
from shopzap.config import load_config

from shopzap.models import StoreRecord, ResolvedRoute, ResolvedContext

from shopzap.directory import BaseDirectory

from shopzap.resolver import Resolver, LOOKUP_STRATEGIES

from shopzap.exceptions import NotFound, LookupUnavailable


__all__ = [
    'create_slug',
    'create_store_username',
    'load_config',
    'StoreRecord',
    'ResolvedRoute',
    'ResolvedContext',
    'BaseDirectory',
    'Resolver',
    'LOOKUP_STRATEGIES',
    'NotFound',
    'LookupUnavailable',
]
