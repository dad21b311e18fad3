from shopzap.api.litestar.requests import ContextRequest
from shopzap.api.litestar.api import LitestarAPI

__all__ = [
    'ContextRequest',
    'LitestarAPI',
]
