from shopzap.api.litestar.controllers.store import (
    StoreController, resolve_route
)
from shopzap.api.litestar.controllers.checkout import CheckoutController

__all__ = [
    'StoreController',
    'CheckoutController',
    'resolve_route',
]
