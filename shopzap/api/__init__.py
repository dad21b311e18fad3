from shopzap.api.api import ShopzapAPI

__all__ = [
    'ShopzapAPI',
]
