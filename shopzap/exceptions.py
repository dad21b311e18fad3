class ShopzapError(Exception):
    """Base class for all shopzap errors."""


class DirectoryError(ShopzapError):
    """Store directory backend failed to answer a lookup."""


class StoreResolutionError(ShopzapError):
    pass


class NotFound(StoreResolutionError, LookupError):
    """No lookup strategy matched the store identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f'Store "{identifier}" not found')


class LookupUnavailable(StoreResolutionError):
    """The store directory could not be queried.

    Kept apart from `NotFound` so that a directory outage is not reported
    as a missing store.
    """

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f'Store lookup for "{identifier}" is currently unavailable'
        )
