from datetime import timedelta
from typing import List, Optional

from loguru import logger

from shopzap.config import (
    ShopzapConfig, get_directory, get_context_store
)
from shopzap.context import (
    BaseContextStore, CheckoutSession, MemoryContextStore,
    DEFAULT_CONTEXT_TTL
)
from shopzap.directory import BaseDirectory
from shopzap.resolver import Resolver


class ShopzapAPI:
    """Base class for API implementations.

    Args:
        name: Name of the API.
        version: Version of the API.
        directory: Store directory the resolver looks stores up in.
        context_store: Store for checkout contexts.
        context_ttl: How long a preserved checkout context stays valid.
        origin: Public origin prefixed to canonical store URLs.
        allowed_origins: Origins allowed by CORS.
    """

    def __init__(
        self,
        name: str,
        directory: BaseDirectory,
        version: Optional[str] = None,
        context_store: Optional[BaseContextStore] = None,
        context_ttl: timedelta = DEFAULT_CONTEXT_TTL,
        origin: Optional[str] = None,
        allowed_origins: Optional[List[str]] = None
    ):
        self.name = name
        self.version = version
        self.directory = directory
        self.resolver = Resolver(directory=directory)
        self.context_store = context_store or MemoryContextStore()
        self.context_ttl = context_ttl
        self.origin = origin
        self.allowed_origins = allowed_origins or []

    @classmethod
    def from_config(cls, config: ShopzapConfig, **kwargs) -> "ShopzapAPI":
        logger.info(
            f"Starting {config.api.name} with {config.directory.backend} "
            f"directory and {config.context.backend} context store"
        )
        return cls(
            name=config.api.name,
            version=config.api.version,
            directory=get_directory(config.directory),
            context_store=get_context_store(config.context),
            context_ttl=config.context.ttl,
            origin=config.api.origin,
            allowed_origins=config.api.allowed_origins,
            **kwargs
        )

    def checkout_session(self, session_id: str) -> CheckoutSession:
        return CheckoutSession(
            session_id=session_id,
            context_store=self.context_store,
            ttl=self.context_ttl
        )

    def run(self, host: str, port: int) -> None:
        pass
