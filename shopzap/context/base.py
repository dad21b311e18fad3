from typing import Optional

from datetime import datetime, timedelta

from pydantic.v1 import BaseModel, root_validator

from loguru import logger

from shopzap.models import StoreRecord, ResolvedContext, utcnow

CONTEXT_KEY_PREFIX = 'shopzap_store_context'

DEFAULT_CONTEXT_TTL = timedelta(hours=24)


class BaseContextStore(BaseModel):
    """Key-value storage for serialised checkout contexts."""
    name: Optional[str]

    @root_validator(pre=True)
    def assign_name(cls, values):
        name = values.get('name')
        if name is None:
            values['name'] = cls.__name__
        return values

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str, ttl: timedelta) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class CheckoutSession:
    """Store context of a single checkout flow.

    The context is written on every resolution, replacing whatever was
    there, and is only returned while it has not expired.

    Args:
        session_id: Identifier of the checkout session.
        context_store: Where the context is kept between requests.
        ttl: How long a preserved context stays valid.
    """
    def __init__(
        self,
        session_id: str,
        context_store: BaseContextStore,
        ttl: timedelta = DEFAULT_CONTEXT_TTL
    ):
        if not session_id:
            raise ValueError("Checkout session id must be a non-empty string")
        self.session_id = session_id
        self.context_store = context_store
        self.ttl = ttl

    @property
    def key(self) -> str:
        return f"{CONTEXT_KEY_PREFIX}:{self.session_id}"

    def preserve_context(
        self,
        store: StoreRecord,
        path: str,
        now: Optional[datetime] = None
    ) -> ResolvedContext:
        context = ResolvedContext.from_store(
            store=store,
            path=path,
            ttl=self.ttl,
            now=now
        )
        self.context_store.set(self.key, context.json(), ttl=self.ttl)
        logger.debug(
            f"Preserved store '{store.username}' for session {self.session_id}"
        )
        return context

    def get_context(
        self,
        now: Optional[datetime] = None
    ) -> Optional[ResolvedContext]:
        try:
            raw = self.context_store.get(self.key)
            if raw is None:
                return None
            context = ResolvedContext.parse_raw(raw)
        except ValueError as e:
            logger.warning(
                f"Discarding malformed store context for session "
                f"{self.session_id}: {e}"
            )
            return None

        if context.is_expired(now=now or utcnow()):
            return None
        return context

    def clear(self) -> None:
        self.context_store.delete(self.key)
