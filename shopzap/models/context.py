from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic.v1 import BaseModel, validator

from shopzap.models.store import StoreRecord


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResolvedContext(BaseModel):
    """Store identity carried through the checkout flow."""
    store_id: str
    store_name: str
    store_username: str
    original_path: str
    resolved_at: datetime
    expires_at: datetime

    @validator('resolved_at', 'expires_at')
    def require_timezone(cls, value):
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError('Context timestamps must be timezone-aware')
        return value

    @classmethod
    def from_store(
        cls,
        store: StoreRecord,
        path: str,
        ttl: timedelta,
        now: Optional[datetime] = None
    ) -> "ResolvedContext":
        if now is None:
            now = utcnow()

        return cls(
            store_id=store.id,
            store_name=store.name,
            store_username=store.username,
            original_path=path,
            resolved_at=now,
            expires_at=now + ttl
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if now is None:
            now = utcnow()
        return now >= self.expires_at
