from typing import Any, Optional

from datetime import timedelta

from pydantic.v1 import Field

from pymemcache.client.base import Client

from shopzap.context.base import BaseContextStore


class MemcachedContextStore(BaseContextStore):
    host: Optional[str] = Field(None, exclude=True)
    client: Optional[Any] = Field(None, exclude=True)

    def __init__(self, **data):
        super().__init__(**data)
        if self.client is None:
            self.client = Client(self.host)

    def get(self, key: str) -> Optional[str]:
        value = self.client.get(key)
        if isinstance(value, bytes):
            return value.decode('utf-8')
        return value

    def set(self, key: str, value: str, ttl: timedelta) -> None:
        self.client.set(
            key, value, expire=max(int(ttl.total_seconds()), 1)
        )

    def delete(self, key: str) -> None:
        self.client.delete(key)
