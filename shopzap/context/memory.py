from typing import Dict, Optional

from datetime import timedelta

from pydantic.v1 import Field

from shopzap.context.base import BaseContextStore


class MemoryContextStore(BaseContextStore):
    memory: Optional[Dict[str, str]] = Field(None, exclude=True)

    def __init__(self, **data):
        super().__init__(**data)
        self.memory = {}

    def get(self, key: str) -> Optional[str]:
        return self.memory.get(key)

    def set(self, key: str, value: str, ttl: timedelta) -> None:
        # Expiry is checked when the context is read
        self.memory[key] = value

    def delete(self, key: str) -> None:
        self.memory.pop(key, None)
