from typing import Dict, List, Optional

from pydantic.v1 import Field

from shopzap.models import StoreRecord
from shopzap.directory.base import BaseDirectory, LookupQuery


class MemoryDirectory(BaseDirectory):
    _allowed_methods = ['LOOKUP', 'PUT', 'DELETE']

    memory: Optional[Dict[str, StoreRecord]] = Field(None, exclude=True)

    def __init__(self, **data):
        super().__init__(**data)
        self.memory = {}

    def execute_query(self, query: LookupQuery) -> List[StoreRecord]:
        return [
            store for store in self.memory.values()
            if query.matches(store)
        ]

    def store_record(self, store: StoreRecord) -> None:
        self.memory[store.id] = store

    def delete_record(self, store_id: str) -> None:
        self.memory.pop(store_id, None)
