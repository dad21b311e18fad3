from typing import List, Iterator

import os
import pickle

from urllib.parse import quote

from loguru import logger

from shopzap.exceptions import DirectoryError
from shopzap.models import StoreRecord
from shopzap.directory.base import BaseDirectory, LookupQuery


class PickleDirectory(BaseDirectory):
    """Keeps each store as a pickled dict in its own file under `path`."""
    _allowed_methods = ['LOOKUP', 'PUT', 'DELETE']

    path: str

    def __init__(self, **data):
        super().__init__(**data)
        if not os.path.isdir(self.path):
            os.makedirs(self.path)

    def _record_path(self, store_id: str) -> str:
        return os.path.join(self.path, f"{quote(store_id, safe='')}.pickle")

    def _load(self, file_path: str) -> StoreRecord:
        try:
            with open(file_path, 'rb') as f:
                return StoreRecord(**pickle.load(f))
        except (
            OSError, EOFError, pickle.UnpicklingError, TypeError, ValueError
        ) as e:
            logger.error(f"Could not read store record {file_path}: {e}")
            raise DirectoryError(
                f"Could not read store record {file_path}"
            ) from e

    def _iter_records(self) -> Iterator[StoreRecord]:
        try:
            file_names = sorted(os.listdir(self.path))
        except OSError as e:
            raise DirectoryError(
                f"Could not list store records in {self.path}"
            ) from e

        for file_name in file_names:
            if file_name.endswith('.pickle'):
                yield self._load(os.path.join(self.path, file_name))

    def execute_query(self, query: LookupQuery) -> List[StoreRecord]:
        return [
            store for store in self._iter_records()
            if query.matches(store)
        ]

    def store_record(self, store: StoreRecord) -> None:
        path = self._record_path(store.id)

        exception = None

        with open(path, 'wb') as f:
            try:
                pickle.dump(store.dict(), f)
            except Exception as e:
                exception = e

        if exception is not None:
            os.remove(path)
            raise exception

    def delete_record(self, store_id: str) -> None:
        path = self._record_path(store_id)
        if os.path.exists(path):
            os.remove(path)
