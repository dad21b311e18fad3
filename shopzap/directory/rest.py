from typing import Dict, List, Optional

import requests.exceptions
from pydantic.v1 import Field

from requests import Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from loguru import logger

from shopzap.exceptions import DirectoryError
from shopzap.models import StoreRecord
from shopzap.directory.base import BaseDirectory, LookupQuery


def escape_like(value: str) -> str:
    return (
        value.replace('\\', '\\\\')
        .replace('%', '\\%')
        .replace('_', '\\_')
    )


class RestDirectory(BaseDirectory):
    """Read-only directory backed by a Supabase (PostgREST) table."""
    _allowed_methods = ['LOOKUP']

    url: str
    api_key: str = Field(..., repr=False)
    table: str = 'stores'
    timeout: float = 10.0
    retries: int = 0

    session: Optional[Session] = Field(None, exclude=True)

    class Config:
        arbitrary_types_allowed = True

    def __init__(self, **data):
        super().__init__(**data)
        retry_strategy = Retry(
            total=self.retries,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS"]
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session = Session()
        self.session.headers.update({
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json"
        })

        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    @property
    def endpoint(self) -> str:
        return f"{self.url.rstrip('/')}/rest/v1/{self.table}"

    def build_params(self, query: LookupQuery) -> Dict[str, str]:
        if query.match == 'iexact':
            condition = f"ilike.{escape_like(query.value)}"
        else:
            condition = f"eq.{query.value}"

        params = {
            "select": "*",
            query.field: condition,
            # Two rows are enough to tell a single match from an ambiguous one
            "limit": "2"
        }
        if query.active_only:
            params["is_active"] = "eq.true"
        return params

    def execute_query(self, query: LookupQuery) -> List[StoreRecord]:
        if query.match == 'iexact' and '*' in query.value:
            # PostgREST reads '*' as a wildcard in like patterns
            logger.debug(
                f"Skipping case-insensitive lookup of '{query.value}'"
            )
            return []

        try:
            ret = self.session.get(
                self.endpoint,
                params=self.build_params(query),
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Store directory request failed: {e}")
            raise DirectoryError("Store directory is unreachable") from e

        if ret.status_code != 200:
            logger.error(
                f"Store directory returned {ret.status_code}: {ret.text}"
            )
            raise DirectoryError(
                f"Store directory returned status {ret.status_code}"
            )

        try:
            return [
                store for store in map(self._parse_row, ret.json())
                if store is not None
            ]
        except (ValueError, TypeError) as e:
            logger.error(f"Malformed store directory response: {e}")
            raise DirectoryError(
                "Malformed store directory response"
            ) from e

    def _parse_row(self, row: Dict) -> Optional[StoreRecord]:
        if not isinstance(row, dict):
            raise TypeError(f"Expected a store row, got {type(row).__name__}")

        # Rows without a username cannot be linked to, so they never resolve
        if not str(row.get('username') or '').strip():
            logger.warning(
                f"Skipping store {row.get('id')} without a username"
            )
            return None
        return StoreRecord(**row)
