from typing import ClassVar, List, Literal, Optional

from pydantic.v1 import BaseModel, root_validator

from loguru import logger

from shopzap.models import StoreRecord, LookupField, MatchMode


class LookupQuery(BaseModel):
    field: LookupField
    value: str
    match: MatchMode = 'exact'
    active_only: bool = True

    def matches(self, store: StoreRecord) -> bool:
        if self.active_only and not store.is_active:
            return False

        store_value = getattr(store, self.field)

        if self.match == 'iexact':
            return store_value.lower() == self.value.lower()
        return store_value == self.value


DirectoryMethod = Literal['LOOKUP', 'PUT', 'DELETE']


class BaseDirectory(BaseModel):
    """Read access to store records by `username` or `name`.

    Backends implement `execute_query` and, where writes are allowed,
    `store_record` and `delete_record`. Backend failures are raised as
    `DirectoryError`.
    """
    name: Optional[str]

    _allowed_methods: ClassVar[List[DirectoryMethod]] = ['LOOKUP']

    @root_validator(pre=True)
    def assign_name(cls, values):
        name = values.get('name')
        if name is None:
            values['name'] = cls.__name__
        return values

    def execute_query(self, query: LookupQuery) -> List[StoreRecord]:
        raise NotImplementedError

    def store_record(self, store: StoreRecord) -> None:
        raise NotImplementedError

    def delete_record(self, store_id: str) -> None:
        raise NotImplementedError

    def _validate_method(self, method: DirectoryMethod):
        if method not in self._allowed_methods:
            raise NotImplementedError(
                f'{method} is not allowed for {self.name}'
            )

    def find_one(
        self,
        field: LookupField,
        value: str,
        match: MatchMode = 'exact',
        active_only: bool = True
    ) -> Optional[StoreRecord]:
        """Returns the single store matching the lookup or None.

        More than one match is ambiguous and is reported as no match.
        """
        self._validate_method('LOOKUP')

        query = LookupQuery(
            field=field,
            value=value,
            match=match,
            active_only=active_only
        )

        records = self.execute_query(query=query)

        if len(records) == 0:
            return None

        if len(records) > 1:
            logger.warning(
                f"{self.name}: {len(records)} stores match "
                f"{field} {match} '{value}', ignoring ambiguous lookup"
            )
            return None

        return records[0]

    def put(self, store: StoreRecord) -> StoreRecord:
        self._validate_method('PUT')

        taken = [
            record for record in self.execute_query(
                query=LookupQuery(
                    field='username',
                    value=store.username,
                    active_only=False
                )
            )
            if record.id != store.id
        ]
        if taken:
            raise ValueError(
                f"Username '{store.username}' is already taken"
            )

        self.store_record(store=store)
        return store

    def delete(self, store_id: str) -> None:
        self._validate_method('DELETE')
        self.delete_record(store_id=store_id)
