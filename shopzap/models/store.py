from typing import Literal

from pydantic.v1 import BaseModel, Extra, validator

LookupField = Literal['username', 'name']
MatchMode = Literal['exact', 'iexact']


class StoreRecord(BaseModel):
    """A seller's store as kept by the store directory.

    `username` is the canonical, unique slug and is always held in
    lowercase. `name` is the display name which older links used in place
    of the username.
    """
    id: str
    username: str
    name: str
    is_active: bool = True

    class Config:
        extra = Extra.ignore
        allow_mutation = False

    @validator('id', pre=True)
    def coerce_id(cls, value):
        if value is None:
            raise ValueError('Store id is required')
        return str(value)

    @validator('username')
    def normalize_username(cls, value):
        value = value.strip().lower()
        if not value:
            raise ValueError('Store username is required')
        return value


class ResolvedRoute(BaseModel):
    identifier: str
    store: StoreRecord
    redirect_needed: bool
    final_username: str
    matched_by: LookupField
