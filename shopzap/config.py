import os
from datetime import timedelta
from typing import List, Literal, Optional

import toml
from pydantic.v1 import BaseModel, Field, ValidationError

from shopzap.directory import (
    BaseDirectory, MemoryDirectory, PickleDirectory, RestDirectory
)
from shopzap.context import (
    BaseContextStore, MemoryContextStore, MemcachedContextStore
)

CONFIG_ENV = "SHOPZAP_CONFIG"


class DirectoryConfig(BaseModel):
    backend: Literal['memory', 'pickle', 'rest'] = 'memory'
    path: str = 'stores'
    url: Optional[str]
    api_key: Optional[str] = Field(None, repr=False)
    table: str = 'stores'
    timeout: float = 10.0
    retries: int = 0


class ContextConfig(BaseModel):
    backend: Literal['memory', 'memcached'] = 'memory'
    host: str = 'localhost:11211'
    ttl_seconds: int = Field(86400, gt=0)

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self.ttl_seconds)


class APIConfig(BaseModel):
    name: str = 'ShopZap Store Routing'
    version: str = '0.1.0'
    origin: Optional[str]
    allowed_origins: List[str] = Field(default_factory=list)


class ShopzapConfig(BaseModel):
    directory: DirectoryConfig = Field(default_factory=DirectoryConfig)
    context: ContextConfig = Field(default_factory=ContextConfig)
    api: APIConfig = Field(default_factory=APIConfig)


def load_config(path: Optional[str] = None) -> ShopzapConfig:
    """Loads the TOML config from `path` or `$SHOPZAP_CONFIG`.

    A missing file gives the defaults.
    """
    if path is None:
        path = os.getenv(CONFIG_ENV, ".config")

    if not os.path.exists(path):
        return ShopzapConfig()

    try:
        data = toml.load(path)
        return ShopzapConfig.parse_obj(data)
    except toml.TomlDecodeError as e:
        raise ValueError(f"Invalid config: {str(e)}")
    except ValidationError as e:
        raise ValueError(f"Invalid config: {str(e)}")


def get_directory(config: DirectoryConfig) -> BaseDirectory:
    if config.backend == 'pickle':
        return PickleDirectory(path=config.path)

    if config.backend == 'rest':
        if config.url is None or config.api_key is None:
            raise ValueError(
                "Invalid config: rest directory needs 'url' and 'api_key'"
            )
        return RestDirectory(
            url=config.url,
            api_key=config.api_key,
            table=config.table,
            timeout=config.timeout,
            retries=config.retries
        )

    return MemoryDirectory()


def get_context_store(config: ContextConfig) -> BaseContextStore:
    if config.backend == 'memcached':
        return MemcachedContextStore(host=config.host)
    return MemoryContextStore()
