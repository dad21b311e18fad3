from shopzap.directory.base import (
    BaseDirectory, LookupQuery
)

from shopzap.directory.memory import MemoryDirectory
from shopzap.directory.pickle_directory import PickleDirectory
from shopzap.directory.rest import RestDirectory

__all__ = [
    'BaseDirectory',
    'LookupQuery',
    'MemoryDirectory',
    'PickleDirectory',
    'RestDirectory',
]
