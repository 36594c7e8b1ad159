from .address_pool import AddressPoolStore
from .cidr_expander import expand_cidr, parse_cidr
from .storage import InMemoryBackend, JSONFileBackend, PoolBackend

__all__ = [
    "AddressPoolStore",
    "expand_cidr",
    "parse_cidr",
    "InMemoryBackend",
    "JSONFileBackend",
    "PoolBackend",
]
