from .ip_address import (
    NO_POOL_MESSAGE,
    AddressStatus,
    IPAddressRecord,
    EmptyPool,
    MessageResponse,
    dump_records,
)

__all__ = [
    "NO_POOL_MESSAGE",
    "AddressStatus",
    "IPAddressRecord",
    "EmptyPool",
    "MessageResponse",
    "dump_records",
]
