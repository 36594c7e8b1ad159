from pydantic import BaseModel, Field, field_validator
from typing import List
from enum import Enum
import ipaddress


NO_POOL_MESSAGE = "No IP Addresses have been created yet."


class AddressStatus(str, Enum):
    available = "available"
    acquired = "acquired"


class IPAddressRecord(BaseModel):
    address: str = Field(..., description="Dotted-quad IPv4 address, unique within the pool")
    status: AddressStatus = Field(AddressStatus.available, description="available or acquired")

    model_config = {"frozen": True}

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        try:
            ipaddress.IPv4Address(v)
        except ValueError:
            raise ValueError("Invalid IPv4 address")
        return v


class EmptyPool(BaseModel):
    """Returned by list when no pool has been created."""
    message: str = NO_POOL_MESSAGE


class MessageResponse(BaseModel):
    message: str


def dump_records(records: List[IPAddressRecord]) -> List[dict]:
    return [record.model_dump(mode="json") for record in records]
