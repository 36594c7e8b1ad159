from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Union

from ..dependencies import get_store
from ..errors import PoolError, Result
from ..schemas.ip_address import EmptyPool, IPAddressRecord, MessageResponse
from ..services.address_pool import AddressPoolStore

router = APIRouter(tags=["IP Addresses"])


def unwrap(result: Result):
    """Return the success value, or raise the HTTP error matching the failure kind."""
    if isinstance(result, PoolError):
        raise HTTPException(status_code=result.status_code, detail=result.message)
    return result.value


@router.get("/list", response_model=Union[List[IPAddressRecord], EmptyPool])
def list_ip_addresses(store: AddressPoolStore = Depends(get_store)):
    """
    List every address in the pool with its status.

    Returns a message instead of an array when no pool has been created.
    """
    return unwrap(store.list_addresses())


@router.api_route("/create", methods=["GET", "POST"], response_model=List[IPAddressRecord])
def create_ip_addresses(
    address: str = Query("", description="CIDR block, e.g. 10.0.0.0/24 (mask 24-32)"),
    store: AddressPoolStore = Depends(get_store),
):
    """
    Create the pool from a CIDR block.

    - **address**: CIDR notation, network and broadcast addresses included

    Overwrites any existing pool; it does not append new addresses.
    """
    return unwrap(store.create(address))


@router.api_route("/acquire", methods=["GET", "POST"], response_model=MessageResponse)
def acquire_ip_address(
    address: str = Query(..., description="Address to acquire, e.g. 10.0.0.1"),
    store: AddressPoolStore = Depends(get_store),
):
    """Set an available address to acquired."""
    unwrap(store.acquire(address))
    return MessageResponse(message=f"Address [{address}] successfully acquired.")


@router.api_route("/release", methods=["GET", "POST"], response_model=MessageResponse)
def release_ip_address(
    address: str = Query(..., description="Address to release, e.g. 10.0.0.1"),
    store: AddressPoolStore = Depends(get_store),
):
    """Set an acquired address back to available."""
    unwrap(store.release(address))
    return MessageResponse(message=f"Address [{address}] successfully released.")
