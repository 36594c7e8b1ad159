import logging
from typing import List, Optional, Union

from ..errors import (
    AddressNotFoundError,
    AlreadyAcquiredError,
    AlreadyAvailableError,
    NoPoolError,
    Ok,
    PersistenceIOError,
    PoolError,
    Result,
)
from ..schemas.ip_address import NO_POOL_MESSAGE, AddressStatus, EmptyPool, IPAddressRecord
from .cidr_expander import MINIMUM_MASK_BITS, expand_cidr
from .storage import PoolBackend

logger = logging.getLogger(__name__)


class AddressPoolStore:
    """
    Owns the address pool and its available/acquired transitions.

    State lives in the backend only: every operation loads the whole pool,
    applies at most one change and writes the whole pool back. There is no
    lock around that cycle, so concurrent writers follow last-write-wins and
    one of two racing mutations can be lost.

    State machine per address:
    - available -> acquired via ``acquire``
    - acquired -> available via ``release``
    - every address starts available when the pool is created
    """

    def __init__(self, backend: PoolBackend, minimum_mask_bits: int = MINIMUM_MASK_BITS):
        self.backend = backend
        self.minimum_mask_bits = minimum_mask_bits

    def _load(self) -> Result[Optional[List[IPAddressRecord]]]:
        try:
            return Ok(self.backend.load())
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read address pool: {e}", exc_info=True)
            return PersistenceIOError(f"Failed to read address pool: {e}")

    def _save(self, records: List[IPAddressRecord]) -> Optional[PersistenceIOError]:
        try:
            self.backend.save(records)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to write address pool: {e}", exc_info=True)
            return PersistenceIOError(f"Failed to write address pool: {e}")
        return None

    def list_addresses(self) -> Result[Union[List[IPAddressRecord], EmptyPool]]:
        """Return the whole pool in stored order, or ``EmptyPool`` if none exists."""
        loaded = self._load()
        if not isinstance(loaded, Ok):
            return loaded
        if loaded.value is None:
            return Ok(EmptyPool())
        return Ok(loaded.value)

    def create(self, cidr: str) -> Result[List[IPAddressRecord]]:
        """
        Build a fresh pool from a CIDR block and persist it.

        This is destructive: any existing pool, along with its acquired
        addresses, is replaced.

        Args:
            cidr: Block in ``A.B.C.D/N`` form, N between minimum_mask_bits and 32

        Returns:
            Ok with the new records, or InvalidCidrError / MaskTooWideError /
            PersistenceIOError. Nothing is written on failure.
        """
        expanded = expand_cidr(cidr, self.minimum_mask_bits)
        if not isinstance(expanded, Ok):
            logger.warning(f"Rejected create for [{cidr}]: {expanded.message}")
            return expanded

        records = expanded.value
        try:
            replacing = self.backend.exists()
        except OSError as e:
            logger.error(f"Failed to check for existing address pool: {e}", exc_info=True)
            return PersistenceIOError(f"Failed to check for existing address pool: {e}")

        error = self._save(records)
        if error is not None:
            return error

        logger.info(
            f"Created pool from [{cidr}] with {len(records)} addresses"
            + (" (replaced previous pool)" if replacing else "")
        )
        return Ok(records)

    def acquire(self, address: str) -> Result[IPAddressRecord]:
        """Mark an available address as acquired."""
        return self._transition(
            address,
            from_status=AddressStatus.available,
            to_status=AddressStatus.acquired,
            conflict=AlreadyAcquiredError(
                f"Address [{address}] cannot be acquired because it is already in use. "
                "It must be released before acquiring."
            ),
        )

    def release(self, address: str) -> Result[IPAddressRecord]:
        """Return an acquired address to the pool."""
        return self._transition(
            address,
            from_status=AddressStatus.acquired,
            to_status=AddressStatus.available,
            conflict=AlreadyAvailableError(
                f"Address [{address}] cannot be released because it is already available. "
                "It must be acquired before releasing."
            ),
        )

    def _transition(
        self,
        address: str,
        from_status: AddressStatus,
        to_status: AddressStatus,
        conflict: PoolError,
    ) -> Result[IPAddressRecord]:
        loaded = self._load()
        if not isinstance(loaded, Ok):
            return loaded

        records = loaded.value
        if records is None:
            logger.warning(f"Cannot set [{address}] to {to_status.value}: no pool exists")
            return NoPoolError(NO_POOL_MESSAGE)

        index = next((i for i, record in enumerate(records) if record.address == address), None)
        if index is None:
            logger.warning(f"Cannot set [{address}] to {to_status.value}: not in pool")
            return AddressNotFoundError(f"Address [{address}] does not exist.")

        if records[index].status != from_status:
            logger.warning(conflict.message)
            return conflict

        updated = records[index].model_copy(update={"status": to_status})
        new_records = records[:index] + [updated] + records[index + 1:]

        error = self._save(new_records)
        if error is not None:
            return error

        logger.info(f"Address [{address}] is now {to_status.value}")
        return Ok(updated)

