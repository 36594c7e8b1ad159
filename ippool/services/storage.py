"""
Persistence backends for the address pool.

A backend stores the whole pool as a single document. ``load`` returns
``None`` when no document exists and raises ``OSError`` or ``ValueError``
when the document cannot be read or parsed.
"""
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter

from ..schemas.ip_address import IPAddressRecord, dump_records

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(List[IPAddressRecord])


def serialize_pool(records: List[IPAddressRecord]) -> str:
    """Compact, single-line JSON array of ``{address, status}`` objects."""
    return json.dumps(dump_records(records), separators=(",", ":"))


def deserialize_pool(document: str) -> List[IPAddressRecord]:
    data = json.loads(document)
    if not isinstance(data, list):
        raise ValueError("Persisted pool is not a JSON array")
    records = _records_adapter.validate_python(data)

    seen = set()
    for record in records:
        if record.address in seen:
            raise ValueError(f"Persisted pool lists address [{record.address}] more than once")
        seen.add(record.address)
    return records


class PoolBackend(ABC):
    @abstractmethod
    def exists(self) -> bool:
        ...

    @abstractmethod
    def load(self) -> Optional[List[IPAddressRecord]]:
        ...

    @abstractmethod
    def save(self, records: List[IPAddressRecord]) -> None:
        ...


class JSONFileBackend(PoolBackend):
    """Stores the pool as one JSON file, replaced atomically on every save."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Optional[List[IPAddressRecord]]:
        if not self.exists():
            return None
        return deserialize_pool(self.path.read_text(encoding="utf-8"))

    def save(self, records: List[IPAddressRecord]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp_file:
            tmp_path = tmp_file.name
            try:
                tmp_file.write(serialize_pool(records))
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            except OSError:
                tmp_file.close()
                os.remove(tmp_path)
                raise

        try:
            os.replace(tmp_path, self.path)
        except OSError:
            os.remove(tmp_path)
            raise
        logger.debug(f"Wrote {len(records)} records to {self.path}")


class InMemoryBackend(PoolBackend):
    """Keeps the serialized document in memory."""

    def __init__(self, document: Optional[str] = None):
        self.document = document

    def exists(self) -> bool:
        return self.document is not None

    def load(self) -> Optional[List[IPAddressRecord]]:
        if self.document is None:
            return None
        return deserialize_pool(self.document)

    def save(self, records: List[IPAddressRecord]) -> None:
        self.document = serialize_pool(records)
