"""Tests for the pool persistence backends."""
import json
import os

import pytest

from ippool.schemas.ip_address import AddressStatus, IPAddressRecord
from ippool.services.storage import InMemoryBackend, JSONFileBackend, serialize_pool

RECORDS = [
    IPAddressRecord(address="10.0.0.0", status=AddressStatus.available),
    IPAddressRecord(address="10.0.0.1", status=AddressStatus.acquired),
]


def test_document_format_is_compact_json_array():
    assert serialize_pool(RECORDS) == (
        '[{"address":"10.0.0.0","status":"available"},'
        '{"address":"10.0.0.1","status":"acquired"}]'
    )


class TestJSONFileBackend:

    def test_missing_file_loads_none(self, data_store_path):
        backend = JSONFileBackend(data_store_path)

        assert not backend.exists()
        assert backend.load() is None

    def test_save_creates_directory_and_round_trips(self, data_store_path):
        backend = JSONFileBackend(data_store_path)

        backend.save(RECORDS)

        assert backend.exists()
        assert backend.load() == RECORDS
        assert json.loads(data_store_path.read_text()) == [
            {"address": "10.0.0.0", "status": "available"},
            {"address": "10.0.0.1", "status": "acquired"},
        ]

    def test_save_overwrites_instead_of_appending(self, data_store_path):
        backend = JSONFileBackend(data_store_path)
        backend.save(RECORDS)

        backend.save(RECORDS[:1])

        assert backend.load() == RECORDS[:1]

    def test_no_temporary_files_left_behind(self, data_store_path):
        backend = JSONFileBackend(data_store_path)
        backend.save(RECORDS)
        backend.save(RECORDS)

        assert os.listdir(data_store_path.parent) == [data_store_path.name]

    def test_failed_rename_keeps_previous_document(self, data_store_path, monkeypatch):
        backend = JSONFileBackend(data_store_path)
        backend.save(RECORDS)
        before = data_store_path.read_bytes()

        def failing_replace(src, dst):
            raise OSError("rename failed")

        monkeypatch.setattr(os, "replace", failing_replace)

        with pytest.raises(OSError, match="rename failed"):
            backend.save(RECORDS[:1])

        assert data_store_path.read_bytes() == before
        assert os.listdir(data_store_path.parent) == [data_store_path.name]

    def test_reads_document_written_by_earlier_versions(self, data_store_path):
        data_store_path.parent.mkdir(parents=True)
        data_store_path.write_text('[{"address":"10.0.0.0","status":"available"}]\n')

        records = JSONFileBackend(data_store_path).load()

        assert records == [IPAddressRecord(address="10.0.0.0", status=AddressStatus.available)]

    def test_invalid_json_raises_value_error(self, data_store_path):
        data_store_path.parent.mkdir(parents=True)
        data_store_path.write_text("garbage")

        with pytest.raises(ValueError):
            JSONFileBackend(data_store_path).load()


class TestInMemoryBackend:

    def test_save_and_load(self):
        backend = InMemoryBackend()
        assert backend.load() is None

        backend.save(RECORDS)

        assert backend.exists()
        assert backend.load() == RECORDS
        assert backend.document == serialize_pool(RECORDS)


def test_repeated_address_raises_value_error():
    document = (
        '[{"address":"10.0.0.1","status":"available"},'
        '{"address":"10.0.0.1","status":"available"}]'
    )

    with pytest.raises(ValueError, match="more than once"):
        InMemoryBackend(document).load()
