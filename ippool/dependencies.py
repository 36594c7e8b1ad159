from fastapi import Request

from .config import Settings
from .services.address_pool import AddressPoolStore
from .services.storage import JSONFileBackend


def build_store(settings: Settings) -> AddressPoolStore:
    """Construct the process-wide store backed by the configured JSON document."""
    return AddressPoolStore(
        JSONFileBackend(settings.data_store_path),
        minimum_mask_bits=settings.minimum_mask_bits,
    )


def get_store(request: Request) -> AddressPoolStore:
    return request.app.state.store
