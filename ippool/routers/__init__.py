from .ip_addresses import router as ip_addresses_router

__all__ = ["ip_addresses_router"]
