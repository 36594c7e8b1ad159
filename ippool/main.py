import logging
from typing import Optional

from fastapi import FastAPI
from contextlib import asynccontextmanager

from . import __version__
from .config import Settings, get_settings
from .dependencies import build_store
from .log_config import setup_logging
from .routers import ip_addresses_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: configure logging
        setup_logging(settings)
        logger.info(f"Address pool document: {settings.data_store_path.resolve()}")
        yield

    app = FastAPI(
        title="IP Address Manager",
        description="""
## IP Address Manager API

Manages a pool of IPv4 addresses generated from one CIDR block.

| Endpoint | Effect |
|----------|--------|
| `/list` | All addresses and their status |
| `/create?address=xxx.xxx.xxx.xxx/yy` | Build the pool from a CIDR block |
| `/acquire?address=xxx.xxx.xxx.xxx` | Mark an address acquired |
| `/release?address=xxx.xxx.xxx.xxx` | Mark an address available |

**Notes**
- IPv4 only; mask bits limited to 24-32 (at most 256 addresses)
- Network and broadcast addresses are part of the pool
- `create` overwrites the existing pool, it does not append
    """,
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = build_store(settings)

    app.include_router(ip_addresses_router, prefix=settings.api_v1_prefix)

    @app.get("/", tags=["Health"])
    def root():
        """Service description and usage notes."""
        prefix = settings.api_v1_prefix
        return {
            "service": "IP Address Manager",
            "version": __version__,
            "notes": [
                "IPv4 addresses only.",
                f"CIDR block mask limited to between {settings.minimum_mask_bits} and 32 bits.",
                "The pool is stored in a single JSON file; calls to create overwrite it, they do not append.",
            ],
            "endpoints": [
                f"{prefix}/list",
                f"{prefix}/create?address=xxx.xxx.xxx.xxx/yy",
                f"{prefix}/acquire?address=xxx.xxx.xxx.xxx",
                f"{prefix}/release?address=xxx.xxx.xxx.xxx",
            ],
        }

    @app.get("/health", tags=["Health"])
    def health_check():
        """Detailed health check."""
        return {
            "status": "healthy",
            "data_store": "present" if app.state.store.backend.exists() else "absent",
        }

    return app


app = create_app()


def run():
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    uvicorn.run("ippool.main:app", host=settings.host, port=settings.port)
